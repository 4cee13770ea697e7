"""
XES writer for Log objects.

Converts a Log into XES markup in two stages:
    1. generate_markup: walk the log and build a flat list of
       StartTag / EndTag events (no text encoding involved)
    2. render_markup: encode that list as UTF-8 XML bytes via lxml

Supports two layouts:
    - INDENTED: one element per line, nested elements indented
    - COMPACT: no whitespace between elements
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Dict, List, Union

from lxml import etree

from xesio.attributes import Attribute, scalar_to_text
from xesio.model import Event, Extension, Log, Trace

logger = logging.getLogger(__name__)

INDENT = "  "


class XmlLayout(Enum):
    """Whitespace layout for rendered XES."""
    INDENTED = "indented"
    COMPACT = "compact"


class XESWriteError(Exception):
    """Raised when markup cannot be rendered."""
    pass


@dataclass(frozen=True)
class StartTag:
    """Opening tag with its XML attributes in output order."""
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EndTag:
    """Closing tag."""
    name: str


Markup = Union[StartTag, EndTag]


def write_extension(extension: Extension, markup: List[Markup]) -> None:
    markup.append(StartTag("extension", {
        "name": extension.name,
        "prefix": extension.prefix,
        "uri": extension.uri,
    }))
    markup.append(EndTag("extension"))


def write_attribute(key: str, attribute: Attribute, markup: List[Markup]) -> None:
    """
    Append the markup for one attribute.

    Scalars become a single element carrying key and value.
    Lists carry only the key and wrap their children.
    """
    tag = attribute.kind.tag
    if attribute.is_list:
        markup.append(StartTag(tag, {"key": key}))
        for child_key, child in attribute.children.items():
            write_attribute(child_key, child, markup)
    else:
        markup.append(StartTag(tag, {"key": key, "value": scalar_to_text(attribute)}))
    markup.append(EndTag(tag))


def _write_attributes(attributes: Dict[str, Attribute], markup: List[Markup]) -> None:
    for key, attribute in attributes.items():
        write_attribute(key, attribute, markup)


def write_event(event: Event, markup: List[Markup]) -> None:
    markup.append(StartTag("event"))
    _write_attributes(event.attributes, markup)
    markup.append(EndTag("event"))


def write_trace(trace: Trace, markup: List[Markup]) -> None:
    markup.append(StartTag("trace"))
    _write_attributes(trace.attributes, markup)
    for event in trace.events:
        write_event(event, markup)
    markup.append(EndTag("trace"))


def write_log(log: Log, markup: List[Markup]) -> None:
    markup.append(StartTag("log", {
        "version": log.version,
        "features": ",".join(log.features),
    }))
    for extension in log.extensions:
        write_extension(extension, markup)
    _write_attributes(log.attributes, markup)
    for trace in log.traces:
        write_trace(trace, markup)
    for event in log.events:
        write_event(event, markup)
    markup.append(EndTag("log"))


def generate_markup(log: Log) -> List[Markup]:
    """
    Build the full markup event list for a log.

    Args:
        log: Log to serialize

    Returns:
        Balanced list of StartTag / EndTag events
    """
    markup: List[Markup] = []
    write_log(log, markup)
    return markup


def render_markup(markup: List[Markup], layout: XmlLayout = XmlLayout.INDENTED) -> bytes:
    """
    Encode a markup event list as UTF-8 XML.

    Args:
        markup: Balanced StartTag / EndTag events
        layout: Whitespace layout

    Returns:
        XML document bytes, starting with an XML declaration

    Raises:
        XESWriteError: If the events are not balanced
    """
    buffer = BytesIO()
    # Open element contexts, innermost last
    open_elements = []
    closed_last = False

    with etree.xmlfile(buffer, encoding="utf-8") as xf:
        xf.write_declaration()
        for item in markup:
            depth = len(open_elements)
            if isinstance(item, StartTag):
                if layout is XmlLayout.INDENTED and depth:
                    xf.write("\n" + INDENT * depth)
                context = xf.element(item.name, item.attributes)
                context.__enter__()
                open_elements.append((item.name, context))
                closed_last = False
            elif isinstance(item, EndTag):
                if not open_elements:
                    raise XESWriteError(f"</{item.name}> has no matching start tag")
                name, context = open_elements.pop()
                if name != item.name:
                    raise XESWriteError(f"</{item.name}> closes <{name}>")
                if layout is XmlLayout.INDENTED and closed_last:
                    xf.write("\n" + INDENT * (depth - 1))
                context.__exit__(None, None, None)
                closed_last = True
            else:
                raise XESWriteError(f"Unsupported markup item: {item!r}")

        if open_elements:
            unclosed = ", ".join(name for name, _ in open_elements)
            raise XESWriteError(f"Unclosed elements: {unclosed}")

    if layout is XmlLayout.INDENTED:
        buffer.write(b"\n")
    return buffer.getvalue()


def generate_xes(log: Log, layout: XmlLayout = XmlLayout.INDENTED) -> bytes:
    """Serialize a log to XES document bytes."""
    return render_markup(generate_markup(log), layout=layout)


def save_xes_file(log: Log, filename, layout: XmlLayout = XmlLayout.INDENTED) -> None:
    """
    Serialize a log and save it to file.

    Args:
        log: Log to write
        filename: Output file path (.xes extension recommended)
        layout: Whitespace layout
    """
    contents = generate_xes(log, layout=layout)
    with open(filename, "wb") as f:
        f.write(contents)
    logger.debug("Wrote %d bytes to %s", len(contents), filename)


__all__ = [
    "XmlLayout",
    "XESWriteError",
    "StartTag",
    "EndTag",
    "Markup",
    "generate_markup",
    "render_markup",
    "generate_xes",
    "save_xes_file",
    "write_log",
    "write_trace",
    "write_event",
    "write_attribute",
    "write_extension",
]
