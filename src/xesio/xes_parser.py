"""
XES Parser (XML document → domain tree).

Converts XES documents to Log objects.

Grammar:
    log[version, features] > (extension | <attribute> | trace | event)*
    trace > <attribute>*, event*
    event > <attribute>*
    list  > <attribute>*          (recursively)

    <attribute> is any element tagged list, string, date, datetime,
    long, double, boolean or id, carrying "key" and (for scalars) "value".

Parsing Notes:
    - Tags are matched on their local name; namespaces are ignored
    - Duplicate attribute keys: the later element wins
    - Any missing mandatory attribute or bad literal aborts the whole parse
"""

import logging
from typing import Iterator, List, Optional, Tuple, Union

from lxml import etree

from xesio.attributes import (
    ATTRIBUTE_TAGS,
    Attribute,
    AttributeKind,
    kind_for_tag,
    scalar_from_text,
)
from xesio.model import Event, Extension, Log, Trace

logger = logging.getLogger(__name__)


class XESParseError(Exception):
    """Raised when XES parsing fails."""
    pass


class MalformedXMLError(XESParseError):
    """Raised when the input is not well-formed XML."""
    pass


class MissingAttributeError(XESParseError):
    """Raised when an element lacks a mandatory XML attribute."""

    def __init__(self, element_name: str, attribute_name: str, line: Optional[int] = None):
        self.element_name = element_name
        self.attribute_name = attribute_name
        self.line = line
        super().__init__(
            f"<{element_name}> is missing required attribute '{attribute_name}'{_at_line(line)}"
        )


class UnrecognizedAttributeTagError(XESParseError):
    """Raised when an element carrying a value is not a scalar attribute tag."""
    pass


class ScalarValueError(XESParseError):
    """Raised when a value does not parse as its declared type."""
    pass


def _at_line(line: Optional[int]) -> str:
    return f" (line {line})" if line else ""


def _local_name(element) -> Optional[str]:
    """Local tag name, or None for comments, PIs and entities."""
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _children_named(element, name: str) -> Iterator:
    for child in element:
        if _local_name(child) == name:
            yield child


def _attribute_children(element) -> Iterator:
    for child in element:
        if _local_name(child) in ATTRIBUTE_TAGS:
            yield child


def _require(element, attribute_name: str) -> str:
    value = element.get(attribute_name)
    if value is None:
        raise MissingAttributeError(_local_name(element), attribute_name, element.sourceline)
    return value


def parse_attribute(element) -> Tuple[str, Attribute]:
    """
    Parse one attribute element into a (key, Attribute) pair.

    An element with a "value" is a scalar typed by its tag.
    An element without one is a list of its attribute children.

    Raises:
        MissingAttributeError: If "key" is absent
        UnrecognizedAttributeTagError: If the tag is not a scalar attribute tag
        ScalarValueError: If the value is not a valid literal
    """
    key = _require(element, "key")
    tag = _local_name(element)
    text = element.get("value")

    if text is None:
        children = {}
        for child in _attribute_children(element):
            child_key, child_value = parse_attribute(child)
            children[child_key] = child_value
        return key, Attribute.list(children)

    try:
        kind = kind_for_tag(tag)
    except KeyError:
        raise UnrecognizedAttributeTagError(
            f"<{tag}> is not an attribute tag{_at_line(element.sourceline)}"
        )
    if kind is AttributeKind.LIST:
        raise UnrecognizedAttributeTagError(
            f"<list key={key!r}> cannot carry a value{_at_line(element.sourceline)}"
        )

    try:
        return key, scalar_from_text(kind, text)
    except ValueError as e:
        raise ScalarValueError(
            f"Bad value for <{tag} key={key!r}>{_at_line(element.sourceline)}: {e}"
        )


def _parse_attributes(element) -> dict:
    attributes = {}
    for child in _attribute_children(element):
        key, value = parse_attribute(child)
        attributes[key] = value
    return attributes


def parse_event(element) -> Event:
    """Parse an <event> element."""
    return Event(attributes=_parse_attributes(element))


def parse_trace(element) -> Trace:
    """Parse a <trace> element; events keep document order."""
    events = [parse_event(child) for child in _children_named(element, "event")]
    return Trace(attributes=_parse_attributes(element), events=events)


def parse_extension(element) -> Extension:
    """Parse an <extension> declaration."""
    return Extension(
        name=_require(element, "name"),
        prefix=_require(element, "prefix"),
        uri=_require(element, "uri"),
    )


def split_features(declaration: str) -> List[str]:
    """Split a comma-separated features declaration into trimmed tokens."""
    if not declaration.strip():
        return []
    return [token.strip() for token in declaration.split(",")]


def parse_log(element) -> Log:
    """
    Parse a <log> element.

    Args:
        element: lxml element whose local name is "log"

    Returns:
        Log with extensions, attributes, traces and top-level events

    Raises:
        MissingAttributeError: If "version" or "features" is absent
        ScalarValueError: If "version" is not numeric
    """
    version = _require(element, "version")
    try:
        float(version)
    except ValueError:
        raise ScalarValueError(
            f"Log version {version!r} is not numeric{_at_line(element.sourceline)}"
        )
    features = split_features(_require(element, "features"))

    log = Log(version=version, features=features)
    for child in _children_named(element, "extension"):
        log.extensions.append(parse_extension(child))
    log.attributes.update(_parse_attributes(element))
    for child in _children_named(element, "trace"):
        log.traces.append(parse_trace(child))
    for child in _children_named(element, "event"):
        log.events.append(parse_event(child))
    return log


def parse_xes_document(root) -> List[Log]:
    """
    Parse every log in a document.

    The document element is either a <log> itself, or a container
    whose <log> children are each parsed independently.
    """
    if _local_name(root) == "log":
        return [parse_log(root)]
    return [parse_log(child) for child in _children_named(root, "log")]


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def parse_xes_string(content: Union[str, bytes]) -> List[Log]:
    """
    Parse XES content into Log objects.

    Args:
        content: XES document as bytes, or as str (encoded as UTF-8)

    Returns:
        One Log per <log> element, in document order

    Raises:
        MalformedXMLError: If the content is not well-formed XML
        XESParseError: If the XES structure is invalid
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    try:
        root = etree.fromstring(content, parser=_xml_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedXMLError(f"Invalid XES XML: {e}") from e
    return parse_xes_document(root)


def parse_xes_file(filepath) -> List[Log]:
    """
    Parse an XES file into Log objects.

    Args:
        filepath: Path to the .xes file

    Returns:
        One Log per <log> element

    Raises:
        FileNotFoundError: If file doesn't exist
        XESParseError: If parsing fails
    """
    with open(filepath, "rb") as f:
        content = f.read()
    logger.debug("Read %d bytes from %s", len(content), filepath)

    logs = parse_xes_string(content)
    logger.debug("Parsed %d log(s) from %s", len(logs), filepath)
    return logs


__all__ = [
    "parse_xes_file",
    "parse_xes_string",
    "parse_xes_document",
    "parse_log",
    "parse_trace",
    "parse_event",
    "parse_extension",
    "parse_attribute",
    "split_features",
    "XESParseError",
    "MalformedXMLError",
    "MissingAttributeError",
    "UnrecognizedAttributeTagError",
    "ScalarValueError",
]
