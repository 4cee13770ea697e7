"""
Core XES Model Objects

Defines the domain tree an XES document maps to.

These are pure data classes representing:
    - Extensions (declared attribute namespaces)
    - Events (attribute bags)
    - Traces (ordered events of one case)
    - Logs (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about XML
        - Own their children exclusively (no shared or back references)
        - Are only ever appended to by their owner
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .attributes import Attribute


@dataclass
class Extension:
    """
    Declares an XES extension used by attribute keys in a log.

    Example:
        <extension name="Concept" prefix="concept"
                   uri="http://www.xes-standard.org/concept.xesext"/>

    Properties:
        name: Human-readable extension name
        prefix: Key prefix the extension owns (e.g. "concept")
        uri: Location of the extension definition
    """

    name: str
    prefix: str
    uri: str


@dataclass
class Event:
    """
    An atomic occurrence, represented solely by its attributes.

    Properties:
        attributes: Keyed attribute bag (keys unique within the event)
    """

    attributes: Dict[str, Attribute] = field(default_factory=dict)


@dataclass
class Trace:
    """
    The events of one case / process instance.

    Properties:
        attributes: Keyed trace-level attributes
        events: Events in document order

    IMPORTANT:
        Event order is significant and must be preserved
        by every reader and writer.
    """

    attributes: Dict[str, Attribute] = field(default_factory=dict)
    events: List[Event] = field(default_factory=list)


@dataclass
class Log:
    """
    Root container of an XES document.

    Properties:
        version:
            Declared XES version text (e.g. "1.0")

        features:
            Declared feature flags in declaration order
            Example: ["nested-attributes"]

        extensions:
            Extension declarations in document order

        attributes:
            Keyed log-level attributes

        traces:
            Traces in document order

        events:
            Events owned directly by the log (outside any trace)

    DESIGN NOTE:
        Log(version, features) starts with empty collections
        so logs can be built programmatically by appending.
    """

    version: str
    features: List[str] = field(default_factory=list)
    extensions: List[Extension] = field(default_factory=list)
    attributes: Dict[str, Attribute] = field(default_factory=dict)
    traces: List[Trace] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)

    def get_extension(self, prefix: str) -> Optional[Extension]:
        """
        Retrieve an extension by prefix.

        Args:
            prefix: Extension prefix (e.g. "concept")

        Returns:
            Extension object or None if not declared
        """
        for extension in self.extensions:
            if extension.prefix == prefix:
                return extension
        return None
