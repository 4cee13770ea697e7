"""
Attribute System for XES

Every piece of data attached to a log, trace or event is an attribute:
a typed value stored under a key. Attributes are either scalars or
nested lists of further attributes.

This module is the single source of truth for:
    - Which XML tags denote attributes
    - Which attribute kind each tag maps to
    - How scalar values are read from and rendered to text

ARCHITECTURAL RULE:
    Parser and writer both classify through this module.
    Neither keeps its own tag table.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Union


class AttributeKind(Enum):
    """
    The closed set of XES attribute kinds.

    Each member's value is the element tag the writer emits for it.
    """

    LIST = "list"
    STRING = "string"
    DATETIME = "date"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    ID = "id"

    @property
    def tag(self) -> str:
        return self.value


_TAG_TO_KIND: Dict[str, AttributeKind] = {kind.value: kind for kind in AttributeKind}
# Older writers use "datetime"; both spellings read as DATETIME.
_TAG_TO_KIND["datetime"] = AttributeKind.DATETIME

ATTRIBUTE_TAGS: FrozenSet[str] = frozenset(_TAG_TO_KIND)

TEXT_KINDS: FrozenSet[AttributeKind] = frozenset(
    {AttributeKind.STRING, AttributeKind.DATETIME, AttributeKind.ID}
)

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

_LONG_RE = re.compile(r"[+-]?[0-9]+")
_BOOLEAN_LITERALS = {"true": True, "false": False}

ScalarValue = Union[str, int, float, bool]


@dataclass(frozen=True)
class Attribute:
    """
    A single typed XES attribute value.

    Examples:
        <string key="concept:name" value="register"/>
        <long key="amount" value="42"/>
        <list key="items"> ... </list>

    Become:
        Attribute.string("register")
        Attribute.long(42)
        Attribute.list({...})

    Properties:
        kind: AttributeKind of this value
        value:
            str for STRING / DATETIME / ID
            int for LONG
            float for DOUBLE
            bool for BOOLEAN
            Dict[str, Attribute] for LIST (the child attributes)

    IMPORTANT:
        A LIST has no scalar value of its own.
        Its content is entirely the keyed child attributes.
    """

    kind: AttributeKind
    value: Union[ScalarValue, Dict[str, "Attribute"]]

    @classmethod
    def string(cls, text: str) -> "Attribute":
        return cls(AttributeKind.STRING, text)

    @classmethod
    def datetime(cls, text: str) -> "Attribute":
        return cls(AttributeKind.DATETIME, text)

    @classmethod
    def long(cls, number: int) -> "Attribute":
        return cls(AttributeKind.LONG, number)

    @classmethod
    def double(cls, number: float) -> "Attribute":
        return cls(AttributeKind.DOUBLE, number)

    @classmethod
    def boolean(cls, flag: bool) -> "Attribute":
        return cls(AttributeKind.BOOLEAN, flag)

    @classmethod
    def id(cls, text: str) -> "Attribute":
        return cls(AttributeKind.ID, text)

    @classmethod
    def list(cls, children: Dict[str, "Attribute"] = None) -> "Attribute":
        return cls(AttributeKind.LIST, dict(children or {}))

    @property
    def is_list(self) -> bool:
        return self.kind is AttributeKind.LIST

    @property
    def children(self) -> Dict[str, "Attribute"]:
        """Child attributes of a LIST. Raises TypeError for scalars."""
        if not self.is_list:
            raise TypeError(f"{self.kind.name} attribute has no children")
        return self.value


def kind_for_tag(tag: str) -> AttributeKind:
    """
    Classify an element tag.

    Raises:
        KeyError: If the tag does not denote an attribute
    """
    return _TAG_TO_KIND[tag]


def scalar_from_text(kind: AttributeKind, text: str) -> Attribute:
    """
    Build a scalar attribute from its textual form.

    Args:
        kind: Target scalar kind
        text: Raw text of the XML value attribute

    Returns:
        Attribute of the given kind

    Raises:
        ValueError: If the text is not a valid literal for the kind,
            or the kind is LIST
    """
    if kind in TEXT_KINDS:
        return Attribute(kind, text)

    if kind is AttributeKind.LONG:
        if not _LONG_RE.fullmatch(text):
            raise ValueError(f"invalid long literal: {text!r}")
        number = int(text)
        if not LONG_MIN <= number <= LONG_MAX:
            raise ValueError(f"long literal out of 64-bit range: {text!r}")
        return Attribute.long(number)

    if kind is AttributeKind.DOUBLE:
        if text != text.strip() or "_" in text:
            raise ValueError(f"invalid double literal: {text!r}")
        return Attribute.double(float(text))

    if kind is AttributeKind.BOOLEAN:
        if text not in _BOOLEAN_LITERALS:
            raise ValueError(f"invalid boolean literal: {text!r}")
        return Attribute.boolean(_BOOLEAN_LITERALS[text])

    raise ValueError(f"{kind.name} is not a scalar kind")


def scalar_to_text(attribute: Attribute) -> str:
    """Render a scalar attribute value in its canonical text form."""
    kind = attribute.kind
    if kind in TEXT_KINDS:
        return attribute.value
    if kind is AttributeKind.LONG:
        return str(int(attribute.value))
    if kind is AttributeKind.DOUBLE:
        return repr(float(attribute.value))
    if kind is AttributeKind.BOOLEAN:
        return "true" if attribute.value else "false"
    raise TypeError(f"{kind.name} attribute has no text form")
