"""
Tests for the XES attribute system.

These tests verify:
    - Tag classification (shared by parser and writer)
    - Scalar literal parsing for every kind
    - Canonical text rendering
    - List attribute structure
"""

import math

import pytest
from xesio.attributes import (
    ATTRIBUTE_TAGS,
    Attribute,
    AttributeKind,
    LONG_MAX,
    LONG_MIN,
    kind_for_tag,
    scalar_from_text,
    scalar_to_text,
)


class TestTagClassification:
    """Test the tag → kind table."""

    def test_recognized_tags(self):
        assert ATTRIBUTE_TAGS == {
            "list", "string", "datetime", "date", "long", "double", "boolean", "id",
        }

    @pytest.mark.parametrize("tag,kind", [
        ("list", AttributeKind.LIST),
        ("string", AttributeKind.STRING),
        ("datetime", AttributeKind.DATETIME),
        ("date", AttributeKind.DATETIME),
        ("long", AttributeKind.LONG),
        ("double", AttributeKind.DOUBLE),
        ("boolean", AttributeKind.BOOLEAN),
        ("id", AttributeKind.ID),
    ])
    def test_kind_for_tag(self, tag, kind):
        assert kind_for_tag(tag) is kind

    def test_unknown_tag_raises(self):
        with pytest.raises(KeyError):
            kind_for_tag("trace")

    def test_every_kind_tag_is_recognized(self):
        """Whatever the writer emits, the parser must accept."""
        for kind in AttributeKind:
            assert kind.tag in ATTRIBUTE_TAGS
            assert kind_for_tag(kind.tag) is kind

    def test_datetime_written_as_date(self):
        assert AttributeKind.DATETIME.tag == "date"


class TestScalarFromText:
    """Test lexical parsing of scalar values."""

    def test_text_kinds_are_verbatim(self):
        assert scalar_from_text(AttributeKind.STRING, " a b ") == Attribute.string(" a b ")
        assert scalar_from_text(AttributeKind.ID, "x-1") == Attribute.id("x-1")
        assert scalar_from_text(AttributeKind.DATETIME, "2024-01-01T00:00:00") == \
            Attribute.datetime("2024-01-01T00:00:00")

    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("0", 0),
        (str(LONG_MAX), LONG_MAX),
        (str(LONG_MIN), LONG_MIN),
    ])
    def test_long(self, text, expected):
        assert scalar_from_text(AttributeKind.LONG, text) == Attribute.long(expected)

    @pytest.mark.parametrize("text", ["", "4.2", "1_000", " 1", "abc", str(LONG_MAX + 1), str(LONG_MIN - 1)])
    def test_invalid_long(self, text):
        with pytest.raises(ValueError):
            scalar_from_text(AttributeKind.LONG, text)

    @pytest.mark.parametrize("text,expected", [
        ("1.5", 1.5),
        ("-0.25", -0.25),
        ("3", 3.0),
        ("1e3", 1000.0),
        ("inf", math.inf),
    ])
    def test_double(self, text, expected):
        assert scalar_from_text(AttributeKind.DOUBLE, text) == Attribute.double(expected)

    def test_double_nan(self):
        attribute = scalar_from_text(AttributeKind.DOUBLE, "NaN")
        assert math.isnan(attribute.value)

    @pytest.mark.parametrize("text", ["", "one", "1_0.0", " 1.0", "1.0\n"])
    def test_invalid_double(self, text):
        with pytest.raises(ValueError):
            scalar_from_text(AttributeKind.DOUBLE, text)

    def test_boolean(self):
        assert scalar_from_text(AttributeKind.BOOLEAN, "true") == Attribute.boolean(True)
        assert scalar_from_text(AttributeKind.BOOLEAN, "false") == Attribute.boolean(False)

    @pytest.mark.parametrize("text", ["True", "FALSE", "1", "yes", ""])
    def test_invalid_boolean(self, text):
        with pytest.raises(ValueError):
            scalar_from_text(AttributeKind.BOOLEAN, text)

    def test_list_is_not_scalar(self):
        with pytest.raises(ValueError):
            scalar_from_text(AttributeKind.LIST, "x")


class TestScalarToText:
    """Test canonical rendering."""

    def test_long(self):
        assert scalar_to_text(Attribute.long(-12)) == "-12"

    def test_double(self):
        assert scalar_to_text(Attribute.double(2.5)) == "2.5"
        assert float(scalar_to_text(Attribute.double(0.1))) == 0.1

    def test_boolean(self):
        assert scalar_to_text(Attribute.boolean(True)) == "true"
        assert scalar_to_text(Attribute.boolean(False)) == "false"

    def test_text_kinds(self):
        assert scalar_to_text(Attribute.string("hello")) == "hello"
        assert scalar_to_text(Attribute.id("id-1")) == "id-1"
        assert scalar_to_text(Attribute.datetime("2024-01-01")) == "2024-01-01"

    def test_list_has_no_text(self):
        with pytest.raises(TypeError):
            scalar_to_text(Attribute.list())


class TestListAttribute:
    """Test nested list attributes."""

    def test_empty_list(self):
        attribute = Attribute.list()
        assert attribute.is_list
        assert attribute.children == {}

    def test_children(self):
        attribute = Attribute.list({"a": Attribute.long(1)})
        assert attribute.children["a"] == Attribute.long(1)

    def test_scalar_has_no_children(self):
        with pytest.raises(TypeError):
            Attribute.string("x").children

    def test_equality_ignores_child_order(self):
        first = Attribute.list({"a": Attribute.long(1), "b": Attribute.string("x")})
        second = Attribute.list({"b": Attribute.string("x"), "a": Attribute.long(1)})
        assert first == second

    def test_kinds_distinguish_equal_text(self):
        assert Attribute.string("x") != Attribute.id("x")
