"""Tests for JSON literal encoding of fields and values."""

import math
from unittest.mock import patch

import pytest

from quri import ExpressionGroup
from quri.encoding import encode_value, quote_field
from quri.exceptions import EncodingError, QuriError
from quri.settings import settings


class TestQuoteField:
    """Test field name quoting."""

    def test_plain(self):
        assert quote_field("customer_name") == '"customer_name"'

    def test_escapes(self):
        assert quote_field('a"b\\c\n') == '"a\\"b\\\\c\\n"'

    def test_unicode_kept(self):
        """Non-ASCII characters are not escaped by default."""
        assert quote_field("prénom") == '"prénom"'

    def test_unicode_escaped_when_configured(self):
        with patch.object(settings, "QURI_ENSURE_ASCII", True):
            assert quote_field("prénom") == '"pr\\u00e9nom"'

    def test_non_string(self):
        with pytest.raises(EncodingError):
            quote_field(1)


class TestEncodeValue:
    """Test value encoding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Greg%", '"Greg%"'),
            (21, "21"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ("[not a list]", '"[not a list]"'),
        ],
    )
    def test_scalars(self, value, expected):
        assert encode_value(value) == expected

    def test_list_unwrapped(self):
        assert encode_value([1, "two", None]) == '1,"two",null'

    def test_tuple_unwrapped(self):
        assert encode_value((1, 2)) == "1,2"

    def test_empty_list(self):
        """An empty sequence renders as nothing."""
        assert encode_value([]) == ""

    def test_nested_list_keeps_inner_brackets(self):
        assert encode_value([[1, 2], [3]]) == "[1,2],[3]"

    def test_mapping_kept_whole(self):
        """Non-sequence containers render as full JSON literals."""
        assert encode_value({"a": 1}) == '{"a":1}'

    def test_unsupported_type(self):
        with pytest.raises(EncodingError) as exc_info:
            encode_value(object(), field="x")
        assert exc_info.value.details == {"value_type": "object", "field": "x"}
        assert isinstance(exc_info.value.__cause__, TypeError)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_floats(self, value):
        """NaN and infinity are not valid JSON literals."""
        with pytest.raises(EncodingError):
            encode_value(value)

    def test_circular_container(self):
        value = []
        value.append(value)
        with pytest.raises(EncodingError):
            encode_value(value)

    def test_encoding_error_hierarchy(self):
        with pytest.raises(ValueError):
            encode_value({1, 2})
        with pytest.raises(QuriError):
            encode_value({1, 2})


class TestNumberFormatting:
    """Test float formatting matches JSON.stringify for whole numbers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.0, "1"),
            (-3.0, "-3"),
            (1e16, "10000000000000000"),
            (0.5, "0.5"),
            (1e21, "1e+21"),
        ],
    )
    def test_scalar_floats(self, value, expected):
        assert encode_value(value) == expected

    def test_sequence_floats(self):
        assert encode_value([1.0, 2.5, 3]) == "1,2.5,3"

    def test_booleans_untouched(self):
        """bool is not a float and keeps its literal."""
        assert encode_value([True, 1.0]) == "true,1"

    def test_render_uses_integral_form(self):
        group = ExpressionGroup().append_comparison("price", "between", (10.0, 20.5))
        assert group.render() == '"price".between(10,20.5)'


class TestSurrogates:
    """Test lone surrogates are escaped so the output stays valid UTF-8."""

    def test_field_name(self):
        encoded = quote_field("a\ud800b")
        assert encoded == '"a\\ud800b"'
        encoded.encode("utf-8")

    def test_value_in_sequence(self):
        assert encode_value(["x\udfff"]) == '"x\\udfff"'

    def test_regular_non_ascii_untouched(self):
        assert encode_value("😀") == '"😀"'
