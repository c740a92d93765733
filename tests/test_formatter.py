"""Tests for the JSON formatter."""

import json

import pytest

from clean_json.formatter import JSONFormatter
from clean_json.types import FormatOptions, IndentType, JSONParseError


class TestJSONFormatter:
    """Tests for JSONFormatter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = JSONFormatter()

    def test_format_preserves_key_order(self):
        result = self.formatter.format('{"b":1,"a":2}', FormatOptions(indent=2, indent_type="space"))

        assert result == '{\n  "b": 1,\n  "a": 2\n}'

    def test_format_sort_keys(self):
        result = self.formatter.format('{"b":1,"a":2}', FormatOptions(sort_keys=True))

        assert result == '{\n  "a": 2,\n  "b": 1\n}'
        assert result.index('"a"') < result.index('"b"')

    def test_sort_keys_applies_to_nested_objects(self):
        result = self.formatter.format('{"z":{"y":1,"x":2},"a":[{"d":1,"c":2}]}',
                                       FormatOptions(sort_keys=True))

        assert json.loads(result) == {"a": [{"c": 2, "d": 1}], "z": {"x": 2, "y": 1}}
        assert list(json.loads(result)["z"]) == ["x", "y"]
        assert list(json.loads(result)["a"][0]) == ["c", "d"]

    def test_default_options(self):
        assert self.formatter.format('[1,2]') == '[\n  1,\n  2\n]'

    def test_four_space_indent(self):
        result = self.formatter.format('{"a":[1]}', FormatOptions(indent=4))

        assert result == '{\n    "a": [\n        1\n    ]\n}'

    def test_tab_indent(self):
        result = self.formatter.format('{"a":{"b":true}}', FormatOptions(indent_type=IndentType.TAB))

        assert result == '{\n\t"a": {\n\t\t"b": true\n\t}\n}'

    def test_tab_ignores_indent_width(self):
        options = FormatOptions(indent=8, indent_type="tab")

        assert self.formatter.format('[null]', options) == '[\n\tnull\n]'

    def test_empty_containers(self):
        assert self.formatter.format('{}') == '{}'
        assert self.formatter.format('[]') == '[]'
        assert self.formatter.format('{"a":[],"b":{}}') == '{\n  "a": [],\n  "b": {}\n}'

    def test_scalars(self):
        assert self.formatter.format('"text"') == '"text"'
        assert self.formatter.format('false') == 'false'
        assert self.formatter.format('null') == 'null'
        assert self.formatter.format(' 42 ') == '42'

    def test_big_integers_survive(self):
        """Integers beyond double precision keep every digit."""
        result = self.formatter.format('{"id":12345678901234567890123456789}')

        assert '"id": 12345678901234567890123456789' in result
        assert "e+" not in result.lower()

    def test_decimal_literals_survive(self):
        result = self.formatter.format('[1.50, 0.1, -0.0, 1e400]')

        assert result == '[\n  1.50,\n  0.1,\n  -0.0,\n  1E+400\n]'

    def test_string_escaping(self):
        result = self.formatter.format('["line\\nbreak", "quote\\"", "tab\\t", "你好"]')

        assert '"line\\nbreak"' in result
        assert '"quote\\""' in result
        assert '"tab\\t"' in result
        assert '"你好"' in result

    def test_keys_are_escaped(self):
        result = self.formatter.format('{"say \\"hi\\"": 1}')

        assert json.loads(result) == {'say "hi"': 1}

    def test_deeply_nested_arrays(self):
        result = self.formatter.format("[" * 500 + "]" * 500)
        lines = result.split("\n")

        assert len(lines) == 999
        assert lines[1] == "  ["
        assert lines[499] == "  " * 499 + "[]"
        assert lines[-1] == "]"

    def test_invalid_json_raises_with_location(self):
        with pytest.raises(JSONParseError) as exc_info:
            self.formatter.format('{\n  "a": 1,\n  "b" 2\n}')

        error = exc_info.value
        assert error.line == 3
        assert error.column == 7
        assert error.position == len('{\n  "a": 1,\n  "b" ')

    def test_round_trip(self, sample_json):
        result = self.formatter.format(sample_json, FormatOptions(indent=3))

        assert json.loads(result) == json.loads(sample_json)

    @pytest.mark.parametrize("options", [
        FormatOptions(),
        FormatOptions(indent=4, sort_keys=True),
        FormatOptions(indent_type=IndentType.TAB),
    ])
    def test_idempotent(self, sample_json, options):
        once = self.formatter.format(sample_json, options)

        assert self.formatter.format(once, options) == once


class TestFormatOptions:
    """Tests for FormatOptions validation."""

    def test_defaults(self):
        options = FormatOptions()

        assert options.indent == 2
        assert options.indent_type == IndentType.SPACE
        assert options.sort_keys is False
        assert options.indent_unit == "  "

    def test_string_indent_type_is_coerced(self):
        assert FormatOptions(indent_type="tab").indent_type == IndentType.TAB

    @pytest.mark.parametrize("indent", [0, -2])
    def test_non_positive_indent_rejected(self, indent):
        with pytest.raises(ValueError):
            FormatOptions(indent=indent)

    def test_non_integer_indent_rejected(self):
        with pytest.raises(ValueError):
            FormatOptions(indent="2")

    def test_unknown_indent_type_rejected(self):
        with pytest.raises(ValueError):
            FormatOptions(indent_type="dots")
