"""Tests for the JSON to CSV converter."""

import pytest

from clean_json.processors.csv_converter import JSONToCSVConverter, escape_csv
from clean_json.types import ErrorType, JSONParseError, JSONShapeError


class TestJSONToCSVConverter:
    """Tests for JSONToCSVConverter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = JSONToCSVConverter()

    def test_array_of_objects(self):
        result = self.converter.convert('[{"name":"John","age":30},{"name":"Jane","age":25}]')

        assert result == "name,age\nJohn,30\nJane,25"

    def test_header_is_union_of_keys(self):
        assert self.converter.convert('[{"a":1},{"b":2}]') == "a,b\n1,\n,2"

    def test_header_keeps_first_seen_order(self):
        result = self.converter.convert('[{"b":1,"a":2},{"c":3,"a":4}]')

        assert result.split("\n")[0] == "b,a,c"
        assert result.split("\n")[2] == ",4,3"

    def test_null_bool_and_nested_cells(self):
        result = self.converter.convert('[{"n":null,"t":true,"o":{"x":1},"l":[1,2]}]')

        assert result == 'n,t,o,l\n,true,"{""x"":1}","[1,2]"'

    def test_array_of_values(self):
        assert self.converter.convert('[1,"two",null,true]') == "1\ntwo\n\ntrue"

    def test_mixed_array_uses_value_rows(self):
        assert self.converter.convert('[{"a":1},2]') == '"{""a"":1}"\n2'

    def test_single_object(self):
        assert self.converter.convert('{"name":"John","age":30}') == "name,age\nJohn,30"

    def test_empty_array(self):
        assert self.converter.convert("[]") == ""

    def test_custom_delimiter(self):
        result = self.converter.convert('[{"a":"x;y","b":"z,w"}]', delimiter=";")

        assert result == 'a;b\n"x;y";z,w'

    def test_line_breaks_are_quoted(self):
        assert self.converter.convert('[{"a":"l1\\nl2"}]') == 'a\n"l1\nl2"'

    @pytest.mark.parametrize("text", ['"text"', "42", "null", "true"])
    def test_scalar_is_rejected(self, text):
        with pytest.raises(JSONShapeError) as exc_info:
            self.converter.convert(text)

        assert str(exc_info.value) == "Input must be an array or object to convert to CSV"
        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_empty_delimiter(self):
        with pytest.raises(ValueError):
            self.converter.convert("[1]", delimiter="")

    def test_invalid_json(self):
        with pytest.raises(JSONParseError):
            self.converter.convert("[1,")


class TestEscapeCSV:
    """Tests for escape_csv."""

    @pytest.mark.parametrize("value,expected", [
        ("plain", "plain"),
        ("a,b", '"a,b"'),
        ('say "hi"', '"say ""hi"""'),
        ("a\rb", '"a\rb"'),
        ("", ""),
    ])
    def test_escape(self, value, expected):
        assert escape_csv(value, ",") == expected

    def test_other_delimiter(self):
        assert escape_csv("a,b", "\t") == "a,b"
        assert escape_csv("a\tb", "\t") == '"a\tb"'
