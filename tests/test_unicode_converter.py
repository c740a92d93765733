"""Tests for the unicode converter."""

import pytest

from clean_json.processors.unicode_converter import UnicodeConverter, escape_unicode
from clean_json.types import JSONParseError


class TestUnicodeConverter:
    """Tests for UnicodeConverter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = UnicodeConverter()

    def test_to_unicode_escapes_cjk(self):
        result = self.converter.to_unicode('{"greeting": "你好"}')

        assert result == '{\n  "greeting": "\\u4f60\\u597d"\n}'

    def test_to_unicode_uses_lowercase_padded_hex(self):
        result = self.converter.to_unicode('["é", "\\u0080", "Ω"]')

        assert result == '[\n  "\\u00e9",\n  "\\u0080",\n  "\\u03a9"\n]'

    def test_to_unicode_leaves_ascii_alone(self):
        result = self.converter.to_unicode('{"plain": "abc ~ \\u007f"}')

        assert result == '{\n  "plain": "abc ~ \x7f"\n}'

    def test_to_unicode_leaves_keys_alone(self):
        result = self.converter.to_unicode('{"名前": "太郎"}')

        assert result == '{\n  "名前": "\\u592a\\u90ce"\n}'

    def test_to_unicode_astral_characters_use_surrogate_pairs(self):
        result = self.converter.to_unicode('"😀"')

        assert result == '"\\ud83d\\ude00"'

    def test_to_unicode_does_not_double_backslashes(self):
        result = self.converter.to_unicode('{"a": "ü", "b": "x\\\\y"}')

        assert "\\\\u" not in result
        assert '"\\u00fc"' in result
        assert '"x\\\\y"' in result

    def test_to_unicode_keeps_other_values(self):
        result = self.converter.to_unicode('{"n": 1.5, "b": true, "z": null, "l": []}')

        assert result == '{\n  "n": 1.5,\n  "b": true,\n  "z": null,\n  "l": []\n}'

    def test_from_unicode(self):
        result = self.converter.from_unicode('{"greeting": "\\u4f60\\u597d"}')

        assert result == '{\n  "greeting": "你好"\n}'

    def test_from_unicode_surrogate_pair(self):
        assert self.converter.from_unicode('["\\ud83d\\ude00"]') == '[\n  "😀"\n]'

    def test_round_trip(self):
        text = '{"city": "Zürich", "emoji": "🎉", "name": "Ålesund"}'

        restored = self.converter.from_unicode(self.converter.to_unicode(text))

        assert restored == self.converter.from_unicode(text)

    @pytest.mark.parametrize("method", ["to_unicode", "from_unicode"])
    def test_invalid_json(self, method):
        with pytest.raises(JSONParseError):
            getattr(self.converter, method)('{"a": "你好"')


class TestEscapeUnicode:
    """Tests for escape_unicode."""

    def test_boundaries(self):
        assert escape_unicode("\x7f") == "\x7f"
        assert escape_unicode("\x80") == "\\u0080"
        assert escape_unicode("\uffff") == "\\uffff"
        assert escape_unicode("\U00010000") == "\\ud800\\udc00"
