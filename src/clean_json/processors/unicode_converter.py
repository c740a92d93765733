"""Unicode escaping and unescaping of JSON string values."""

import logging
import re
from typing import Optional

from ..parser import JSONParser
from ..serializer import JSONSerializer, quote_string

UNICODE_INDENT = "  "

_ESCAPABLE = re.compile(r"[\u0080-\U0010ffff]")


def _escape_char(match: "re.Match") -> str:
    code = ord(match.group())
    if code > 0xFFFF:
        # astral characters are written as a UTF-16 surrogate pair
        code -= 0x10000
        return f"\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}"
    return f"\\u{code:04x}"


def escape_unicode(encoded: str) -> str:
    """Replace every character from U+0080 upwards with ``\\uXXXX`` escapes."""
    return _ESCAPABLE.sub(_escape_char, encoded)


def quote_string_ascii(value: str) -> str:
    """Quote a string value, escaping its non-ASCII characters."""
    return escape_unicode(quote_string(value))


class UnicodeConverter:
    """
    Converts non-ASCII characters in string values to and from escapes.

    Only string values are escaped; object keys are written as they are.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 serializer: Optional[JSONSerializer] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)
        self.serializer = serializer or JSONSerializer()

    def to_unicode(self, text: str) -> str:
        """
        Escape non-ASCII characters in string values.

        Example: ``{"greeting": "你好"}`` becomes
        ``{"greeting": "\\u4f60\\u597d"}`` (indented by two spaces).

        Args:
            text: JSON text

        Returns:
            JSON text indented by two spaces with escaped string values

        Raises:
            JSONParseError: If text is not valid JSON
        """
        return self.serializer.serialize(
            self.parser.parse(text),
            indent_unit=UNICODE_INDENT,
            string_encoder=quote_string_ascii
        )

    def from_unicode(self, text: str) -> str:
        """
        Decode ``\\uXXXX`` escapes back into characters.

        Parsing already decodes the escapes, so the value is simply
        re-serialized.

        Args:
            text: JSON text

        Returns:
            JSON text indented by two spaces

        Raises:
            JSONParseError: If text is not valid JSON
        """
        return self.serializer.serialize(self.parser.parse(text), indent_unit=UNICODE_INDENT)
