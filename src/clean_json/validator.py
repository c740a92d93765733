"""JSON validation with error localization and fix suggestions."""

import logging
import re
from typing import Optional

from .parser import JSONParser
from .types import ErrorType, JSONParseError, ValidationError, ValidationResult
from .utils.positions import error_snippet, find_token_outside_strings, line_column

EMPTY_MESSAGE = "JSON content cannot be empty"
EMPTY_SUGGESTION = "Enter some JSON content"

# Parser vocabulary, both the browser engines' and Python's, in replacement order
FRIENDLY_PHRASES = (
    ("Unexpected token", "Unexpected character"),
    ("Unexpected end of JSON input", "Incomplete JSON structure"),
    ("Expected property name", "Expected a property name (keys need double quotes)"),
    ("Expecting property name enclosed in double quotes", "Expected a property name in double quotes"),
    ("Expecting value", "Expected a JSON value"),
    ("Expecting ',' delimiter", "Expected a comma between members"),
    ("Expecting ':' delimiter", "Expected a colon after the property name"),
    ("Extra data", "Unexpected content after the JSON value"),
    ("Unterminated string starting at", "Unclosed string literal"),
    ("Invalid control character at", "Unescaped control character in string"),
    ("Invalid \\uXXXX escape", "Invalid unicode escape sequence"),
    ("Invalid \\escape", "Invalid escape sequence"),
    ("Illegal trailing comma before end of object", "Trailing comma before the end of the object"),
    ("Illegal trailing comma before end of array", "Trailing comma before the end of the array"),
)

SUGGEST_TRAILING_COMMA = "Extra trailing comma. Try removing the last comma."
SUGGEST_CLOSE_BRACE = "Missing closing bracket }"
SUGGEST_CLOSE_BRACKET = "Missing closing bracket ]"
SUGGEST_CLOSE_ANY = "Missing closing bracket } or ]"
SUGGEST_QUOTE_KEY = "Property names must be wrapped in double quotes."
SUGGEST_COMMA_OR_QUOTE = "Possibly a missing comma or quote."
SUGGEST_DOUBLE_QUOTES = "JSON requires double quotes (\") instead of single quotes (')."
SUGGEST_MISSING_COMMA = "Possibly a missing comma between values."
SUGGEST_MISSING_COLON = "Possibly a missing colon between the property name and its value."
SUGGEST_CLOSE_STRING = "A string is not closed. Add the closing double quote."
SUGGEST_CHECK_SYNTAX = "Check that the JSON syntax is correct."
SUGGEST_GENERIC = "Check the JSON syntax and make sure all brackets, quotes and commas are used correctly."

_POSITION_PATTERNS = (
    re.compile(r"position (\d+)", re.IGNORECASE),
    re.compile(r"\(char (\d+)\)"),
)
_CONTEXT_PATTERN = re.compile(r"\.\.\.(.+?)\.\.\.")
_TOKEN_PATTERN = re.compile(r"Unexpected token '(.)'")


class JSONValidator:
    """
    Validates JSON text and explains syntax errors.

    A failed validation carries the error position, line and column, a
    numbered source snippet around the error and a suggestion for fixing it.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the validator.

        Args:
            parser: Optional JSONParser instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)

    def validate(self, text: str) -> ValidationResult:
        """
        Validate JSON text.

        Args:
            text: JSON text to validate

        Returns:
            ValidationResult, with a populated error when invalid
        """
        if not text or not text.strip():
            return ValidationResult(valid=False, error=ValidationError(
                message=EMPTY_MESSAGE,
                line=1,
                column=1,
                position=0,
                snippet="",
                suggestion=EMPTY_SUGGESTION,
                error_type=ErrorType.EMPTY
            ))

        try:
            self.parser.parse(text, exact_numbers=False)
        except JSONParseError as e:
            return ValidationResult(valid=False, error=self.describe_error(e.message, text, e.position))

        return ValidationResult(valid=True)

    def describe_error(self, message: str, text: str,
                       position: Optional[int] = None) -> ValidationError:
        """
        Turn a parser error message into a full diagnostic.

        Args:
            message: Parser error message
            text: Text that failed to parse
            position: Error offset when the parser reports one

        Returns:
            ValidationError with location, snippet and suggestion
        """
        position = self.locate_error(message, text, position)
        line, column = line_column(text, position)

        self.logger.debug(f"Invalid JSON at line {line}, column {column}: {message}")

        return ValidationError(
            message=self.friendly_message(message),
            line=line,
            column=column,
            position=position,
            snippet=error_snippet(text, line),
            suggestion=self.suggest_fix(message, text, position)
        )

    def locate_error(self, message: str, text: str, position: Optional[int] = None) -> int:
        """
        Determine the character offset of a syntax error.

        A native offset from the parser wins. Otherwise the message is
        searched for an explicit offset, then for a quoted ``...context...``
        excerpt, then for an ``Unexpected token 'c'`` hint whose token is
        looked up outside string literals. Falls back to 0.

        Args:
            message: Parser error message
            text: Text that failed to parse
            position: Native error offset, if known

        Returns:
            Error offset clamped to the text
        """
        if position is None:
            position = self._position_from_message(message, text)
        return max(0, min(position, len(text)))

    def _position_from_message(self, message: str, text: str) -> int:
        for pattern in _POSITION_PATTERNS:
            match = pattern.search(message)
            if match:
                return int(match.group(1))

        match = _CONTEXT_PATTERN.search(message)
        if match:
            context = match.group(1)
            found = text.find(context)
            if found != -1:
                return found + len(context) - len(context.lstrip())

        match = _TOKEN_PATTERN.search(message)
        if match:
            found = find_token_outside_strings(text, match.group(1))
            if found is not None:
                return found

        return 0

    @staticmethod
    def friendly_message(message: str) -> str:
        """Replace common parser vocabulary with friendlier phrases."""
        friendly = message
        for phrase, replacement in FRIENDLY_PHRASES:
            if phrase in friendly:
                friendly = friendly.replace(phrase, replacement, 1)
        return friendly

    def suggest_fix(self, message: str, text: str, position: int) -> str:
        """
        Suggest a fix for a syntax error.

        Args:
            message: Parser error message
            text: Text that failed to parse
            position: Error offset

        Returns:
            Human readable suggestion
        """
        lower = message.lower()
        char = text[position] if position < len(text) else ""

        if self._is_trailing_comma(lower, text, position, char):
            return SUGGEST_TRAILING_COMMA

        if "unexpected end" in lower or position >= len(text.rstrip()):
            return self._missing_bracket(text)

        if ("expected property name" in lower or "expecting property name" in lower
                or "unexpected token" in lower or "expecting value" in lower):
            if char == ":":
                return SUGGEST_QUOTE_KEY
            if char in ("}", "]"):
                return SUGGEST_COMMA_OR_QUOTE
            if "'" in text:
                return SUGGEST_DOUBLE_QUOTES
            if "property name" in lower:
                return SUGGEST_QUOTE_KEY

        if "unexpected string" in lower or "unexpected number" in lower or "expecting ','" in lower:
            return SUGGEST_MISSING_COMMA

        if "expecting ':'" in lower:
            return SUGGEST_MISSING_COLON

        if "unterminated string" in lower:
            return SUGGEST_CLOSE_STRING

        if "unexpected" in lower or "expecting" in lower or "extra data" in lower:
            return SUGGEST_CHECK_SYNTAX

        return SUGGEST_GENERIC

    @staticmethod
    def _is_trailing_comma(lower: str, text: str, position: int, char: str) -> bool:
        if "trailing comma" in lower or char == ",":
            return True
        if char in ("}", "]"):
            preceding = text[:position].rstrip()
            return preceding.endswith(",")
        return False

    @staticmethod
    def _missing_bracket(text: str) -> str:
        if text.count("{") > text.count("}"):
            return SUGGEST_CLOSE_BRACE
        if text.count("[") > text.count("]"):
            return SUGGEST_CLOSE_BRACKET
        return SUGGEST_CLOSE_ANY
