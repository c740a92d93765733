"""Conversion between JSON values and JSON-encoded JSON strings."""

import logging
from typing import Optional

from .parser import JSONParser
from .serializer import JSONSerializer, quote_string
from .types import (
    ConversionResult,
    ConversionType,
    DetectedType,
    JSONParseError,
    JSONShapeError
)


class JSONConverter:
    """
    Adds or removes one level of JSON string encoding.

    ``{"name":"John"}`` and ``"{\\"name\\":\\"John\\"}"`` are the two
    representations this converter moves between.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 serializer: Optional[JSONSerializer] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            parser: Optional JSONParser instance
            serializer: Optional JSONSerializer instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)
        self.serializer = serializer or JSONSerializer()

    def string_to_object(self, text: str) -> str:
        """
        Unwrap a JSON string literal whose content is JSON.

        Args:
            text: JSON string literal, e.g. ``"{\\"a\\":1}"``

        Returns:
            The unescaped content of the string

        Raises:
            JSONParseError: If text, or the string it holds, is not valid JSON
            JSONShapeError: If text is valid JSON but not a string
        """
        value = self.parser.parse(text)

        if not isinstance(value, str):
            raise JSONShapeError("Input is not a JSON string")

        self.parser.parse(value)
        return value

    def object_to_string(self, text: str) -> str:
        """
        Wrap compact JSON into a JSON string literal.

        Args:
            text: Any JSON text

        Returns:
            JSON string literal holding the compact form of text

        Raises:
            JSONParseError: If text is not valid JSON
        """
        compact = self.serializer.serialize(self.parser.parse(text))
        return quote_string(compact)

    def detect_type(self, text: str) -> DetectedType:
        """
        Detect whether text is a JSON-encoded JSON string.

        Args:
            text: JSON text

        Returns:
            DetectedType.STRING for a string holding JSON, DetectedType.OBJECT otherwise

        Raises:
            JSONParseError: If text is not valid JSON
        """
        try:
            value = self.parser.parse(text)
        except JSONParseError as e:
            raise JSONParseError(
                f"Invalid JSON: {e.message}",
                position=e.position,
                line=e.line,
                column=e.column
            ) from e

        if isinstance(value, str):
            try:
                self.parser.parse(value)
            except JSONParseError:
                # a plain string value, not JSON inside a string
                return DetectedType.OBJECT
            return DetectedType.STRING

        return DetectedType.OBJECT

    def auto_convert(self, text: str) -> ConversionResult:
        """
        Convert in whichever direction the detected type calls for.

        Args:
            text: JSON text

        Returns:
            ConversionResult tagged with the direction taken
        """
        detected = self.detect_type(text)
        self.logger.debug(f"Detected converter input type: {detected.value}")

        if detected == DetectedType.STRING:
            return ConversionResult(
                type=ConversionType.STRING_TO_OBJECT,
                output=self.string_to_object(text)
            )
        return ConversionResult(
            type=ConversionType.OBJECT_TO_STRING,
            output=self.object_to_string(text)
        )
