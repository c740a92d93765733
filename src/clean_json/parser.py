"""Strict JSON parser with lossless number handling."""

import json
import logging
from decimal import Decimal
from typing import Any, Optional

from .types import JSONParseError
from .utils.positions import find_token_outside_strings, line_column


def parse_integer(literal: str) -> Any:
    """
    Convert an integer literal without losing digits.

    Literals longer than the interpreter's int/str conversion limit are kept
    as ``Decimal``, whose text form reproduces the digits.
    """
    try:
        return int(literal)
    except ValueError:
        return Decimal(literal)


class _NonStandardConstant(ValueError):
    """Raised by the decoder hook for NaN and Infinity literals."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class JSONParser:
    """
    Strict JSON parser shared by every component of the engine.

    Integers are kept as Python ``int`` (arbitrary precision) and, when
    ``exact_numbers`` is requested, non-integer numbers are kept as
    ``Decimal`` so that re-serialization reproduces their digits. The
    ``NaN``/``Infinity`` literals accepted by the standard library are
    rejected.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._exact_decoder = json.JSONDecoder(
            parse_float=Decimal,
            parse_int=parse_integer,
            parse_constant=self._reject_constant
        )
        self._native_decoder = json.JSONDecoder(
            parse_int=parse_integer,
            parse_constant=self._reject_constant
        )

    def parse(self, text: str, exact_numbers: bool = True) -> Any:
        """
        Parse JSON text.

        Args:
            text: JSON text to parse
            exact_numbers: Keep non-integer numbers as ``Decimal`` instead of ``float``

        Returns:
            Parsed JSON value

        Raises:
            JSONParseError: If the text is not valid JSON
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"JSON input must be str, got {type(text).__name__}")

        decoder = self._exact_decoder if exact_numbers else self._native_decoder

        try:
            value = decoder.decode(text)
        except json.JSONDecodeError as e:
            raise self._error(e.msg, text, e.pos) from e
        except _NonStandardConstant as e:
            position = find_token_outside_strings(text, e.name)
            raise self._error(
                f"Expecting value, got non-standard literal {e.name}",
                text,
                position if position is not None else 0
            ) from e
        except RecursionError as e:
            raise self._error("Maximum nesting depth exceeded", text, 0) from e

        self.logger.debug(f"Parsed JSON input of {len(text)} characters")
        return value

    def _error(self, message: str, text: str, position: int) -> JSONParseError:
        """Build a parse error with line/column derived from position."""
        line, column = line_column(text, position)
        return JSONParseError(message, position=position, line=line, column=column)

    @staticmethod
    def _reject_constant(name: str) -> Any:
        raise _NonStandardConstant(name)
