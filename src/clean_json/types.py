"""Core type definitions for the clean-json processing engine."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union

DEFAULT_INDENT = 2


class IndentType(Enum):
    """Enumeration of indentation units."""
    SPACE = "space"
    TAB = "tab"


class DetectedType(Enum):
    """Shape of a converter input."""
    STRING = "string"
    OBJECT = "object"


class ConversionType(Enum):
    """Direction of an automatic conversion."""
    STRING_TO_OBJECT = "string-to-object"
    OBJECT_TO_STRING = "object-to-string"


class ErrorType(Enum):
    """Enumeration of error types."""
    EMPTY = "empty"
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    PATH = "path"


@dataclass
class FormatOptions:
    """Per-call formatting options."""
    indent: int = DEFAULT_INDENT
    indent_type: Union[IndentType, str] = IndentType.SPACE
    sort_keys: bool = False

    def __post_init__(self):
        if isinstance(self.indent_type, str):
            self.indent_type = IndentType(self.indent_type)
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent must be an int, got {type(self.indent).__name__}")
        if self.indent < 1:
            raise ValueError(f"indent must be positive, got {self.indent}")

    @property
    def indent_unit(self) -> str:
        """Indentation text for a single nesting level."""
        if self.indent_type == IndentType.TAB:
            return "\t"
        return " " * self.indent


@dataclass
class ValidationError:
    """Validation error details."""
    message: str
    line: int
    column: int
    position: int
    snippet: str
    suggestion: Optional[str] = None
    error_type: ErrorType = ErrorType.SYNTAX


@dataclass
class ValidationResult:
    """Result of input validation."""
    valid: bool
    error: Optional[ValidationError] = None


@dataclass
class CompressionStats:
    """Size statistics for a compression run, in UTF-8 bytes."""
    original_size: int
    compressed_size: int
    ratio: str
    saved: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalSize": self.original_size,
            "compressedSize": self.compressed_size,
            "ratio": self.ratio,
            "saved": self.saved,
        }

    def summary(self) -> str:
        """Human readable one-line summary."""
        from .utils.size_calculator import format_bytes

        return (f"{format_bytes(self.original_size)} -> {format_bytes(self.compressed_size)} "
                f"(saved {format_bytes(self.saved)}, {self.ratio}%)")


@dataclass
class ConversionResult:
    """Result of an automatic string/object conversion."""
    type: ConversionType
    output: str


class ProcessingError(Exception):
    """Base exception for user-input problems reported by the engine."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.context = context


class JSONParseError(ProcessingError):
    """Raised when input text is not valid JSON."""

    def __init__(self, message: str, position: int = 0, line: int = 1, column: int = 1,
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.SYNTAX, context)
        self.position = position
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"


class JSONShapeError(ProcessingError):
    """Raised when valid JSON has the wrong shape for an operation."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.STRUCTURE, context)


class JSONPathError(ProcessingError):
    """Raised when a path cannot be walked."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.PATH, context)


JSONValue = Union[None, bool, int, float, Decimal, str, list, dict]
