"""
clean-json - JSON processing engine.

Validation with error localization, formatting, compression, string/object
conversion, unicode escaping, comment stripping and XML/CSV export.
"""

from .compressor import JSONCompressor
from .converter import JSONConverter
from .formatter import JSONFormatter
from .json_processor import JSONProcessor
from .parser import JSONParser
from .processors import (
    CommentRemover,
    JSONPathHelper,
    JSONToCSVConverter,
    JSONToXMLConverter,
    UnicodeConverter
)
from .types import (
    CompressionStats,
    ConversionResult,
    ConversionType,
    DetectedType,
    ErrorType,
    FormatOptions,
    IndentType,
    JSONParseError,
    JSONPathError,
    JSONShapeError,
    ProcessingError,
    ValidationError,
    ValidationResult
)
from .validator import JSONValidator

__version__ = "1.0.0"
__all__ = [
    "CommentRemover",
    "CompressionStats",
    "ConversionResult",
    "ConversionType",
    "DetectedType",
    "ErrorType",
    "FormatOptions",
    "IndentType",
    "JSONCompressor",
    "JSONConverter",
    "JSONFormatter",
    "JSONParseError",
    "JSONParser",
    "JSONPathError",
    "JSONPathHelper",
    "JSONProcessor",
    "JSONShapeError",
    "JSONToCSVConverter",
    "JSONToXMLConverter",
    "JSONValidator",
    "ProcessingError",
    "UnicodeConverter",
    "ValidationError",
    "ValidationResult",
]
