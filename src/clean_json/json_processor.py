"""Main entry point bundling every clean-json operation."""

import logging
from typing import Any, List, Optional

from .compressor import JSONCompressor
from .converter import JSONConverter
from .formatter import JSONFormatter
from .parser import JSONParser
from .processors import (
    CommentRemover,
    JSONPathHelper,
    JSONToCSVConverter,
    JSONToXMLConverter,
    UnicodeConverter
)
from .serializer import JSONSerializer
from .types import (
    CompressionStats,
    ConversionResult,
    DetectedType,
    FormatOptions,
    ValidationResult
)
from .validator import JSONValidator


class JSONProcessor:
    """
    Facade over the JSON processing engine.

    Every operation takes raw text and returns text (or a small result
    object). The processor holds no state besides its default format
    options, so instances can be created per call or shared freely.
    """

    def __init__(self, format_options: Optional[FormatOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the processor and its components.

        Args:
            format_options: Default options for format() (two spaces, no sorting)
            logger: Optional logger instance shared by all components
        """
        self.format_options = format_options or FormatOptions()
        self.logger = logger or logging.getLogger(__name__)

        self.parser = JSONParser(logger=self.logger)
        serializer = JSONSerializer()

        self.validator = JSONValidator(self.parser, self.logger)
        self.formatter = JSONFormatter(self.parser, serializer, self.logger)
        self.compressor = JSONCompressor(self.parser, serializer, self.logger)
        self.converter = JSONConverter(self.parser, serializer, self.logger)
        self.unicode_converter = UnicodeConverter(self.parser, serializer, self.logger)
        self.comment_remover = CommentRemover(self.parser, self.logger)
        self.xml_converter = JSONToXMLConverter(self.parser, self.logger)
        self.csv_converter = JSONToCSVConverter(self.parser, serializer, self.logger)
        self.path_helper = JSONPathHelper(self.parser, self.logger)

    def validate(self, text: str) -> ValidationResult:
        return self.validator.validate(text)

    def format(self, text: str, options: Optional[FormatOptions] = None) -> str:
        return self.formatter.format(text, options or self.format_options)

    def compress(self, text: str) -> str:
        return self.compressor.compress(text)

    def compression_stats(self, original: str, compressed: str) -> CompressionStats:
        return self.compressor.get_stats(original, compressed)

    def string_to_object(self, text: str) -> str:
        return self.converter.string_to_object(text)

    def object_to_string(self, text: str) -> str:
        return self.converter.object_to_string(text)

    def detect_type(self, text: str) -> DetectedType:
        return self.converter.detect_type(text)

    def auto_convert(self, text: str) -> ConversionResult:
        return self.converter.auto_convert(text)

    def to_unicode(self, text: str) -> str:
        return self.unicode_converter.to_unicode(text)

    def from_unicode(self, text: str) -> str:
        return self.unicode_converter.from_unicode(text)

    def remove_comments(self, text: str) -> str:
        return self.comment_remover.remove_comments(text)

    def to_xml(self, text: str, root_name: str = "root") -> str:
        return self.xml_converter.convert(text, root_name)

    def to_csv(self, text: str, delimiter: str = ",") -> str:
        return self.csv_converter.convert(text, delimiter)

    def get_all_paths(self, text: str) -> List[str]:
        return self.path_helper.get_all_paths(text)

    def get_value_at_path(self, text: str, path: str) -> Any:
        return self.path_helper.get_value_at_path(text, path)
