"""JSON compressor and compression statistics."""

import logging
from typing import Optional

from .parser import JSONParser
from .serializer import JSONSerializer
from .types import CompressionStats
from .utils.size_calculator import byte_size


class JSONCompressor:
    """Removes all insignificant whitespace from JSON text."""

    def __init__(self, parser: Optional[JSONParser] = None,
                 serializer: Optional[JSONSerializer] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)
        self.serializer = serializer or JSONSerializer()

    def compress(self, text: str) -> str:
        """
        Compress JSON text.

        Args:
            text: JSON text to compress

        Returns:
            Compact JSON text

        Raises:
            JSONParseError: If text is not valid JSON
        """
        compressed = self.serializer.serialize(self.parser.parse(text))
        self.logger.debug(f"Compressed {len(text)} characters to {len(compressed)}")
        return compressed

    def get_stats(self, original: str, compressed: str) -> CompressionStats:
        """
        Compare UTF-8 sizes before and after compression.

        Args:
            original: Original text
            compressed: Compressed text

        Returns:
            CompressionStats; ratio is "0.00" for empty input
        """
        original_size = byte_size(original)
        compressed_size = byte_size(compressed)
        saved = original_size - compressed_size

        if original_size > 0:
            ratio = f"{saved / original_size * 100:.2f}"
        else:
            ratio = "0.00"

        return CompressionStats(
            original_size=original_size,
            compressed_size=compressed_size,
            ratio=ratio,
            saved=saved
        )
