"""JSON formatter with configurable indentation and key sorting."""

import logging
from typing import Optional

from .parser import JSONParser
from .serializer import JSONSerializer
from .types import FormatOptions


class JSONFormatter:
    """
    Pretty-prints JSON text.

    Numbers keep their exact literal value, so integers beyond the range of
    a double survive formatting digit for digit.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 serializer: Optional[JSONSerializer] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the formatter.

        Args:
            parser: Optional JSONParser instance
            serializer: Optional JSONSerializer instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)
        self.serializer = serializer or JSONSerializer()

    def format(self, text: str, options: Optional[FormatOptions] = None) -> str:
        """
        Format JSON text.

        Args:
            text: JSON text to format
            options: Formatting options (two spaces, insertion order by default)

        Returns:
            Formatted JSON text

        Raises:
            JSONParseError: If text is not valid JSON
        """
        options = options or FormatOptions()
        value = self.parser.parse(text)

        self.logger.debug(f"Formatting with indent={options.indent}, "
                          f"indent_type={options.indent_type.value}, sort_keys={options.sort_keys}")

        return self.serializer.serialize(
            value,
            indent_unit=options.indent_unit,
            sort_keys=options.sort_keys
        )
