"""JSON to CSV conversion."""

import logging
from typing import Any, Dict, List, Optional

from ..parser import JSONParser
from ..serializer import JSONSerializer, scalar_text
from ..types import JSONShapeError

ROW_SEPARATOR = "\n"


class JSONToCSVConverter:
    """
    Renders JSON arrays and objects as CSV.

    * An array of objects becomes a header row holding the union of all keys
      (first-seen order) followed by one row per object.
    * Any other array becomes one single-field row per element.
    * A single object becomes a header row of its keys and one row of values.

    Nested objects and arrays in cells are written as compact JSON.
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

    def convert(self, text: str, delimiter: str = ",") -> str:
        """
        Convert JSON text to CSV.

        Args:
            text: JSON text holding an array or an object
            delimiter: Field delimiter

        Returns:
            CSV text with rows separated by ``\\n``; empty for an empty array

        Raises:
            JSONParseError: If text is not valid JSON
            JSONShapeError: If the top-level value is a scalar
            ValueError: If delimiter is empty
        """
        if not delimiter:
            raise ValueError("CSV delimiter must not be empty")

        value = self.parser.parse(text)

        if isinstance(value, list):
            if not value:
                return ""
            if all(isinstance(item, dict) for item in value):
                self.logger.debug(f"Converting array of {len(value)} objects to CSV")
                return self._object_array(value, delimiter)
            self.logger.debug(f"Converting array of {len(value)} values to CSV")
            return self._value_array(value, delimiter)

        if isinstance(value, dict):
            return self._single_object(value, delimiter)

        raise JSONShapeError("Input must be an array or object to convert to CSV")

    def _object_array(self, rows: List[Dict[str, Any]], delimiter: str) -> str:
        headers: Dict[str, None] = {}
        for row in rows:
            for key in row:
                headers.setdefault(key, None)

        lines = [self._join(headers, delimiter)]
        for row in rows:
            lines.append(self._join((self._cell(row.get(key)) for key in headers), delimiter))
        return ROW_SEPARATOR.join(lines)

    def _value_array(self, items: List[Any], delimiter: str) -> str:
        return ROW_SEPARATOR.join(
            escape_csv(self._cell(item), delimiter) for item in items
        )

    def _single_object(self, obj: Dict[str, Any], delimiter: str) -> str:
        header = self._join(obj, delimiter)
        values = self._join((self._cell(value) for value in obj.values()), delimiter)
        return header + ROW_SEPARATOR + values

    def _cell(self, value: Any) -> str:
        """Text of one cell; null and missing values are empty."""
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            return self.serializer.serialize(value)
        return scalar_text(value)

    @staticmethod
    def _join(fields, delimiter: str) -> str:
        return delimiter.join(escape_csv(field, delimiter) for field in fields)


def escape_csv(value: str, delimiter: str) -> str:
    """Quote a field that contains the delimiter, a quote or a line break."""
    if delimiter in value or '"' in value or "\n" in value or "\r" in value:
        return '"' + value.replace('"', '""') + '"'
    return value
