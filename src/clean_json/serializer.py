"""JSON serializer used by the formatter, compressor and converters."""

import json
import re
from decimal import Decimal
from typing import Any, Callable, List, Optional

StringEncoder = Callable[[str], str]

LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def quote_string(value: str) -> str:
    """Encode a string as a JSON string literal with standard escaping."""
    encoded = json.dumps(value, ensure_ascii=False)
    # unpaired surrogates cannot be written as UTF-8
    return LONE_SURROGATE.sub(lambda match: f"\\u{ord(match.group()):04x}", encoded)


def number_text(value: Any) -> str:
    """Literal text form of an int, Decimal or float."""
    if isinstance(value, float):
        return float.__repr__(value)
    return str(value)


def scalar_text(value: Any) -> str:
    """
    Plain text form of a scalar JSON value.

    Strings are returned unquoted, booleans as ``true``/``false`` and null
    as ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)):
        return number_text(value)
    raise TypeError(f"Not a JSON scalar: {type(value).__name__}")


class JSONSerializer:
    """
    Renders parsed JSON values back to text.

    With an indent unit the output has one member per line, the nested
    members indented one unit deeper than their brackets and empty
    containers rendered as ``[]``/``{}``. Without one the output is compact
    with no whitespace at all.
    """

    def serialize(self, value: Any, indent_unit: Optional[str] = None,
                  sort_keys: bool = False,
                  string_encoder: Optional[StringEncoder] = None) -> str:
        """
        Serialize a JSON value.

        Args:
            value: Parsed JSON value
            indent_unit: Text of one indentation level, or None for compact output
            sort_keys: Sort object keys lexicographically
            string_encoder: Encoder for string values (keys always use standard quoting)

        Returns:
            JSON text

        Raises:
            TypeError: If value contains a non-JSON type
        """
        encoder = string_encoder or quote_string
        parts: List[str] = []
        # entries are (True, text) for literal output or (False, value, depth)
        stack: List[tuple] = [(False, value, 0)]

        while stack:
            entry = stack.pop()
            if entry[0]:
                parts.append(entry[1])
                continue

            _, item, depth = entry
            if isinstance(item, (list, tuple, dict)):
                stack.extend(self._expand(item, depth, indent_unit, sort_keys, parts))
            else:
                parts.append(self._scalar(item, encoder))

        return "".join(parts)

    @staticmethod
    def _scalar(value: Any, string_encoder: StringEncoder) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return string_encoder(value)
        if isinstance(value, (int, float, Decimal)):
            return number_text(value)

        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    @staticmethod
    def _expand(container: Any, depth: int, indent_unit: Optional[str], sort_keys: bool,
                parts: List[str]) -> List[tuple]:
        """
        Write the opening of a container and return its pending stack entries.

        The entries are in reverse output order, ready to be pushed.
        """
        if isinstance(container, dict):
            opening, closing = "{", "}"
            separator = ":" if indent_unit is None else ": "
            keys = sorted(container) if sort_keys else list(container)
            members = [(quote_string(key) + separator, container[key]) for key in keys]
        else:
            opening, closing = "[", "]"
            members = [("", item) for item in container]

        if not members:
            parts.append(opening + closing)
            return []

        if indent_unit is None:
            delimiter = ","
        else:
            inner = indent_unit * (depth + 1)
            opening += "\n" + inner
            delimiter = ",\n" + inner
            closing = "\n" + indent_unit * depth + closing
        parts.append(opening)

        pending = [(True, closing)]
        for index in range(len(members) - 1, -1, -1):
            prefix, child = members[index]
            pending.append((False, child, depth + 1))
            pending.append((True, (delimiter if index else "") + prefix))
        return pending
