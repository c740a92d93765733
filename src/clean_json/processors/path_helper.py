"""JSONPath-style path enumeration and lookup."""

import logging
import re
from typing import Any, List, Optional, Union

from ..parser import JSONParser
from ..types import JSONPathError

ROOT = "$"

_IDENTIFIER = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
_SEGMENT = re.compile(r'\.([a-zA-Z_][a-zA-Z0-9_]*)|\[(\d+)\]|\["([^"]+)"\]')

# stands in for a missing member while walking a path
_UNDEFINED = object()

Segment = Union[str, int]


class JSONPathHelper:
    """
    Lists and resolves paths such as ``$.users[0]["first name"]``.

    Identifier-shaped keys use dot notation, other keys use bracketed
    double-quoted notation and array elements use ``[index]``.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)

    def get_all_paths(self, text: str) -> List[str]:
        """
        List every path in a JSON document, depth first, root first.

        Args:
            text: JSON text

        Returns:
            Ordered list of paths

        Raises:
            JSONParseError: If text is not valid JSON
        """
        paths: List[str] = []
        self._extract_paths(self.parser.parse(text), ROOT, paths)
        self.logger.debug(f"Found {len(paths)} paths")
        return paths

    def get_value_at_path(self, text: str, path: str) -> Any:
        """
        Resolve a path against a JSON document.

        Args:
            text: JSON text
            path: Path, with or without the leading ``$``

        Returns:
            The value at the path; None when the last member does not exist

        Raises:
            JSONParseError: If text is not valid JSON
            JSONPathError: If a null or missing value is reached before the path ends
        """
        current = self.parser.parse(text, exact_numbers=False)

        if path.startswith(ROOT):
            path = path[1:]
        if not path:
            return current

        for segment in parse_path(path):
            if current is None or current is _UNDEFINED:
                holder = "null" if current is None else "undefined"
                raise JSONPathError(f'Cannot access property "{segment}" of {holder}')
            current = _member(current, segment)

        return None if current is _UNDEFINED else current

    def _extract_paths(self, value: Any, current_path: str, paths: List[str]) -> None:
        stack = [(value, current_path)]
        while stack:
            value, current_path = stack.pop()
            paths.append(current_path)

            if isinstance(value, list):
                children = [(item, f"{current_path}[{index}]") for index, item in enumerate(value)]
            elif isinstance(value, dict):
                children = [(child, current_path + _key_segment(key)) for key, child in value.items()]
            else:
                continue
            stack.extend(reversed(children))


def _key_segment(key: str) -> str:
    return f".{key}" if _IDENTIFIER.fullmatch(key) else f'["{key}"]'


def parse_path(path: str) -> List[Segment]:
    """Split a path into keys (str) and array indices (int)."""
    segments: List[Segment] = []
    for match in _SEGMENT.finditer(path):
        name, index, quoted = match.groups()
        if name is not None:
            segments.append(name)
        elif index is not None:
            segments.append(int(index))
        else:
            segments.append(quoted)
    return segments


def _member(container: Any, segment: Segment) -> Any:
    """Look up one segment the way property access works on parsed JSON."""
    if isinstance(container, dict):
        return container.get(str(segment), _UNDEFINED)
    if isinstance(container, (list, str)) and isinstance(segment, int):
        if segment < len(container):
            return container[segment]
    return _UNDEFINED
