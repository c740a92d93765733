"""JSON to XML conversion."""

import logging
import re
from typing import Any, List, Optional
from xml.sax.saxutils import escape

from ..parser import JSONParser
from ..serializer import scalar_text

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_INDENT = "  "

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_INVALID_TAG_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def escape_xml(value: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` as XML entities."""
    return escape(value, _QUOTE_ENTITIES)


def singularize(name: str) -> str:
    """
    Guess a singular tag name for the items of an array.

    ``categories`` -> ``category``, ``boxes`` -> ``box``, ``users`` -> ``user``;
    names that do not look plural get an ``_item`` suffix.
    """
    if name.endswith("ies"):
        return name[:-3] + "y"
    if name.endswith("es"):
        return name[:-2]
    if name.endswith("s") and not name.endswith("ss"):
        return name[:-1]
    return name + "_item"


def sanitize_tag_name(name: str) -> str:
    """Make an object key usable as an XML tag name."""
    sanitized = _INVALID_TAG_CHARS.sub("_", name)
    if sanitized[:1].isdigit():
        sanitized = "_" + sanitized
    return sanitized or "item"


class JSONToXMLConverter:
    """Renders JSON as indented XML, one element per value."""

    def __init__(self, parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)

    def convert(self, text: str, root_name: str = "root") -> str:
        """
        Convert JSON text to XML.

        Args:
            text: JSON text
            root_name: Tag name of the document element

        Returns:
            XML document including the XML declaration

        Raises:
            JSONParseError: If text is not valid JSON
        """
        value = self.parser.parse(text)
        self.logger.debug(f"Converting JSON to XML with root element <{root_name}>")
        return XML_DECLARATION + "\n" + "\n".join(self._to_lines(value, root_name))

    def _to_lines(self, value: Any, root_name: str) -> List[str]:
        """Render a value as element lines, walking nested values with an explicit stack."""
        lines: List[str] = []
        # a str entry is a pending closing tag line
        stack: List[Any] = [(value, root_name, "")]

        while stack:
            entry = stack.pop()
            if isinstance(entry, str):
                lines.append(entry)
                continue

            value, tag, indent = entry
            if isinstance(value, list):
                item_tag = singularize(tag)
                children = [(item, item_tag) for item in value]
            elif isinstance(value, dict):
                children = [(child, sanitize_tag_name(key)) for key, child in value.items()]
            elif value is None:
                children = []
            else:
                lines.append(f"{indent}<{tag}>{escape_xml(scalar_text(value))}</{tag}>")
                continue

            if not children:
                lines.append(f"{indent}<{tag}></{tag}>")
                continue

            lines.append(f"{indent}<{tag}>")
            stack.append(f"{indent}</{tag}>")
            child_indent = indent + XML_INDENT
            stack.extend((child, child_tag, child_indent) for child, child_tag in reversed(children))

        return lines
