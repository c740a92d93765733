"""Removal of JavaScript-style comments from JSON text."""

import logging
from typing import Optional

from ..parser import JSONParser


class CommentRemover:
    """
    Strips ``//`` line comments and ``/* */`` block comments.

    The scan is string-aware: comment markers inside string literals, such as
    the ``//`` of a URL, are kept. The newline ending a line comment is kept
    so that line numbers of the remaining text do not shift.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)

    def remove_comments(self, text: str) -> str:
        """
        Remove all comments from JSON text.

        Args:
            text: JSON text with comments

        Returns:
            The text without comments

        Raises:
            JSONParseError: If the text left after stripping is not valid JSON
        """
        output = []
        in_string = False
        escaped = False
        in_line_comment = False
        in_block_comment = False
        removed = 0
        index = 0
        length = len(text)

        while index < length:
            char = text[index]
            next_char = text[index + 1] if index + 1 < length else ""

            if not in_line_comment and not in_block_comment:
                if in_string:
                    if escaped:
                        escaped = False
                    elif char == "\\":
                        escaped = True
                    elif char == '"':
                        in_string = False
                elif char == '"':
                    in_string = True

            if not in_string:
                if not in_block_comment and char == "/" and next_char == "/":
                    if not in_line_comment:
                        removed += 1
                    in_line_comment = True
                    index += 2
                    continue

                if not in_line_comment and char == "/" and next_char == "*":
                    if not in_block_comment:
                        removed += 1
                    in_block_comment = True
                    index += 2
                    continue

                if in_line_comment and char in ("\n", "\r"):
                    in_line_comment = False
                    output.append(char)
                    index += 1
                    continue

                if in_block_comment and char == "*" and next_char == "/":
                    in_block_comment = False
                    index += 2
                    continue

            if not in_line_comment and not in_block_comment:
                output.append(char)

            index += 1

        stripped = "".join(output)
        self.logger.debug(f"Removed {removed} comment(s)")

        self.parser.parse(stripped)
        return stripped
