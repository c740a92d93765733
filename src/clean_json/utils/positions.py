"""Helpers for mapping character offsets onto source text."""

from typing import Optional, Tuple


def line_column(text: str, position: int) -> Tuple[int, int]:
    """
    Convert a 0-based character offset into a 1-based (line, column) pair.

    The text before ``position`` is split on ``\\n``; the line is the number
    of segments and the column is the length of the last segment plus one.

    Args:
        text: Source text
        position: Character offset into ``text``

    Returns:
        Tuple of (line, column)
    """
    segments = text[:position].split("\n")
    return len(segments), len(segments[-1]) + 1


def error_snippet(text: str, error_line: int) -> str:
    """
    Build a numbered excerpt around ``error_line``.

    One line of leading context and, when present, one trailing line are
    included. The error line is marked with ``> ``, the others with two
    spaces.

    Args:
        text: Source text
        error_line: 1-based line number of the error

    Returns:
        Multi-line snippet string
    """
    lines = text.split("\n")
    start = max(0, error_line - 2)
    end = min(len(lines), error_line + 1)

    rendered = []
    for line_number, line in enumerate(lines[start:end], start=start + 1):
        marker = "> " if line_number == error_line else "  "
        rendered.append(f"{marker}{line_number} | {line}")
    return "\n".join(rendered)


def find_token_outside_strings(text: str, token: str) -> Optional[int]:
    """
    Find the first occurrence of ``token`` that is not inside a string literal.

    Backslash escapes are honoured and every unescaped double quote toggles
    the string state.

    Args:
        text: Source text to scan
        token: Token to look for

    Returns:
        Offset of the token or None when it only occurs inside strings
    """
    in_string = False
    escape_next = False

    for index, char in enumerate(text):
        if escape_next:
            escape_next = False
            continue
        if char == "\\":
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if not in_string and text.startswith(token, index):
            return index

    return None
