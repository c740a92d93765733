"""Size calculation utilities for JSON text."""

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB")
KILOBYTE = 1024


def byte_size(text: str) -> int:
    """
    Calculate the size of text in UTF-8 bytes.

    Args:
        text: Text to measure

    Returns:
        Size in bytes
    """
    return len(text.encode("utf-8", errors="surrogatepass"))


def format_bytes(num_bytes: int, decimals: int = 2) -> str:
    """
    Format a byte count as a human readable string.

    Args:
        num_bytes: Number of bytes
        decimals: Decimal places for KB and above

    Returns:
        Formatted size, e.g. ``"512 Bytes"`` or ``"1.50 KB"``
    """
    if num_bytes == 0:
        return "0 Bytes"

    places = max(decimals, 0)
    unit_index = 0
    scaled = abs(num_bytes)
    while scaled >= KILOBYTE and unit_index < len(SIZE_UNITS) - 1:
        scaled /= KILOBYTE
        unit_index += 1

    if unit_index == 0:
        return f"{num_bytes} {SIZE_UNITS[0]}"

    value = num_bytes / KILOBYTE ** unit_index
    return f"{value:.{places}f} {SIZE_UNITS[unit_index]}"
