"""File size formatting utilities."""

_UNITS = (("GB", 1024**3), ("MB", 1024**2), ("KB", 1024))


def format_size(size_bytes: int) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        str: Formatted size string (e.g., "8 B", "1.50 KB", "2.00 MB")

    Raises:
        ValueError: If size_bytes is negative
    """
    if size_bytes < 0:
        raise ValueError("Size cannot be negative")

    for unit, factor in _UNITS:
        if size_bytes >= factor:
            return f"{size_bytes / factor:.2f} {unit}"
    return f"{int(size_bytes)} B"
