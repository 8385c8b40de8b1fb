"""Human-readable file sizes."""

_PREFIXES = ("B", "K", "M", "G", "T", "P", "E")
_MAX_BYTES = 0xFFFFFFFFFFFFFFFF


def format_size(num_bytes: int) -> str:
    """Format a byte count with three significant digits and a binary prefix."""
    if num_bytes < 0 or num_bytes > _MAX_BYTES:
        raise ValueError(f"size out of range: {num_bytes}")
    size = float(num_bytes)
    index = 0
    while size >= 1024 and index < len(_PREFIXES) - 1:
        size /= 1024
        index += 1
    return f"{size:.3g} {_PREFIXES[index]}"