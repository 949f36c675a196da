"""Human-readable byte counts."""

_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_size(size: int) -> str:
    """Format ``size`` bytes with a binary unit, e.g. 1536 -> "1.5 KB"."""
    if size < 1024:
        return f"{size} B"

    value = size / 1024
    for unit in _UNITS[1:-1]:
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {_UNITS[-1]}"
