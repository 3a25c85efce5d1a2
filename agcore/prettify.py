"""Human-readable byte sizes."""

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


def prettify_bytes(size: int) -> str:
    """Format a byte count as B, KB, MB or GB with two decimals above bytes."""
    if size < 0:
        raise ValueError(f"byte count must not be negative, got {size}")
    if size > _GB:
        return f"{size / _GB:.2f} GB"
    if size > _MB:
        return f"{size / _MB:.2f} MB"
    if size > _KB:
        return f"{size / _KB:.2f} KB"
    return f"{size} B"