"""Human-readable byte sizes for the ``{file_size}`` token."""

from __future__ import annotations

_STEP = 1000
_UNITS: tuple[str, ...] = (" bytes", "kb", "mb", "gb", "tb", "pb", "eb")


def format_bytes(count: int) -> str:
    """Format *count* bytes, e.g. ``512 bytes`` or ``1.50mb``.

    Sizes up to 1000 are printed as an exact integer; larger sizes are
    divided down by powers of 1000 and printed with two decimals.
    """
    count = max(count, 0)
    if count <= _STEP:
        return f"{count}{_UNITS[0]}"

    size = float(count)
    division = 0
    while size > _STEP and division < len(_UNITS) - 1:
        size /= _STEP
        division += 1
    return f"{size:.2f}{_UNITS[division]}"
