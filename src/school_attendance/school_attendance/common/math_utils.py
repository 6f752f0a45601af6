from __future__ import annotations


def percent(part: int, whole: int) -> int:
    """Rounded percentage (half up), 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)
