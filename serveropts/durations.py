"""Compact duration formatting used when printing servers."""

from __future__ import annotations

from datetime import timedelta

_MICROSECOND = timedelta(microseconds=1)
_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def format_duration(value: timedelta) -> str:
    """Render ``value`` as ``1h2m3.5s``, ``250ms`` or ``50µs``.

    Hours and minutes are omitted while zero, but minutes always follow hours.
    Sub-second values switch to milliseconds or microseconds. Fractions keep
    only significant digits.
    """

    total = value // _MICROSECOND
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)

    if total < _US_PER_MS:
        return f"{sign}{total}µs"
    if total < _US_PER_SECOND:
        return f"{sign}{_with_fraction(total, _US_PER_MS, 3)}ms"

    hours, rest = divmod(total, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    seconds = _with_fraction(rest, _US_PER_SECOND, 6)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _with_fraction(amount: int, unit: int, digits: int) -> str:
    whole, frac = divmod(amount, unit)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


__all__ = ["format_duration"]
