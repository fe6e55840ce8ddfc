"""Position-by-position validation of canonical timestamp strings.

The layout is ``YYYY-MM-DD hh:mm:ss``. Each position is checked in order
and the first failing rule is reported. Tens digits bound their ones digit
(month ``1x`` allows ``x <= 2``, day ``3x`` allows ``x <= 1``, hour ``2x``
allows ``x <= 3``). No calendar lookup is done: ``02-31`` and ``00`` months
or days pass.
"""

from __future__ import annotations

from collections.abc import Callable

TIMESTAMP_LENGTH = 19
TIMESTAMP_LAYOUT = "YYYY-MM-DD hh:mm:ss"

_DIGITS = "0123456789"

# (position, allowed chars, bound keyed by the previous char, failure reason)
_Rule = tuple[int, str, Callable[[str], str] | None, str]


def _month_ones(previous: str) -> str:
    return "012" if previous == "1" else _DIGITS


def _day_ones(previous: str) -> str:
    return "01" if previous == "3" else _DIGITS


def _hour_ones(previous: str) -> str:
    return "0123" if previous == "2" else _DIGITS


_RULES: tuple[_Rule, ...] = (
    (0, _DIGITS, None, "first position of YYYY must be in 0-9 range"),
    (1, _DIGITS, None, "second position of YYYY must be in 0-9 range"),
    (2, _DIGITS, None, "third position of YYYY must be in 0-9 range"),
    (3, _DIGITS, None, "last position of YYYY must be in 0-9 range"),
    (4, "-", None, "- delimiter required between YYYY and MM"),
    (5, "01", None, "first position of MM must be in 0-1 range"),
    (6, _DIGITS, _month_ones, "month must be in 00-12 range"),
    (7, "-", None, "- delimiter required between MM and DD"),
    (8, "0123", None, "first position of DD must be in 0-3 range"),
    (9, _DIGITS, _day_ones, "day must be in 00-31 range"),
    (10, " ", None, "space required between YYYY-MM-DD and hh:mm:ss"),
    (11, "012", None, "first position of hh must be in 0-2 range"),
    (12, _DIGITS, _hour_ones, "hour must be in 00-23 range"),
    (13, ":", None, ": required between hh and mm"),
    (14, "012345", None, "first position of mm must be in 0-5 range"),
    (15, _DIGITS, None, "second position of mm must be in 0-9 range"),
    (16, ":", None, ": required between mm and ss"),
    (17, "012345", None, "first position of ss must be in 0-5 range"),
    (18, _DIGITS, None, "second position of ss must be in 0-9 range"),
)


def timestamp_error(text: str) -> str | None:
    """Return why ``text`` is not a canonical timestamp, or ``None`` if it is."""
    if len(text) != TIMESTAMP_LENGTH:
        return f"expected {TIMESTAMP_LENGTH} characters in {TIMESTAMP_LAYOUT} layout, got {len(text)}"

    for position, allowed, bound, reason in _RULES:
        char = text[position]
        if char not in allowed:
            return reason
        if bound is not None and char not in bound(text[position - 1]):
            return reason
    return None


def is_valid_timestamp(text: str) -> bool:
    """Return whether ``text`` matches the canonical timestamp layout."""
    return timestamp_error(text) is None


__all__ = [
    "TIMESTAMP_LENGTH",
    "TIMESTAMP_LAYOUT",
    "timestamp_error",
    "is_valid_timestamp",
]
