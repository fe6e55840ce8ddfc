"""Calendar timestamp value type used for threshold comparisons."""

from __future__ import annotations

from dataclasses import dataclass

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True, order=True)
class Timestamp:
    """Validated ``YYYY-MM-DD hh:mm:ss`` value.

    Field order is the comparison order, so instances compare as the tuple
    ``(year, month, day, hour, minute, second)``. Build instances through
    ``parse_timestamp`` or ``timestamp_from_mtime`` rather than directly.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def canonical(self) -> str:
        """Render the zero-padded canonical comparison string."""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def display(self) -> str:
        """Render the long-listing column form, e.g. ``Mar  7  09:05``.

        Month ``00`` passes validation but names no month; it renders as ``???``.
        """
        if 1 <= self.month <= len(MONTH_ABBREVIATIONS):
            month_name = MONTH_ABBREVIATIONS[self.month - 1]
        else:
            month_name = "???"
        return f"{month_name} {self.day:2d}  {self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.canonical()


EPOCH = Timestamp(year=1970, month=1, day=1, hour=0, minute=0, second=0)


__all__ = [
    "MONTH_ABBREVIATIONS",
    "Timestamp",
    "EPOCH",
]
