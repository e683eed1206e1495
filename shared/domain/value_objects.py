"""
Common Value Objects

Value objects used by the registry and the booking engine:
- Money: Monetary amount with currency (hourly rates, booking cost)
- TimeWindow: Wall-clock interval [start, end) within a single day
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject

CENT = Decimal('0.01')


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a non-negative monetary amount with currency.
    """
    amount: Decimal
    currency: str = 'INR'

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.currency or len(self.currency) != 3:
            raise ValueError(f"Unsupported currency: {self.currency!r}")

    def __mul__(self, factor) -> 'Money':
        """Multiply money by a number of units (e.g. hours)"""
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
            raise TypeError("Can only multiply Money by number")
        return Money(Decimal(self.amount) * Decimal(str(factor)), self.currency)

    def rounded(self) -> 'Money':
        """Round half-up to whole cents"""
        return Money(Decimal(self.amount).quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class TimeWindow(ValueObject):
    """
    Time window value object

    Represents wall-clock times from start (inclusive) to end (exclusive)
    on one calendar day. Used for booking windows and overlap checks.
    """
    start: time
    end: time

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time ({self.start}) must be before end time ({self.end})")

    def overlaps_with(self, other: 'TimeWindow') -> bool:
        """
        Check if this window overlaps with another

        Windows are half-open, so back-to-back windows don't overlap.

        Examples:
            - 09:00-11:00 overlaps with 10:00-12:00 -> True
            - 09:00-11:00 overlaps with 11:00-13:00 -> False (adjacent)
        """
        if not isinstance(other, TimeWindow):
            raise TypeError("Can only check overlap with another TimeWindow")

        return self.start < other.end and other.start < self.end

    @property
    def seconds(self) -> int:
        anchor = date.min
        delta = datetime.combine(anchor, self.end) - datetime.combine(anchor, self.start)
        return int(delta.total_seconds())

    @property
    def hours(self) -> Decimal:
        """Exact duration in hours"""
        return Decimal(self.seconds) / Decimal(3600)

    def __str__(self):
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"

    def __repr__(self):
        return f"TimeWindow({self.start}, {self.end})"
