"""
Challenge window arithmetic.

Group start dates and check-in dates are day-first text (DD/MM/YYYY). A
challenge of N days has two end dates that are used for different things:

- end_date_exclusive (start + N) drives the "days left" counter
- end_date_inclusive (start + N - 1) is the last day a check-in is rewarded
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ironup.core.exceptions import ValidationError

DATE_FORMAT = "%d/%m/%Y"


def parse_challenge_date(value: str) -> date:
    """Parse DD/MM/YYYY into a date. One-digit day and month are accepted."""
    if not isinstance(value, str) or not value:
        raise ValidationError("Date is required (DD/MM/YYYY)")
    # Check-in history is keyed by this exact text; padded variants would be new keys.
    if value != value.strip():
        raise ValidationError(f"Invalid date: {value!r}, surrounding whitespace is not allowed")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}, expected DD/MM/YYYY")


def format_challenge_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)


@dataclass(frozen=True)
class ChallengeWindow:
    start_date: date
    days: int

    @classmethod
    def from_group(cls, created_at: str, days) -> "ChallengeWindow":
        start = parse_challenge_date(created_at)
        if isinstance(days, bool) or not isinstance(days, int) or days < 1:
            raise ValidationError(f"Invalid group duration: {days!r}")
        return cls(start_date=start, days=days)

    @property
    def end_date_exclusive(self) -> date:
        return self.start_date + timedelta(days=self.days)

    @property
    def end_date_inclusive(self) -> date:
        return self.start_date + timedelta(days=self.days - 1)

    def days_remaining(self, today: date) -> int:
        return max(0, (self.end_date_exclusive - today).days)

    def is_within_challenge(self, day: date) -> bool:
        # Upper bound only; dates before start_date are not rejected.
        return day <= self.end_date_inclusive
