"""Weekday and calendar-date navigation."""

from dataclasses import dataclass, field
from datetime import date, timedelta


@dataclass
class WeekdayCursor:
    """Cursor over the weekdays that have a plan, in backend order."""

    available_days: list[str] = field(default_factory=list)
    selected_day: str = ""

    def _index(self) -> int:
        try:
            return self.available_days.index(self.selected_day)
        except ValueError:
            return -1

    def set_available_days(self, days: list[str]) -> None:
        """Replace the day list, falling back to its first day if needed."""
        self.available_days = list(days)
        if self.available_days and self.selected_day not in self.available_days:
            self.selected_day = self.available_days[0]

    def select(self, day: str) -> bool:
        """Select a day; days outside a non-empty list are rejected."""
        if self.available_days and day not in self.available_days:
            return False
        self.selected_day = day
        return True

    @property
    def can_go_previous(self) -> bool:
        return self._index() > 0

    @property
    def can_go_next(self) -> bool:
        index = self._index()
        return 0 <= index < len(self.available_days) - 1

    def previous(self) -> bool:
        """Move to the previous day; no-op on the first one."""
        if not self.can_go_previous:
            return False
        self.selected_day = self.available_days[self._index() - 1]
        return True

    def next(self) -> bool:
        """Move to the next day; no-op on the last one."""
        if not self.can_go_next:
            return False
        self.selected_day = self.available_days[self._index() + 1]
        return True


def shift_date(iso_date: str, days: int) -> str:
    """Return the ISO date offset by a number of days."""
    return (date.fromisoformat(iso_date) + timedelta(days=days)).isoformat()


def previous_date(iso_date: str) -> str:
    """Return the ISO date of the day before."""
    return shift_date(iso_date, -1)


def next_date(iso_date: str) -> str:
    """Return the ISO date of the day after."""
    return shift_date(iso_date, 1)
