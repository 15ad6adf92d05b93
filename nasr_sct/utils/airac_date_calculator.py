"""
AIRAC cycle dates.

The FAA publishes the NASR subscription on the 28-day AIRAC cycle; effective
dates always fall on Thursdays. The subscription in force on a given day is
the one published on the most recent AIRAC date not after that day.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Union

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime]


class AIRACDateCalculator:
    """
    Utility for calculating AIRAC dates based on the 28-day cycle.

    Any cycle date can be derived from a known AIRAC date.
    """

    # AIRAC cycle length in days
    AIRAC_CYCLE_DAYS = 28

    # Thursday weekday number (Monday=0, Tuesday=1, ..., Thursday=3)
    THURSDAY_WEEKDAY = 3

    def __init__(self, reference_airac_date: str = '2025-10-02'):
        """
        Initialize the AIRAC date calculator with a reference date.

        Args:
            reference_airac_date: Known AIRAC date in YYYY-MM-DD format

        Raises:
            ValueError: If the reference date is invalid or not a Thursday
        """
        self.reference_date = self._parse_date(reference_airac_date)
        if self.reference_date.weekday() != self.THURSDAY_WEEKDAY:
            raise ValueError(
                f"Reference AIRAC date must be a Thursday, but {self.reference_date:%Y-%m-%d} is a {self.reference_date:%A}"
            )

    @staticmethod
    def _parse_date(date_str: str) -> datetime:
        """Parse a date string in YYYY-MM-DD format."""
        try:
            parsed = isoparse(date_str)
        except ValueError:
            raise ValueError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")
        return datetime(parsed.year, parsed.month, parsed.day)

    def _as_date(self, value: Optional[DateLike]) -> datetime:
        if value is None:
            value = datetime.now()
        elif isinstance(value, str):
            return self._parse_date(value)
        return datetime(value.year, value.month, value.day)

    def _cycle_start(self, from_date: datetime, offset: int = 0) -> datetime:
        cycles = (from_date - self.reference_date).days // self.AIRAC_CYCLE_DAYS
        return self.reference_date + timedelta(days=(cycles + offset) * self.AIRAC_CYCLE_DAYS)

    def is_airac_date(self, date: DateLike) -> bool:
        """Check if a given date is an AIRAC date."""
        date = self._as_date(date)
        return (date - self.reference_date).days % self.AIRAC_CYCLE_DAYS == 0

    def get_current_airac_date(self, from_date: Optional[DateLike] = None) -> str:
        """
        Get the effective AIRAC date: the most recent AIRAC date not after ``from_date``.

        Args:
            from_date: Date to calculate from (defaults to today)

        Returns:
            AIRAC date in YYYY-MM-DD format
        """
        return self._cycle_start(self._as_date(from_date)).strftime('%Y-%m-%d')

    def next_airac_date(self, from_date: Optional[DateLike] = None) -> str:
        """Get the first AIRAC date strictly after ``from_date``."""
        return self._cycle_start(self._as_date(from_date), 1).strftime('%Y-%m-%d')

    def get_reference_date(self) -> str:
        """Get the reference AIRAC date used for calculations."""
        return self.reference_date.strftime('%Y-%m-%d')


def get_current_airac_date(from_date: Optional[DateLike] = None,
                           reference_date: str = '2025-10-02') -> str:
    """Effective AIRAC date using a default reference."""
    return AIRACDateCalculator(reference_date).get_current_airac_date(from_date)
