"""
Tests for AIRAC date calculation utilities.
"""

import pytest
from datetime import datetime
from nasr_sct.utils.airac_date_calculator import (
    AIRACDateCalculator,
    get_current_airac_date,
)


class TestAIRACDateCalculator:
    """Test cases for AIRAC date calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        # October 2, 2025 is a known AIRAC date (Thursday)
        self.calculator = AIRACDateCalculator('2025-10-02')

    def test_initialization_with_valid_date(self):
        assert AIRACDateCalculator('2025-10-02').get_reference_date() == '2025-10-02'

    def test_initialization_with_invalid_date_format(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            AIRACDateCalculator('2025/10/02')

    def test_initialization_with_non_thursday(self):
        with pytest.raises(ValueError, match="must be a Thursday"):
            AIRACDateCalculator('2025-10-01')  # Wednesday

    def test_is_airac_date(self):
        for date in ['2025-10-02', '2025-10-30', '2025-11-27', '2025-09-04']:
            assert self.calculator.is_airac_date(date) is True
        for date in ['2025-10-01', '2025-10-09', '2025-10-16']:
            assert self.calculator.is_airac_date(date) is False

    def test_current_airac_date(self):
        assert self.calculator.get_current_airac_date('2025-10-02') == '2025-10-02'
        assert self.calculator.get_current_airac_date('2025-10-29') == '2025-10-02'
        assert self.calculator.get_current_airac_date('2025-10-30') == '2025-10-30'
        assert self.calculator.get_current_airac_date('2025-09-20') == '2025-09-04'

    def test_current_airac_date_from_datetime(self):
        assert self.calculator.get_current_airac_date(datetime(2025, 11, 1, 23, 59)) == '2025-10-30'

    def test_next_airac_date(self):
        assert self.calculator.next_airac_date('2025-10-02') == '2025-10-30'
        assert self.calculator.next_airac_date('2025-10-29') == '2025-10-30'
        assert self.calculator.next_airac_date('2025-09-20') == '2025-10-02'

    def test_convenience_function(self):
        assert get_current_airac_date('2026-01-01') == '2025-12-25'
