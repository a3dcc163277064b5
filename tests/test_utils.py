"""
Unit tests for utility functions.

Tests helper functions and utilities.
"""

import time
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from flatconf.utils.helpers import Timer, safe_int, setup_logging, split_values


class TestSafeInt:
    """Test cases for safe_int function."""

    def test_valid_conversions(self):
        """Test valid integer conversions."""
        assert safe_int("123") == 123
        assert safe_int("-8") == -8
        assert safe_int("+8") == 8
        assert safe_int("007") == 7
        assert safe_int(42) == 42

    def test_invalid_conversions(self):
        """Test invalid integer conversions."""
        assert safe_int("not_a_number") == 0
        assert safe_int("12.5") == 0
        assert safe_int(" 12") == 0
        assert safe_int("12\n") == 0
        assert safe_int("1_000") == 0
        assert safe_int("") == 0
        assert safe_int("-") == 0
        assert safe_int(None) == 0
        assert safe_int(True) == 0

    def test_non_ascii_digits_rejected(self):
        """Test Unicode digits outside ASCII don't parse."""
        assert safe_int("٣") == 0

    def test_custom_default(self):
        """Test custom default value."""
        assert safe_int("invalid", 99) == 99
        assert safe_int(None, -1) == -1


class TestSplitValues:
    """Test cases for split_values function."""

    def test_split(self):
        """Test splitting on a separator."""
        assert split_values("a,b,c", ",") == ["a", "b", "c"]
        assert split_values("a::b", "::") == ["a", "b"]

    def test_keeps_empty_parts(self):
        """Test empty parts are kept."""
        assert split_values("a,,b,", ",") == ["a", "", "b", ""]
        assert split_values("", ",") == [""]

    def test_empty_separator(self):
        """Test an empty separator splits into characters."""
        assert split_values("abc", "") == ["a", "b", "c"]
        assert split_values("", "") == []


class TestSetupLogging:
    """Test cases for setup_logging function."""

    def test_setup_logging_levels(self):
        """Test setup_logging can be called repeatedly."""
        setup_logging(verbose=True)
        setup_logging(verbose=False)


class TestTimer:
    """Test cases for Timer class."""

    def test_timer_context_manager(self):
        """Test timer as context manager."""
        with Timer("test_operation") as timer:
            time.sleep(0.1)  # Sleep for 100ms

        # Duration should be positive
        assert timer.duration_ms > 50  # Allow some tolerance

    def test_timer_properties(self):
        """Test timer properties."""
        timer = Timer("test")

        # Before context, duration should be 0
        assert timer.duration_ms == 0.0

        with timer:
            time.sleep(0.05)

        # After context, duration should be positive
        assert timer.duration_ms > 30
