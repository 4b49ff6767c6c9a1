"""
Tests for input validation utilities.
"""

import pytest
from datetime import date, datetime
from utils.exceptions import InvalidInputError
from utils.validators import (
    validate_email,
    validate_phone,
    parse_date,
    parse_bool,
    parse_id,
    parse_price,
    sanitize_input
)


class TestValidateEmail:
    """Tests for email validation."""

    def test_valid_email(self):
        """Test valid email formats."""
        assert validate_email('user@example.com') is True
        assert validate_email('user.name@example.com') is True
        assert validate_email('user+tag@example.co.uk') is True

    def test_invalid_email(self):
        """Test invalid email formats."""
        assert validate_email('') is False
        assert validate_email(None) is False
        assert validate_email('invalid') is False
        assert validate_email('missing@domain') is False
        assert validate_email('@nodomain.com') is False


class TestValidatePhone:
    """Tests for international phone validation."""

    def test_valid_phones(self):
        """Test valid phone formats."""
        assert validate_phone('+34612345678') is True
        assert validate_phone('+44 7700 900123') is True
        assert validate_phone('(555) 123-4567') is True

    def test_invalid_phones(self):
        """Test invalid phone formats."""
        assert validate_phone('') is False
        assert validate_phone(None) is False
        assert validate_phone('12345') is False
        assert validate_phone('abc123456') is False


class TestDates:
    """Tests for date validation and parsing."""

    def test_parse_date_accepts_iso_string_and_date(self):
        """Strings and date objects both parse to date."""
        assert parse_date('2025-03-01') == date(2025, 3, 1)
        assert parse_date(date(2025, 3, 1)) == date(2025, 3, 1)
        assert parse_date(datetime(2025, 3, 1, 15, 30)) == date(2025, 3, 1)

    def test_parse_date_rejects_missing_and_malformed(self):
        """Missing or non-ISO dates raise InvalidInputError naming the field."""
        with pytest.raises(InvalidInputError, match='check_in_date is required'):
            parse_date(None, 'check_in_date')
        with pytest.raises(InvalidInputError, match='check_out_date must be an ISO date'):
            parse_date('03/01/2025', 'check_out_date')


class TestParsers:
    """Tests for boolean and price parsing."""

    def test_parse_bool(self):
        """Booleans from JSON and query strings."""
        assert parse_bool(True) is True
        assert parse_bool('false') is False
        assert parse_bool('1') is True
        assert parse_bool(0) is False
        with pytest.raises(InvalidInputError):
            parse_bool('maybe')

    def test_parse_price(self):
        """Prices must be non-negative numbers."""
        assert parse_price('99.5') == 99.5
        assert parse_price(0) == 0.0
        for bad in (-1, 'abc', None, True, float('nan'), float('inf'), 'inf', '-inf'):
            with pytest.raises(InvalidInputError):
                parse_price(bad)

    def test_parse_id(self):
        """IDs are strings; integers are converted and other types rejected."""
        assert parse_id(' S1 ') == 'S1'
        assert parse_id(7) == '7'
        assert parse_id(None) is None
        assert parse_id('') is None
        for bad in (['C1'], {'id': 'C1'}, 1.5, True):
            with pytest.raises(InvalidInputError, match='customer_id must be a string'):
                parse_id(bad, 'customer_id')


class TestSanitizeInput:
    """Tests for input sanitization."""

    def test_sanitize_input(self):
        """Whitespace is stripped and length limited."""
        assert sanitize_input('  hello  ') == 'hello'
        assert sanitize_input('abcdef', max_length=3) == 'abc'
        assert sanitize_input(None) == ''
