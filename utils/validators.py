"""
Input validation helper functions.
Provides validation and parsing for common input types.
"""

import math
import re
from datetime import date, datetime

from utils.exceptions import InvalidInputError


def validate_email(email: str) -> bool:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        True if valid email format
    """
    if not email:
        return False

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email))


def validate_phone(phone: str) -> bool:
    """
    Validate an international phone number.
    Accepts an optional leading + followed by 7 to 15 digits.

    Args:
        phone: Phone number to validate

    Returns:
        True if valid phone format
    """
    if not phone:
        return False

    # Remove spaces and common separators
    cleaned = re.sub(r'[\s\-\(\)\.]', '', phone)

    return bool(re.match(r'^\+?[0-9]{7,15}$', cleaned))


def parse_date(value, field: str = 'date') -> date:
    """
    Parse an ISO calendar date.

    Args:
        value: date object or 'YYYY-MM-DD' string
        field: Field name used in the error message

    Returns:
        datetime.date

    Raises:
        InvalidInputError: If the value is missing or not an ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or value == '':
        raise InvalidInputError.from_key('date_required', field=field)
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except ValueError:
        raise InvalidInputError.from_key('invalid_date', field=field)


def parse_bool(value, field: str = 'value') -> bool:
    """
    Parse a boolean from JSON or query-string input.

    Raises:
        InvalidInputError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('true', '1', 'yes'):
            return True
        if lowered in ('false', '0', 'no'):
            return False
    raise InvalidInputError.from_key('invalid_boolean', field=field)


def parse_price(value) -> float:
    """
    Parse a suite price.

    Raises:
        InvalidInputError: If the price is not a non-negative number
    """
    if isinstance(value, bool):
        raise InvalidInputError.from_key('invalid_price')
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError.from_key('invalid_price')
    if not math.isfinite(price) or price < 0:
        raise InvalidInputError.from_key('invalid_price')
    return price


def sanitize_input(text: str, max_length: int = None) -> str:
    """
    Sanitize text input by trimming and limiting length.

    Args:
        text: Text to sanitize
        max_length: Maximum length (optional)

    Returns:
        Sanitized text
    """
    if not text:
        return ''

    # Strip whitespace
    sanitized = str(text).strip()

    # Limit length if specified
    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized


def parse_id(value, field: str = 'id') -> str:
    """
    Normalize a record identifier from JSON input.

    Strings are trimmed and integers converted; missing values return None.

    Raises:
        InvalidInputError: If the value is any other type
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise InvalidInputError.from_key('invalid_id', field=field)
