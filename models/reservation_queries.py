"""
Reservation query operations.
Listing by customer, suite, activity and date window.
"""

from database import get_db
from utils.datetime_helpers import get_today
from utils.exceptions import InvalidInputError
from utils.validators import parse_date
from .reservation_crud import RESERVATION_SELECT


def _fetch_reservations(where: str = '', params: tuple = ()) -> list:
    db = get_db()
    cursor = db.cursor()
    cursor.execute(
        f'{RESERVATION_SELECT} {where} ORDER BY r.check_in_date, r.suite_id, r.id',
        params
    )
    return [dict(row) for row in cursor.fetchall()]


def get_all_reservations() -> list:
    """Get all reservations ordered by check-in date."""
    return _fetch_reservations()


def get_reservations_by_customer(customer_id: str) -> list:
    """Get reservations belonging to a customer."""
    return _fetch_reservations('WHERE r.customer_id = ?', (customer_id,))


def get_reservations_by_suite(suite_id: str) -> list:
    """Get reservations booked on a suite."""
    return _fetch_reservations('WHERE r.suite_id = ?', (suite_id,))


def get_active_reservations(today=None) -> list:
    """
    Get reservations whose check-out date is after today.

    "Active" is computed at query time; nothing is stored.

    Args:
        today: Reference date (defaults to today in the configured timezone)
    """
    today = parse_date(today, 'today') if today else get_today()
    return _fetch_reservations('WHERE r.check_out_date > ?', (today.isoformat(),))


def get_reservations_by_date_range(start_date, end_date) -> list:
    """
    Get reservations overlapping the window [start_date, end_date].

    A reservation matches when check_in_date <= end_date and
    check_out_date >= start_date.

    Raises:
        InvalidInputError: Malformed dates or start after end
    """
    start = parse_date(start_date, 'start_date')
    end = parse_date(end_date, 'end_date')
    if start > end:
        raise InvalidInputError.from_key('invalid_date_range')

    return _fetch_reservations(
        'WHERE r.check_in_date <= ? AND r.check_out_date >= ?',
        (end.isoformat(), start.isoformat())
    )
