"""
Suite availability ledger.

The `available` flag on a suite is the source of truth for admission: it is
cleared when a reservation is created and set again when one is cancelled.
Date changes on an existing reservation never touch it.

The flag is a single boolean, not a calendar, so it can drift from the
reservation table (e.g. after a manual override, or once a stay has ended).
`find_availability_drift` reports those suites and `find_free_suites` answers
the calendar question directly from the reservation intervals.
"""

import logging

from database import get_db, immediate_transaction
from utils.datetime_helpers import get_today
from utils.exceptions import InvalidInputError
from utils.helpers import row_to_dict
from utils.validators import parse_date

logger = logging.getLogger(__name__)


# =============================================================================
# FLAG MUTATIONS
# =============================================================================

def set_availability(suite_id: str, available: bool, cursor) -> None:
    """
    Persist a suite's availability flag inside the caller's transaction.

    Args:
        suite_id: Suite ID
        available: New flag value
        cursor: Active transaction cursor
    """
    cursor.execute('''
        UPDATE suites
        SET available = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (1 if available else 0, suite_id))
    logger.debug(f"Suite {suite_id} availability set to {available}")


def mark_unavailable(suite_id: str, cursor) -> None:
    """Flag a suite as committed to a reservation."""
    set_availability(suite_id, False, cursor)


def mark_available(suite_id: str, cursor) -> None:
    """Release a suite back to availability."""
    set_availability(suite_id, True, cursor)


# =============================================================================
# CALENDAR QUERIES
# =============================================================================

def find_free_suites(start_date, end_date, suite_type: str = None) -> list:
    """
    Find suites with no reservation overlapping [start_date, end_date].

    Overlap is inclusive on both ends, the same test admission uses.
    The availability flag is ignored.

    Args:
        start_date: First night (date or YYYY-MM-DD)
        end_date: Last date (date or YYYY-MM-DD)
        suite_type: Restrict to one category (optional)

    Returns:
        List of suite dicts ordered by price
    """
    start = parse_date(start_date, 'start_date')
    end = parse_date(end_date, 'end_date')
    if start > end:
        raise InvalidInputError.from_key('invalid_date_range')

    db = get_db()
    cursor = db.cursor()

    query = '''
        SELECT s.* FROM suites s
        WHERE NOT EXISTS (
            SELECT 1 FROM reservations r
            WHERE r.suite_id = s.id
              AND r.check_in_date <= ?
              AND r.check_out_date >= ?
        )
    '''
    params = [end.isoformat(), start.isoformat()]

    if suite_type:
        query += ' AND s.type = ?'
        params.append(suite_type)

    query += ' ORDER BY s.price, s.id'

    cursor.execute(query, params)
    return [row_to_dict(row, bool_fields=('available',)) for row in cursor.fetchall()]


# =============================================================================
# DRIFT DETECTION
# =============================================================================

def find_availability_drift() -> list:
    """
    Find suites whose flag disagrees with their active reservations.

    A reservation is active while its check-out date is after today.

    Returns:
        List of dicts: {
            'suite_id': str,
            'available': bool,          # current flag
            'active_reservations': int,
            'expected_available': bool
        }
    """
    today = get_today().isoformat()

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT s.id as suite_id, s.available,
               (SELECT COUNT(*) FROM reservations r
                WHERE r.suite_id = s.id AND r.check_out_date > ?) as active_reservations
        FROM suites s
        ORDER BY s.id
    ''', (today,))

    drift = []
    for row in cursor.fetchall():
        expected_available = row['active_reservations'] == 0
        if bool(row['available']) != expected_available:
            drift.append({
                'suite_id': row['suite_id'],
                'available': bool(row['available']),
                'active_reservations': row['active_reservations'],
                'expected_available': expected_available
            })

    return drift


def fix_availability_drift() -> list:
    """
    Reset drifted flags to match the active reservations.

    Returns:
        The drift entries that were corrected
    """
    with immediate_transaction() as cursor:
        drift = find_availability_drift()
        for entry in drift:
            set_availability(entry['suite_id'], entry['expected_available'], cursor)
            logger.warning(
                f"Corrected availability drift on suite {entry['suite_id']}: "
                f"{entry['available']} -> {entry['expected_available']}"
            )

    return drift
