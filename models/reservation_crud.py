"""
Reservation record operations.
Low-level create, read, update, delete for reservation rows.

These functions take an optional cursor so the admission engine can run them
inside its own transaction; none of them commit.
"""

from database import get_db
from utils.helpers import generate_id


RESERVATION_SELECT = '''
    SELECT r.*,
           c.name as customer_name,
           c.email as customer_email,
           s.type as suite_type,
           s.price as suite_price
    FROM reservations r
    JOIN customers c ON r.customer_id = c.id
    JOIN suites s ON r.suite_id = s.id
'''


# =============================================================================
# CREATE
# =============================================================================

def insert_reservation(
    customer_id: str,
    suite_id: str,
    check_in_date: str,
    check_out_date: str,
    cursor=None,
    reservation_id: str = None
) -> str:
    """
    Insert a reservation row.

    Args:
        customer_id: Customer ID
        suite_id: Suite ID
        check_in_date: Check-in date (YYYY-MM-DD)
        check_out_date: Check-out date (YYYY-MM-DD)
        cursor: Active transaction cursor
        reservation_id: Explicit identifier, generated when omitted

    Returns:
        str: The reservation ID
    """
    cur = cursor or get_db().cursor()
    reservation_id = reservation_id or generate_id()

    cur.execute('''
        INSERT INTO reservations (id, customer_id, suite_id, check_in_date, check_out_date)
        VALUES (?, ?, ?, ?, ?)
    ''', (reservation_id, customer_id, suite_id, check_in_date, check_out_date))

    return reservation_id


# =============================================================================
# READ
# =============================================================================

def get_reservation_by_id(reservation_id: str, cursor=None) -> dict:
    """
    Get reservation by ID with customer and suite display fields.

    Args:
        reservation_id: Reservation ID
        cursor: Active transaction cursor (optional)

    Returns:
        dict: Reservation or None
    """
    cur = cursor or get_db().cursor()
    cur.execute(RESERVATION_SELECT + ' WHERE r.id = ?', (reservation_id,))
    row = cur.fetchone()
    return dict(row) if row else None


def exists_reservation_overlap(
    suite_id: str,
    check_in_date: str,
    check_out_date: str,
    cursor=None,
    exclude_reservation_id: str = None
) -> bool:
    """
    Check whether any reservation on the suite overlaps the date range.

    Endpoints are inclusive: [Jan 1, Jan 5] and [Jan 5, Jan 10] overlap.

    Args:
        suite_id: Suite ID
        check_in_date: Candidate check-in (YYYY-MM-DD)
        check_out_date: Candidate check-out (YYYY-MM-DD)
        cursor: Active transaction cursor (optional)
        exclude_reservation_id: Reservation ID to ignore (for updates)

    Returns:
        True if a conflicting reservation exists
    """
    cur = cursor or get_db().cursor()

    query = '''
        SELECT 1 FROM reservations
        WHERE suite_id = ?
          AND check_in_date <= ?
          AND check_out_date >= ?
    '''
    params = [suite_id, check_out_date, check_in_date]

    if exclude_reservation_id:
        query += ' AND id != ?'
        params.append(exclude_reservation_id)

    cur.execute(query + ' LIMIT 1', params)
    return cur.fetchone() is not None


# =============================================================================
# UPDATE
# =============================================================================

def update_reservation_dates(
    reservation_id: str,
    check_in_date: str,
    check_out_date: str,
    cursor=None
) -> bool:
    """
    Overwrite the stay dates of a reservation.

    Returns:
        True if a row was updated
    """
    cur = cursor or get_db().cursor()
    cur.execute('''
        UPDATE reservations
        SET check_in_date = ?, check_out_date = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (check_in_date, check_out_date, reservation_id))
    return cur.rowcount > 0


# =============================================================================
# DELETE
# =============================================================================

def delete_reservation_record(reservation_id: str, cursor=None) -> bool:
    """
    Delete a reservation row.

    Returns:
        True if a row was deleted
    """
    cur = cursor or get_db().cursor()
    cur.execute('DELETE FROM reservations WHERE id = ?', (reservation_id,))
    return cur.rowcount > 0
