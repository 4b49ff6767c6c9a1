"""
Suite data access functions.
Handles suite CRUD operations and the indexed lookups (type, availability, price).
"""

from database import get_db
from utils.exceptions import ConflictError, InvalidInputError, NotFoundError
from utils.helpers import generate_id, row_to_dict
from utils.validators import parse_bool, parse_id, parse_price, sanitize_input


def _suite_from_row(row) -> dict:
    return row_to_dict(row, bool_fields=('available',))


def _fetch_suites(where: str = '', params: tuple = ()) -> list:
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT * FROM suites {where} ORDER BY price, id', params)
    return [_suite_from_row(row) for row in cursor.fetchall()]


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_all_suites() -> list:
    """Get all suites ordered by price."""
    return _fetch_suites()


def get_suite_by_id(suite_id: str, cursor=None) -> dict:
    """
    Get suite by ID.

    Args:
        suite_id: Suite ID
        cursor: Active transaction cursor (optional)

    Returns:
        Suite dict or None if not found
    """
    cur = cursor or get_db().cursor()
    cur.execute('SELECT * FROM suites WHERE id = ?', (suite_id,))
    return _suite_from_row(cur.fetchone())


def get_suites_by_type(suite_type: str) -> list:
    """Get suites of one category."""
    return _fetch_suites('WHERE type = ?', (suite_type,))


def get_suites_by_availability(available: bool) -> list:
    """Get suites whose availability flag matches."""
    return _fetch_suites('WHERE available = ?', (1 if available else 0,))


def get_available_suites() -> list:
    """Get suites currently flagged as available."""
    return get_suites_by_availability(True)


def get_suites_by_type_and_availability(suite_type: str, available: bool) -> list:
    """Get suites of one category with the given availability flag."""
    return _fetch_suites('WHERE type = ? AND available = ?',
                         (suite_type, 1 if available else 0))


def get_suites_by_price_range(min_price, max_price) -> list:
    """
    Get suites priced within [min_price, max_price] inclusive.

    Raises:
        InvalidInputError: Negative bounds or min_price > max_price
    """
    min_price = parse_price(min_price)
    max_price = parse_price(max_price)
    if min_price > max_price:
        raise InvalidInputError.from_key('invalid_price_range')
    return _fetch_suites('WHERE price BETWEEN ? AND ?', (min_price, max_price))


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

def create_suite(suite_type: str, price, available=True, suite_id: str = None) -> dict:
    """
    Create new suite.

    Args:
        suite_type: Category label (required)
        price: Non-negative nightly price
        available: Initial availability flag
        suite_id: Explicit identifier, generated when omitted

    Returns:
        The stored suite dict

    Raises:
        InvalidInputError: Missing type or invalid price
        ConflictError: ID already taken
    """
    suite_type = sanitize_input(suite_type, max_length=100)
    if not suite_type:
        raise InvalidInputError.from_key('type_required')
    price = parse_price(price)
    available = parse_bool(available, 'available')

    suite_id = parse_id(suite_id, 'id') or generate_id()
    if get_suite_by_id(suite_id):
        raise ConflictError(f'Suite {suite_id} already exists')

    db = get_db()
    db.execute('''
        INSERT INTO suites (id, type, price, available)
        VALUES (?, ?, ?, ?)
    ''', (suite_id, suite_type, price, 1 if available else 0))
    db.commit()

    return get_suite_by_id(suite_id)


def update_suite(suite_id: str, suite_type: str, price, available) -> dict:
    """
    Replace a suite's type, price and availability flag.

    Raises:
        NotFoundError: Unknown suite
        InvalidInputError: Missing type or invalid price
    """
    if not get_suite_by_id(suite_id):
        raise NotFoundError.from_key('suite_not_found')

    suite_type = sanitize_input(suite_type, max_length=100)
    if not suite_type:
        raise InvalidInputError.from_key('type_required')
    price = parse_price(price)
    available = parse_bool(available, 'available')

    db = get_db()
    db.execute('''
        UPDATE suites
        SET type = ?, price = ?, available = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (suite_type, price, 1 if available else 0, suite_id))
    db.commit()

    return get_suite_by_id(suite_id)


def update_suite_availability(suite_id: str, available) -> dict:
    """
    Manually override a suite's availability flag.

    Raises:
        NotFoundError: Unknown suite
    """
    from .suite_availability import set_availability

    available = parse_bool(available, 'available')

    db = get_db()
    cursor = db.cursor()
    if not get_suite_by_id(suite_id, cursor):
        raise NotFoundError.from_key('suite_not_found')

    set_availability(suite_id, available, cursor)
    db.commit()

    return get_suite_by_id(suite_id)


def delete_suite(suite_id: str) -> None:
    """
    Delete suite (hard delete).
    Only allowed if no reservation references it.

    Raises:
        NotFoundError: Unknown suite
        ConflictError: Suite still referenced by reservations
    """
    db = get_db()
    cursor = db.cursor()

    if not get_suite_by_id(suite_id, cursor):
        raise NotFoundError.from_key('suite_not_found')

    cursor.execute('SELECT COUNT(*) as count FROM reservations WHERE suite_id = ?',
                   (suite_id,))
    if cursor.fetchone()['count'] > 0:
        raise ConflictError.from_key('suite_has_reservations')

    cursor.execute('DELETE FROM suites WHERE id = ?', (suite_id,))
    db.commit()
