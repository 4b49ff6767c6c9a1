"""
Customer data access functions.
Handles customer CRUD operations and email lookups.
"""

from database import get_db
from utils.exceptions import ConflictError, InvalidInputError, NotFoundError
from utils.helpers import generate_id, row_to_dict
from utils.validators import parse_id, sanitize_input, validate_email, validate_phone


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_all_customers() -> list:
    """
    Get all customers.

    Returns:
        List of customer dicts, newest first
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT c.*,
               (SELECT COUNT(*) FROM reservations WHERE customer_id = c.id) as reservation_count
        FROM customers c
        ORDER BY c.created_at DESC, c.id
    ''')
    return [dict(row) for row in cursor.fetchall()]


def get_customer_by_id(customer_id: str, cursor=None) -> dict:
    """
    Get customer by ID.

    Args:
        customer_id: Customer ID
        cursor: Active transaction cursor (optional)

    Returns:
        Customer dict or None if not found
    """
    cur = cursor or get_db().cursor()
    cur.execute('SELECT * FROM customers WHERE id = ?', (customer_id,))
    return row_to_dict(cur.fetchone())


def get_customer_by_email(email: str) -> dict:
    """
    Get customer by email (case-insensitive).

    Args:
        email: Email address

    Returns:
        Customer dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM customers WHERE lower(email) = lower(?)', (email,))
    return row_to_dict(cursor.fetchone())


def email_exists(email: str, exclude_customer_id: str = None) -> bool:
    """Check whether another customer already uses this email."""
    db = get_db()
    cursor = db.cursor()

    query = 'SELECT 1 FROM customers WHERE lower(email) = lower(?)'
    params = [email]

    if exclude_customer_id:
        query += ' AND id != ?'
        params.append(exclude_customer_id)

    cursor.execute(query + ' LIMIT 1', params)
    return cursor.fetchone() is not None


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

def _clean_customer_fields(name: str, email: str, phone_number: str) -> tuple:
    name = sanitize_input(name, max_length=200)
    email = sanitize_input(email, max_length=254)
    phone_number = sanitize_input(phone_number, max_length=40) or None

    if not name:
        raise InvalidInputError.from_key('name_required')
    if not email:
        raise InvalidInputError.from_key('email_required')
    if not validate_email(email):
        raise InvalidInputError.from_key('invalid_email')
    if phone_number and not validate_phone(phone_number):
        raise InvalidInputError.from_key('invalid_phone')

    return name, email, phone_number


def create_customer(name: str, email: str, phone_number: str = None,
                    customer_id: str = None) -> dict:
    """
    Create new customer.

    Args:
        name: Full name (required)
        email: Email address (required, unique)
        phone_number: Phone number
        customer_id: Explicit identifier, generated when omitted

    Returns:
        The stored customer dict

    Raises:
        InvalidInputError: Missing name or malformed email
        ConflictError: Email already registered or ID already taken
    """
    name, email, phone_number = _clean_customer_fields(name, email, phone_number)

    if email_exists(email):
        raise ConflictError.from_key('email_exists')

    customer_id = parse_id(customer_id, 'id') or generate_id()
    if get_customer_by_id(customer_id):
        raise ConflictError(f'Customer {customer_id} already exists')

    db = get_db()
    db.execute('''
        INSERT INTO customers (id, name, email, phone_number)
        VALUES (?, ?, ?, ?)
    ''', (customer_id, name, email, phone_number))
    db.commit()

    return get_customer_by_id(customer_id)


def update_customer(customer_id: str, name: str, email: str,
                    phone_number: str = None) -> dict:
    """
    Replace a customer's name, email and phone number.

    Returns:
        The updated customer dict

    Raises:
        NotFoundError: Unknown customer
        InvalidInputError: Missing name or malformed email
        ConflictError: Email used by another customer
    """
    if not get_customer_by_id(customer_id):
        raise NotFoundError.from_key('customer_not_found')

    name, email, phone_number = _clean_customer_fields(name, email, phone_number)

    if email_exists(email, exclude_customer_id=customer_id):
        raise ConflictError.from_key('email_exists')

    db = get_db()
    db.execute('''
        UPDATE customers
        SET name = ?, email = ?, phone_number = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (name, email, phone_number, customer_id))
    db.commit()

    return get_customer_by_id(customer_id)


def delete_customer(customer_id: str) -> None:
    """
    Delete customer (hard delete).
    Only allowed if the customer has no reservations.

    Raises:
        NotFoundError: Unknown customer
        ConflictError: Customer still referenced by reservations
    """
    db = get_db()
    cursor = db.cursor()

    if not get_customer_by_id(customer_id, cursor):
        raise NotFoundError.from_key('customer_not_found')

    cursor.execute('SELECT COUNT(*) as count FROM reservations WHERE customer_id = ?',
                   (customer_id,))
    if cursor.fetchone()['count'] > 0:
        raise ConflictError.from_key('customer_has_reservations')

    cursor.execute('DELETE FROM customers WHERE id = ?', (customer_id,))
    db.commit()
