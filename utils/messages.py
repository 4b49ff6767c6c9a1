"""
Centralized API messages.
All user-facing text in one place for consistency.
"""

MESSAGES = {
    # Success messages
    'reservation_created': 'Reservation created successfully',
    'reservation_updated': 'Reservation updated successfully',
    'reservation_cancelled': 'Reservation cancelled',
    'customer_created': 'Customer created successfully',
    'customer_updated': 'Customer updated successfully',
    'customer_deleted': 'Customer deleted',
    'suite_created': 'Suite created successfully',
    'suite_updated': 'Suite updated successfully',
    'suite_deleted': 'Suite deleted',

    # Not found
    'customer_not_found': 'Customer not found',
    'suite_not_found': 'Suite not found',
    'reservation_not_found': 'Reservation not found',

    # Admission rules
    'suite_not_available': 'Suite is not available',
    'invalid_date_order': 'Check-in date must be before check-out date',
    'check_in_in_past': 'Check-in date cannot be in the past',
    'suite_already_booked': 'Suite is already booked for selected dates',

    # Request validation
    'customer_id_required': 'Customer ID not provided',
    'suite_id_required': 'Suite ID not provided',
    'json_required': 'JSON body required',
    'date_required': '{field} is required',
    'invalid_date': '{field} must be an ISO date (YYYY-MM-DD)',
    'invalid_date_range': 'Start date must not be after end date',
    'name_required': 'Name is required',
    'email_required': 'Email is required',
    'invalid_email': 'Invalid email format',
    'invalid_phone': 'Invalid phone number',
    'email_exists': 'Email is already registered',
    'type_required': 'Suite type is required',
    'invalid_price': 'Price must be a non-negative number',
    'invalid_price_range': 'Minimum price must not exceed maximum price',
    'invalid_boolean': '{field} must be true or false',
    'invalid_id': '{field} must be a string',

    # Integrity
    'customer_has_reservations': 'Cannot delete a customer with reservations',
    'suite_has_reservations': 'Cannot delete a suite with reservations',

    # Server
    'database_busy': 'Database is busy, please retry',
    'internal_error': 'Internal server error',
}


def get_message(key: str, **kwargs) -> str:
    """
    Get message with optional formatting.

    Args:
        key: Message key
        **kwargs: Format parameters

    Returns:
        Formatted message or key if not found
    """
    message = MESSAGES.get(key, key)
    if kwargs:
        return message.format(**kwargs)
    return message
