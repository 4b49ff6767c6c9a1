"""
Reservation data access functions.

This module re-exports the functions of the split modules so routes can
import everything reservation-related from one place:
- reservation_crud.py: Row-level create, read, update, delete
- reservation_queries.py: Listing by customer, suite, activity and date window
- reservation_admission.py: Admission rules, date changes and cancellation
"""

# Row-level operations
from .reservation_crud import (
    insert_reservation,
    get_reservation_by_id,
    exists_reservation_overlap,
    update_reservation_dates,
    delete_reservation_record,
)

# Query operations
from .reservation_queries import (
    get_all_reservations,
    get_reservations_by_customer,
    get_reservations_by_suite,
    get_active_reservations,
    get_reservations_by_date_range,
)

# Lifecycle
from .reservation_admission import (
    create_reservation,
    update_reservation,
    cancel_reservation,
)

__all__ = [
    # Row-level
    'insert_reservation',
    'get_reservation_by_id',
    'exists_reservation_overlap',
    'update_reservation_dates',
    'delete_reservation_record',
    # Queries
    'get_all_reservations',
    'get_reservations_by_customer',
    'get_reservations_by_suite',
    'get_active_reservations',
    'get_reservations_by_date_range',
    # Lifecycle
    'create_reservation',
    'update_reservation',
    'cancel_reservation',
]
