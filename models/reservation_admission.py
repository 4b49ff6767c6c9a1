"""
Reservation admission and lifecycle.

create_reservation applies the admission rules in a fixed order and stops at
the first violation:

    1. customer exists                 -> NotFoundError
    2. suite exists                    -> NotFoundError
    3. suite is flagged available      -> ConflictError
    4. check-in not after check-out    -> InvalidInputError
    5. check-in not before today       -> InvalidInputError
    6. no overlapping reservation      -> ConflictError

Every check and both writes (suite flag + reservation row) run inside one
BEGIN IMMEDIATE transaction, so two concurrent requests for the same suite
cannot both pass the overlap check, and a failed reservation insert never
leaves the suite flagged unavailable.

update_reservation re-checks date order and overlap (ignoring the record
itself) but not the past-date rule, and leaves the availability flag alone.
cancel_reservation releases the suite and deletes the record.
"""

import logging
import sqlite3

from database import immediate_transaction
from utils.datetime_helpers import get_today
from utils.exceptions import ConflictError, InvalidInputError, NotFoundError, ReservationError
from utils.validators import parse_date, parse_id
from .customer import get_customer_by_id
from .suite import get_suite_by_id
from .suite_availability import mark_available, mark_unavailable
from .reservation_crud import (
    delete_reservation_record, exists_reservation_overlap,
    get_reservation_by_id, insert_reservation, update_reservation_dates
)

logger = logging.getLogger(__name__)


# =============================================================================
# CREATE
# =============================================================================

def create_reservation(
    customer_id: str,
    suite_id: str,
    check_in_date,
    check_out_date,
    reservation_id: str = None
) -> dict:
    """
    Admit and store a new reservation.

    Args:
        customer_id: Customer ID (required)
        suite_id: Suite ID (required)
        check_in_date: date or YYYY-MM-DD
        check_out_date: date or YYYY-MM-DD
        reservation_id: Explicit identifier, generated when omitted

    Returns:
        dict: The stored reservation

    Raises:
        InvalidInputError: Missing references, malformed or invalid dates
        NotFoundError: Unknown customer or suite
        ConflictError: Suite unavailable or already booked for the dates
        sqlite3.OperationalError: Write lock not obtained within DATABASE_TIMEOUT
    """
    customer_id = parse_id(customer_id, 'customer_id')
    suite_id = parse_id(suite_id, 'suite_id')
    reservation_id = parse_id(reservation_id, 'id')

    if not customer_id:
        raise InvalidInputError.from_key('customer_id_required')
    if not suite_id:
        raise InvalidInputError.from_key('suite_id_required')

    check_in = parse_date(check_in_date, 'check_in_date')
    check_out = parse_date(check_out_date, 'check_out_date')

    try:
        with immediate_transaction() as cursor:
            if not get_customer_by_id(customer_id, cursor):
                raise NotFoundError.from_key('customer_not_found')

            suite = get_suite_by_id(suite_id, cursor)
            if not suite:
                raise NotFoundError.from_key('suite_not_found')

            if not suite['available']:
                raise ConflictError.from_key('suite_not_available')

            if check_in > check_out:
                raise InvalidInputError.from_key('invalid_date_order')

            if check_in < get_today():
                raise InvalidInputError.from_key('check_in_in_past')

            if exists_reservation_overlap(suite_id, check_in.isoformat(),
                                          check_out.isoformat(), cursor):
                raise ConflictError.from_key('suite_already_booked')

            try:
                mark_unavailable(suite_id, cursor)
                reservation_id = insert_reservation(
                    customer_id, suite_id, check_in.isoformat(), check_out.isoformat(),
                    cursor=cursor, reservation_id=reservation_id
                )
            except sqlite3.Error:
                logger.error(
                    f"Availability ledger write failed for suite {suite_id}; "
                    f"suite flag and reservation rolled back together",
                    exc_info=True
                )
                raise

            reservation = get_reservation_by_id(reservation_id, cursor)

    except ReservationError as e:
        logger.warning(
            f"Reservation rejected for customer {customer_id}, suite {suite_id} "
            f"({check_in} - {check_out}): {e.message}"
        )
        raise

    logger.info(f"Reservation {reservation_id} created for suite {suite_id} "
                f"({check_in} - {check_out})")
    return reservation


# =============================================================================
# UPDATE
# =============================================================================

def update_reservation(reservation_id: str, check_in_date, check_out_date) -> dict:
    """
    Change the stay dates of an existing reservation.

    Check-ins in the past are accepted here, unlike at creation.

    Returns:
        dict: The updated reservation

    Raises:
        NotFoundError: Unknown reservation
        InvalidInputError: Malformed dates or check-in after check-out
        ConflictError: New dates overlap another reservation on the suite
    """
    with immediate_transaction() as cursor:
        existing = get_reservation_by_id(reservation_id, cursor)
        if not existing:
            raise NotFoundError.from_key('reservation_not_found')

        check_in = parse_date(check_in_date, 'check_in_date')
        check_out = parse_date(check_out_date, 'check_out_date')

        if check_in > check_out:
            raise InvalidInputError.from_key('invalid_date_order')

        if exists_reservation_overlap(existing['suite_id'], check_in.isoformat(),
                                      check_out.isoformat(), cursor,
                                      exclude_reservation_id=reservation_id):
            raise ConflictError.from_key('suite_already_booked')

        update_reservation_dates(reservation_id, check_in.isoformat(),
                                 check_out.isoformat(), cursor)
        reservation = get_reservation_by_id(reservation_id, cursor)

    logger.info(f"Reservation {reservation_id} moved to {check_in} - {check_out}")
    return reservation


# =============================================================================
# CANCEL
# =============================================================================

def cancel_reservation(reservation_id: str) -> None:
    """
    Cancel a reservation: release its suite and delete the record.

    Raises:
        NotFoundError: Unknown (or already cancelled) reservation
    """
    with immediate_transaction() as cursor:
        reservation = get_reservation_by_id(reservation_id, cursor)
        if not reservation:
            raise NotFoundError.from_key('reservation_not_found')

        try:
            mark_available(reservation['suite_id'], cursor)
            delete_reservation_record(reservation_id, cursor)
        except sqlite3.Error:
            logger.error(
                f"Availability ledger write failed cancelling reservation "
                f"{reservation_id}; rolled back",
                exc_info=True
            )
            raise

    logger.info(f"Reservation {reservation_id} cancelled, suite "
                f"{reservation['suite_id']} released")
