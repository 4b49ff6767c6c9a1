"""
Reservation API routes: admission, date changes, cancellation and listings.
"""

from flask import current_app, request
from utils.api_response import api_success, require_json
from utils.exceptions import InvalidInputError, NotFoundError
from utils.messages import get_message
from utils.validators import parse_id
from models.reservation import (
    get_all_reservations, get_reservation_by_id, get_reservations_by_customer,
    get_reservations_by_suite, get_active_reservations, get_reservations_by_date_range,
    create_reservation, update_reservation, cancel_reservation
)


def _reference_id(data: dict, name: str):
    """
    Read a referenced entity ID from either `<name>_id` or `<name>: {"id": ...}`.
    """
    value = data.get(f'{name}_id')
    if value is None and isinstance(data.get(name), dict):
        value = data[name].get('id')
    return parse_id(value, f'{name}_id')


def register_routes(bp):
    """Register reservation API routes on the blueprint."""

    # ============================================================================
    # READ
    # ============================================================================

    @bp.route('/reservations')
    def reservations_list():
        """List all reservations."""
        reservations = get_all_reservations()
        return api_success(data=reservations, count=len(reservations))

    @bp.route('/reservations/<reservation_id>')
    def reservation_detail(reservation_id):
        """Get one reservation."""
        reservation = get_reservation_by_id(reservation_id)
        if not reservation:
            raise NotFoundError.from_key('reservation_not_found')
        return api_success(data=reservation)

    @bp.route('/reservations/customer/<customer_id>')
    def reservations_by_customer(customer_id):
        """List a customer's reservations."""
        reservations = get_reservations_by_customer(customer_id)
        return api_success(data=reservations, count=len(reservations))

    @bp.route('/reservations/suite/<suite_id>')
    def reservations_by_suite(suite_id):
        """List a suite's reservations."""
        reservations = get_reservations_by_suite(suite_id)
        return api_success(data=reservations, count=len(reservations))

    @bp.route('/reservations/active')
    def reservations_active():
        """List reservations whose check-out date is after today."""
        reservations = get_active_reservations()
        return api_success(data=reservations, count=len(reservations))

    @bp.route('/reservations/date-range')
    def reservations_by_date_range():
        """
        List reservations overlapping a date window.

        Query params:
            start_date, end_date: YYYY-MM-DD (required)
        """
        reservations = get_reservations_by_date_range(
            request.args.get('start_date'),
            request.args.get('end_date')
        )
        return api_success(data=reservations, count=len(reservations))

    # ============================================================================
    # WRITE
    # ============================================================================

    @bp.route('/reservations', methods=['POST'])
    def reservations_create():
        """
        Create a reservation.

        Body:
            customer_id (or customer: {id}), suite_id (or suite: {id}),
            check_in_date, check_out_date (YYYY-MM-DD)
        """
        data = require_json()
        customer_id = _reference_id(data, 'customer')
        suite_id = _reference_id(data, 'suite')

        if not customer_id:
            raise InvalidInputError.from_key('customer_id_required')
        if not suite_id:
            raise InvalidInputError.from_key('suite_id_required')

        current_app.logger.info(
            f'Creating reservation for customer {customer_id} and suite {suite_id}'
        )

        reservation = create_reservation(
            customer_id=customer_id,
            suite_id=suite_id,
            check_in_date=data.get('check_in_date'),
            check_out_date=data.get('check_out_date')
        )
        return api_success(
            data=reservation,
            message=get_message('reservation_created')
        )

    @bp.route('/reservations/<reservation_id>', methods=['PUT'])
    def reservations_update(reservation_id):
        """Change the stay dates of a reservation."""
        data = require_json()
        reservation = update_reservation(
            reservation_id,
            check_in_date=data.get('check_in_date'),
            check_out_date=data.get('check_out_date')
        )
        return api_success(data=reservation, message=get_message('reservation_updated'))

    @bp.route('/reservations/<reservation_id>', methods=['DELETE'])
    def reservations_cancel(reservation_id):
        """Cancel a reservation and release its suite."""
        cancel_reservation(reservation_id)
        return api_success(message=get_message('reservation_cancelled'))
