"""
Suite API routes including availability lookups.
"""

from flask import request
from utils.api_response import api_success, require_json
from utils.exceptions import InvalidInputError, NotFoundError
from utils.messages import get_message
from utils.validators import parse_bool
from models.suite import (
    get_all_suites, get_suite_by_id, get_suites_by_type, get_available_suites,
    get_suites_by_type_and_availability, get_suites_by_price_range,
    create_suite, update_suite, update_suite_availability, delete_suite
)
from models.suite_availability import find_free_suites


def register_routes(bp):
    """Register suite API routes on the blueprint."""

    # ============================================================================
    # READ
    # ============================================================================

    @bp.route('/suites')
    def suites_list():
        """List all suites."""
        suites = get_all_suites()
        return api_success(data=suites, count=len(suites))

    @bp.route('/suites/<suite_id>')
    def suite_detail(suite_id):
        """Get one suite."""
        suite = get_suite_by_id(suite_id)
        if not suite:
            raise NotFoundError.from_key('suite_not_found')
        return api_success(data=suite)

    @bp.route('/suites/type/<suite_type>')
    def suites_by_type(suite_type):
        """List suites of one category."""
        suites = get_suites_by_type(suite_type)
        return api_success(data=suites, count=len(suites))

    @bp.route('/suites/available')
    def suites_available():
        """List suites currently flagged as available."""
        suites = get_available_suites()
        return api_success(data=suites, count=len(suites))

    @bp.route('/suites/type/<suite_type>/available/<available>')
    def suites_by_type_and_availability(suite_type, available):
        """List suites of one category filtered by availability flag."""
        suites = get_suites_by_type_and_availability(suite_type, parse_bool(available, 'available'))
        return api_success(data=suites, count=len(suites))

    @bp.route('/suites/price-range')
    def suites_by_price_range():
        """List suites priced within [min_price, max_price]."""
        min_price = request.args.get('min_price')
        max_price = request.args.get('max_price')
        if min_price is None or max_price is None:
            raise InvalidInputError('min_price and max_price are required')

        suites = get_suites_by_price_range(min_price, max_price)
        return api_success(data=suites, count=len(suites))

    @bp.route('/suites/free')
    def suites_free():
        """
        List suites with no reservation overlapping the date window.

        Query params:
            start_date, end_date: YYYY-MM-DD (required)
            type: Suite category (optional)
        """
        suites = find_free_suites(
            request.args.get('start_date'),
            request.args.get('end_date'),
            suite_type=request.args.get('type') or None
        )
        return api_success(data=suites, count=len(suites))

    # ============================================================================
    # WRITE
    # ============================================================================

    @bp.route('/suites', methods=['POST'])
    def suites_create():
        """Create a suite."""
        data = require_json()
        suite = create_suite(
            suite_type=data.get('type'),
            price=data.get('price'),
            available=data.get('available', True),
            suite_id=data.get('id')
        )
        return api_success(data=suite, message=get_message('suite_created'))

    @bp.route('/suites/<suite_id>', methods=['PUT'])
    def suites_update(suite_id):
        """Replace a suite's type, price and availability."""
        data = require_json()
        suite = update_suite(
            suite_id,
            suite_type=data.get('type'),
            price=data.get('price'),
            available=data.get('available', True)
        )
        return api_success(data=suite, message=get_message('suite_updated'))

    @bp.route('/suites/<suite_id>/availability', methods=['PATCH'])
    def suites_update_availability(suite_id):
        """Override the availability flag (query param or JSON body)."""
        available = request.args.get('available')
        if available is None:
            available = require_json().get('available')
        if available is None:
            raise InvalidInputError.from_key('invalid_boolean', field='available')

        suite = update_suite_availability(suite_id, available)
        return api_success(data=suite, message=get_message('suite_updated'))

    @bp.route('/suites/<suite_id>', methods=['DELETE'])
    def suites_delete(suite_id):
        """Delete a suite without reservations."""
        delete_suite(suite_id)
        return api_success(message=get_message('suite_deleted'))
