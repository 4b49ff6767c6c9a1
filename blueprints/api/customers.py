"""
Customer API routes.
"""

from utils.api_response import api_success, require_json
from utils.exceptions import NotFoundError
from utils.messages import get_message
from models.customer import (
    get_all_customers, get_customer_by_id, get_customer_by_email,
    create_customer, update_customer, delete_customer
)


def register_routes(bp):
    """Register customer API routes on the blueprint."""

    # ============================================================================
    # READ
    # ============================================================================

    @bp.route('/customers')
    def customers_list():
        """List all customers."""
        customers = get_all_customers()
        return api_success(data=customers, count=len(customers))

    @bp.route('/customers/<customer_id>')
    def customer_detail(customer_id):
        """Get one customer."""
        customer = get_customer_by_id(customer_id)
        if not customer:
            raise NotFoundError.from_key('customer_not_found')
        return api_success(data=customer)

    @bp.route('/customers/email/<path:email>')
    def customer_by_email(email):
        """Look a customer up by email."""
        customer = get_customer_by_email(email)
        if not customer:
            raise NotFoundError.from_key('customer_not_found')
        return api_success(data=customer)

    # ============================================================================
    # WRITE
    # ============================================================================

    @bp.route('/customers', methods=['POST'])
    def customers_create():
        """Create a customer. Email must be unique."""
        data = require_json()
        customer = create_customer(
            name=data.get('name'),
            email=data.get('email'),
            phone_number=data.get('phone_number'),
            customer_id=data.get('id')
        )
        return api_success(data=customer, message=get_message('customer_created'))

    @bp.route('/customers/<customer_id>', methods=['PUT'])
    def customers_update(customer_id):
        """Replace a customer's name, email and phone number."""
        data = require_json()
        customer = update_customer(
            customer_id,
            name=data.get('name'),
            email=data.get('email'),
            phone_number=data.get('phone_number')
        )
        return api_success(data=customer, message=get_message('customer_updated'))

    @bp.route('/customers/<customer_id>', methods=['DELETE'])
    def customers_delete(customer_id):
        """Delete a customer without reservations."""
        delete_customer(customer_id)
        return api_success(message=get_message('customer_deleted'))
