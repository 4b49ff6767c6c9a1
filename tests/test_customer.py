"""
Tests for customer model functions and routes.
"""

import pytest
from utils.exceptions import ConflictError, InvalidInputError, NotFoundError


class TestCustomerModel:
    """Test customer CRUD functions."""

    def test_create_customer_assigns_id(self, app):
        """A generated ID is assigned when none is supplied."""
        from models.customer import create_customer

        customer = create_customer('Test Customer', 'test@example.com', '600000001')
        assert customer['id']
        assert customer['name'] == 'Test Customer'
        assert customer['email'] == 'test@example.com'

    def test_create_customer_with_explicit_id(self, app):
        """Caller-supplied IDs are kept."""
        from models.customer import create_customer, get_customer_by_id

        create_customer('Ana', 'ana@example.com', customer_id='C1')
        assert get_customer_by_id('C1')['name'] == 'Ana'

    def test_duplicate_email_rejected(self, app):
        """Email is unique, ignoring case."""
        from models.customer import create_customer

        create_customer('Ana', 'ana@example.com')
        with pytest.raises(ConflictError, match='Email is already registered'):
            create_customer('Another Ana', 'ANA@example.com')

    def test_invalid_fields_rejected(self, app):
        """Name is required; email and phone must be well formed."""
        from models.customer import create_customer

        with pytest.raises(InvalidInputError, match='Name is required'):
            create_customer('  ', 'a@example.com')
        with pytest.raises(InvalidInputError, match='Invalid email'):
            create_customer('Ana', 'not-an-email')
        with pytest.raises(InvalidInputError, match='Invalid phone number'):
            create_customer('Ana', 'ana@example.com', '12-ab')

    def test_get_customer_by_email(self, app, hotel):
        """Lookup by email is case-insensitive."""
        from models.customer import get_customer_by_email

        assert get_customer_by_email('ANA@example.com')['id'] == 'C1'
        assert get_customer_by_email('nobody@example.com') is None

    def test_update_customer(self, app, hotel):
        """Update replaces name, email and phone."""
        from models.customer import update_customer

        customer = update_customer('C1', 'Ana María', 'ana.maria@example.com', '+34699999999')
        assert customer['name'] == 'Ana María'
        assert customer['email'] == 'ana.maria@example.com'

    def test_update_customer_keeps_own_email(self, app, hotel):
        """Re-saving a customer's own email is not a conflict."""
        from models.customer import update_customer

        customer = update_customer('C1', 'Ana G.', 'ana@example.com')
        assert customer['name'] == 'Ana G.'

    def test_update_customer_email_taken(self, app, hotel):
        """Another customer's email cannot be taken over."""
        from models.customer import update_customer

        with pytest.raises(ConflictError):
            update_customer('C1', 'Ana', 'john@example.com')

    def test_update_missing_customer(self, app):
        """Updating an unknown customer raises NotFound."""
        from models.customer import update_customer

        with pytest.raises(NotFoundError, match='Customer not found'):
            update_customer('ghost', 'Ghost', 'ghost@example.com')

    def test_delete_customer(self, app, hotel):
        """A customer without reservations can be deleted."""
        from models.customer import delete_customer, get_customer_by_id

        delete_customer('C2')
        assert get_customer_by_id('C2') is None
        with pytest.raises(NotFoundError):
            delete_customer('C2')

    def test_delete_customer_with_reservations(self, app, hotel, today):
        """Customers referenced by reservations cannot be deleted."""
        from models.customer import delete_customer
        from models.reservation import create_reservation

        create_reservation('C1', 'S1', today, today)
        with pytest.raises(ConflictError):
            delete_customer('C1')


class TestCustomerRoutes:
    """Test customer API routes."""

    def test_create_and_fetch(self, client):
        """POST then GET by id and by email."""
        response = client.post('/api/customers', json={
            'name': 'Route Customer',
            'email': 'route@example.com',
            'phone_number': '+34600000000'
        })
        assert response.status_code == 200
        customer = response.get_json()['data']

        response = client.get(f"/api/customers/{customer['id']}")
        assert response.status_code == 200
        assert response.get_json()['data']['email'] == 'route@example.com'

        response = client.get('/api/customers/email/route@example.com')
        assert response.status_code == 200
        assert response.get_json()['data']['id'] == customer['id']

    def test_list_customers(self, client, hotel):
        """All customers are listed with a count."""
        data = client.get('/api/customers').get_json()
        assert data['count'] == 2
        assert {c['id'] for c in data['data']} == {'C1', 'C2'}

    def test_duplicate_email_is_409(self, client, hotel):
        """Duplicate email maps to 409."""
        response = client.post('/api/customers', json={
            'name': 'Copy', 'email': 'ana@example.com'
        })
        assert response.status_code == 409
        assert response.get_json()['error'] == 'Email is already registered'

    def test_missing_body_is_400(self, client):
        """A non-JSON body is rejected."""
        response = client.post('/api/customers', data='name=x')
        assert response.status_code == 400

    def test_non_string_id_is_400(self, client):
        """An explicit customer id must be a string or integer."""
        response = client.post('/api/customers', json={
            'id': {'value': 'C9'}, 'name': 'Odd Id', 'email': 'odd.com'
        })
        assert response.status_code == 400
        assert response.get_json()['error'] == 'id must be a string'
        assert response.get_json()['success'] is False

    def test_update_and_delete(self, client, hotel):
        """PUT replaces fields; DELETE removes; second DELETE is 404."""
        response = client.put('/api/customers/C2', json={
            'name': 'Johnny', 'email': 'johnny@example.com'
        })
        assert response.status_code == 200
        assert response.get_json()['data']['name'] == 'Johnny'

        assert client.delete('/api/customers/C2').status_code == 200
        assert client.delete('/api/customers/C2').status_code == 404

    def test_unknown_customer_is_404(self, client):
        """Unknown IDs return 404."""
        assert client.get('/api/customers/nope').status_code == 404
        assert client.get('/api/customers/email/nobody@example.com').status_code == 404
