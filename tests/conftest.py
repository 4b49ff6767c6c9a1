"""
Pytest configuration and fixtures.
Ensures tests use an isolated test database, not the development database.
"""

import os
import pytest
import tempfile

# Set test database path BEFORE importing app
# A file database (not :memory:) so concurrent tests can open extra connections
TEST_DB_PATH = os.path.join(tempfile.gettempdir(), 'suite_reservations_test.db')
os.environ['DATABASE_PATH'] = TEST_DB_PATH


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """Set up test environment before any tests run."""
    os.environ['DATABASE_PATH'] = TEST_DB_PATH
    os.environ['FLASK_ENV'] = 'test'

    yield

    # Cleanup: remove test database files after all tests
    for suffix in ('', '-wal', '-shm'):
        path = TEST_DB_PATH + suffix
        if os.path.exists(path):
            try:
                os.remove(path)
            except PermissionError:
                pass  # Windows may have file locked


@pytest.fixture
def app():
    """Create test application with an empty, freshly created schema."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['DATABASE_PATH'] = TEST_DB_PATH

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def today(app):
    """Today's date in the configured timezone."""
    from utils.datetime_helpers import get_today

    return get_today()


@pytest.fixture
def hotel(app):
    """Two customers and three suites with fixed IDs."""
    from models.customer import create_customer
    from models.suite import create_suite

    create_customer('Ana García', 'ana@example.com', '+34612345678', customer_id='C1')
    create_customer('John Smith', 'john@example.com', '+447700900123', customer_id='C2')
    create_suite('standard', 100, suite_id='S1')
    create_suite('deluxe', 180, suite_id='S2')
    create_suite('presidential', 450, available=False, suite_id='S3')

    return {
        'customer_ids': ['C1', 'C2'],
        'suite_ids': ['S1', 'S2', 'S3']
    }
