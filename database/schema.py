"""
Database schema definitions.
Table creation, indexes, and structure management.
"""


def drop_tables(db):
    """Drop all existing tables."""
    # Disable foreign key constraints before dropping
    db.execute('PRAGMA foreign_keys = OFF')

    tables = [
        'reservations',
        'suites',
        'customers',
    ]

    for table in tables:
        db.execute(f'DROP TABLE IF EXISTS {table}')

    # Re-enable foreign key constraints
    db.execute('PRAGMA foreign_keys = ON')


def create_tables(db):
    """Create all database tables."""

    db.execute('''
        CREATE TABLE customers (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT UNIQUE NOT NULL,
            phone_number TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE suites (
            id TEXT PRIMARY KEY,
            type TEXT NOT NULL,
            price REAL NOT NULL DEFAULT 0 CHECK (price >= 0),
            available INTEGER NOT NULL DEFAULT 1,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # Dates are stored as ISO strings (YYYY-MM-DD) so they compare lexically
    db.execute('''
        CREATE TABLE reservations (
            id TEXT PRIMARY KEY,
            customer_id TEXT NOT NULL REFERENCES customers(id),
            suite_id TEXT NOT NULL REFERENCES suites(id),
            check_in_date TEXT NOT NULL,
            check_out_date TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')


def create_indexes(db):
    """Create indexes backing the lookup queries."""

    # Suite indexes
    db.execute('CREATE INDEX idx_suites_type ON suites(type, available)')
    db.execute('CREATE INDEX idx_suites_available ON suites(available)')
    db.execute('CREATE INDEX idx_suites_price ON suites(price)')

    # Reservation indexes
    db.execute('CREATE INDEX idx_reservations_customer ON reservations(customer_id)')
    db.execute('CREATE INDEX idx_reservations_suite_dates ON reservations(suite_id, check_in_date, check_out_date)')
    db.execute('CREATE INDEX idx_reservations_checkout ON reservations(check_out_date)')
