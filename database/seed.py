"""
Demo seed data.
Inserts a handful of customers and suites for local development.
"""


def seed_database(db):
    """Insert demo customers and suites."""

    customers = [
        ('C1', 'Ana García', 'ana.garcia@example.com', '+34612345678'),
        ('C2', 'John Smith', 'john.smith@example.com', '+447700900123'),
        ('C3', 'Marie Dubois', 'marie.dubois@example.com', '+33612345678'),
    ]

    for customer_id, name, email, phone_number in customers:
        db.execute('''
            INSERT INTO customers (id, name, email, phone_number)
            VALUES (?, ?, ?, ?)
        ''', (customer_id, name, email, phone_number))

    suites = [
        ('S1', 'standard', 100.0),
        ('S2', 'standard', 110.0),
        ('S3', 'deluxe', 180.0),
        ('S4', 'deluxe', 195.0),
        ('S5', 'presidential', 450.0),
    ]

    for suite_id, suite_type, price in suites:
        db.execute('''
            INSERT INTO suites (id, type, price, available)
            VALUES (?, ?, ?, 1)
        ''', (suite_id, suite_type, price))
