"""
Miscellaneous utility helper functions.
"""

import uuid


def generate_id() -> str:
    """Generate a new record identifier (32 hex characters)."""
    return uuid.uuid4().hex


def row_to_dict(row, bool_fields: tuple = ()) -> dict:
    """
    Convert a sqlite3.Row to a plain dict.

    Args:
        row: sqlite3.Row or None
        bool_fields: Integer columns to expose as booleans

    Returns:
        dict or None
    """
    if row is None:
        return None
    data = dict(row)
    for field in bool_fields:
        if field in data and data[field] is not None:
            data[field] = bool(data[field])
    return data
