"""
REST API blueprint.
Split into smaller modules by entity for maintainability.
"""

from flask import Blueprint

# Create the API blueprint
api_bp = Blueprint('api', __name__)

# Import and register routes from submodules
from blueprints.api import health
from blueprints.api import customers
from blueprints.api import suites
from blueprints.api import reservations

# Register all route functions on the blueprint
health.register_routes(api_bp)
customers.register_routes(api_bp)
suites.register_routes(api_bp)
reservations.register_routes(api_bp)
