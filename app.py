"""
Suite Reservations - hotel customer, suite and reservation REST API
Flask application factory and initialization
"""

import os
import sqlite3
import click
import logging
from flask import Flask, g
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import database functions
from database import close_db, init_db, get_db

from utils.api_response import api_error
from utils.exceptions import ReservationError
from utils.messages import get_message


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    app.json.sort_keys = app.config.get('JSON_SORT_KEYS', False)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Register teardown handlers
    register_teardown_handlers(app)

    # Configure logging
    configure_logging(app)

    return app


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.api import api_bp

    app.register_blueprint(api_bp, url_prefix='/api')


def _rollback_open_transaction():
    db = g.get('db')
    if db is not None and db.in_transaction:
        db.rollback()


def register_error_handlers(app):
    """Register JSON error handlers."""

    @app.errorhandler(ReservationError)
    def reservation_error(error):
        """Handle NotFound / InvalidInput / Conflict raised by the model layer."""
        _rollback_open_transaction()
        return api_error(error.message, status=error.status)

    @app.errorhandler(sqlite3.OperationalError)
    def database_operational_error(error):
        """Lock timeouts are retryable; anything else is a server error."""
        _rollback_open_transaction()
        if 'locked' in str(error) or 'busy' in str(error):
            app.logger.warning(f'Database lock wait timed out: {error}')
            response, status = api_error(get_message('database_busy'), status=503)
            response.headers['Retry-After'] = '1'
            return response, status
        app.logger.error(f'Database error: {error}', exc_info=True)
        return api_error(get_message('internal_error'), status=500)

    @app.errorhandler(HTTPException)
    def http_error(error):
        """Render HTTP errors (404, 405, ...) as JSON."""
        return api_error(error.description or error.name, status=error.code)

    @app.errorhandler(Exception)
    def internal_error(error):
        """Handle unexpected errors."""
        _rollback_open_transaction()
        app.logger.error(f'Unhandled error: {error}', exc_info=True)
        return api_error(get_message('internal_error'), status=500)


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    @click.option('--seed', is_flag=True, help='Insert demo customers and suites.')
    def init_db_command(seed):
        """Initialize database schema (drops existing data)."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db(seed=seed)
        click.echo('Database initialized successfully!')

    @app.cli.command('seed-db')
    def seed_db_command():
        """Insert demo customers and suites into an initialized database."""
        from database.seed import seed_database

        with app.app_context():
            db = get_db()
            try:
                seed_database(db)
                db.commit()
            except sqlite3.IntegrityError as e:
                db.rollback()
                raise click.ClickException(f'Seed data already present: {e}')
        click.echo('Demo data inserted.')

    @app.cli.command('check-availability')
    @click.option('--fix', is_flag=True, help='Reset drifted flags to match active reservations.')
    def check_availability_command(fix):
        """Report suites whose availability flag disagrees with active reservations."""
        from models.suite_availability import find_availability_drift, fix_availability_drift

        with app.app_context():
            drift = fix_availability_drift() if fix else find_availability_drift()

        if not drift:
            click.echo('No availability drift found.')
            return

        for entry in drift:
            click.echo(
                f"  Suite {entry['suite_id']}: available={entry['available']}, "
                f"active reservations={entry['active_reservations']}"
                + (' FIXED' if fix else '')
            )
        click.echo(f'{len(drift)} suite(s) with availability drift.')


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        log_dir = app.config.get('LOG_DIR', 'logs')
        os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(os.path.join(log_dir, 'suite_reservations.log'))
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        # Model modules log through the "models" logger hierarchy
        logging.getLogger('models').addHandler(file_handler)
        logging.getLogger('models').setLevel(logging.INFO)

        app.logger.setLevel(logging.INFO)
        app.logger.info('SuiteReservations startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)
        logging.getLogger('models').setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
