import click
from flask import Flask, jsonify
from .config import Config
from .error_handlers import register_error_handlers
from .utils.db import db, migrate, create_database_if_not_exists
from .utils.log import setup_logging

def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    setup_logging(app.config['LOG_LEVEL'], app.config['LOG_FORMAT'])

    # Database + migrations; nothing connects until init_database or a request
    db.init_app(app)
    migrate.init_app(app, db)

    from .routes.device_routes import device_bp
    app.register_blueprint(device_bp, url_prefix='/devices')
    app.add_url_rule('/health', 'health', lambda: jsonify({'status': 'ok'}))
    register_error_handlers(app)

    @app.cli.command('seed-devices')
    def seed_devices_command():
        """Insert sample devices into an empty database."""
        created = _seed()
        click.echo(f'{created} devices created')

    return app

def init_database(app):
    """Create the schema and tables, then seed when SEED_DATA is on."""
    create_database_if_not_exists(app.config['SQLALCHEMY_DATABASE_URI'])
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_DATA'):
            _seed()

def _seed():
    from .services.seed import seed_devices
    from .store.sql import SqlDeviceStore
    return seed_devices(SqlDeviceStore(db.session))
