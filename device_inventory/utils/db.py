from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

db = SQLAlchemy()
migrate = Migrate()

def create_database_if_not_exists(uri):
    # SQLite creates its file on connect; only MySQL needs the schema up front
    url = make_url(uri)
    if not url.drivername.startswith('mysql') or not url.database:
        return
    engine = create_engine(url.set(database=None))
    try:
        with engine.connect() as conn:
            conn.execute(text(f"CREATE DATABASE IF NOT EXISTS `{url.database}`"))
    finally:
        engine.dispose()
