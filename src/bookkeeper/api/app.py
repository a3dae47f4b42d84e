"""Flask application factory."""

import logging
from typing import Optional

from flask import Flask

from bookkeeper.api.errors import register_error_handlers
from bookkeeper.api.routes import api
from bookkeeper.config import Settings
from bookkeeper.database.base import Database
from bookkeeper.database.factories import create_sqlite_database

logger = logging.getLogger(__name__)


def create_app(db: Optional[Database] = None, settings: Optional[Settings] = None) -> Flask:
    """Create the bookkeeping API application.

    Args:
        db: Database to serve. If None, a SQLite database is opened at the
            configured path.
        settings: Runtime settings; read from the environment when omitted

    Returns:
        Configured Flask application
    """
    if db is None:
        settings = settings or Settings.from_environment()
        db = create_sqlite_database(settings.database_path)
        logger.info("Serving database %s", settings.database_path)

    db.connect()
    db.initialize_schema()
    db.disconnect()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["bookkeeper_db"] = db

    register_error_handlers(app)
    app.register_blueprint(api)

    @app.teardown_appcontext
    def release_session(exception: Optional[BaseException]) -> None:
        db.disconnect()

    return app
