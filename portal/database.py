"""
Lazy database initialization.

Tables are created the first time a handler touches the store; after that
only the boolean gate stored on the application is read.
"""

import logging
from flask import current_app
from portal.extensions import db

logger = logging.getLogger(__name__)

_EXTENSION_KEY = 'portal_db_initialized'


def ensure_database(app=None):
    """Create the tables once per application."""
    app = app or current_app._get_current_object()
    if app.extensions.get(_EXTENSION_KEY):
        return

    # Import models so their tables are registered on the metadata
    from portal import models  # noqa: F401

    db.create_all()
    app.extensions[_EXTENSION_KEY] = True
    logger.info('Database initialized (%s)', db.engine.url.render_as_string(hide_password=True))


def is_database_initialized(app=None):
    app = app or current_app._get_current_object()
    return bool(app.extensions.get(_EXTENSION_KEY))
