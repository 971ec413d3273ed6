"""
Submission Tracking Admin Portal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os
from flask import Flask, jsonify
from portal.extensions import db, login_manager
from portal.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(str(app.config.get('LOG_LEVEL') or 'INFO').upper())

    _ensure_sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from portal.auth import auth_bp
    from portal.admin import admin_bp

    app.register_blueprint(auth_bp, url_prefix='/api/admin/auth')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_admin(admin_id):
        from portal.models import Admin
        return db.session.get(Admin, int(admin_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Belum login'}), 401

    # Tables are created lazily by portal.database.ensure_database
    return app


def _ensure_sqlite_directory(uri):
    """Create the folder holding a file-backed SQLite database."""
    prefix = 'sqlite:///'
    if not uri.startswith(prefix) or uri.endswith(':memory:'):
        return
    folder = os.path.dirname(uri[len(prefix):])
    if folder:
        os.makedirs(folder, exist_ok=True)
