"""
Flask Extensions

Admin sessions are handled by Flask-Login; there are no citizen accounts
in this portal.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for the admin session
login_manager = LoginManager()
