"""
Configuration settings for the Submission Tracking Admin Portal
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'portal.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').upper()

    # Default admin accounts ensured by scripts/ensure_admins.py
    DEFAULT_ADMINS = [
        {
            'username': 'admin',
            'email': 'admin@diskominfo.bogorkab.go.id',
            'password': os.environ.get('ADMIN_PASSWORD') or 'admin123',
        },
        {
            'username': 'operator',
            'email': 'operator@diskominfo.bogorkab.go.id',
            'password': os.environ.get('OPERATOR_PASSWORD') or 'operator123',
        },
    ]

    # The submissions listing is open unless this is switched on
    SUBMISSIONS_REQUIRE_ADMIN = os.environ.get('SUBMISSIONS_REQUIRE_ADMIN', '').lower() in ('1', 'true', 'yes')

    # Login view (client side)
    PORTAL_BASE_URL = os.environ.get('PORTAL_BASE_URL') or 'http://127.0.0.1:5000'
    LOGIN_REDIRECT_PATH = '/admin'
    LOGIN_REDIRECT_DELAY = 1.0
    CLIENT_STORAGE_PATH = os.environ.get('CLIENT_STORAGE_PATH') or \
        os.path.join(basedir, 'instance', 'client_storage.json')
    HTTP_TIMEOUT = 10


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'INFO'
    SUBMISSIONS_REQUIRE_ADMIN = False
    LOGIN_REDIRECT_DELAY = 0
