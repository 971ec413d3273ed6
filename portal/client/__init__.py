"""
Client Package

Headless admin login view: captcha, local storage and the form controller.
"""

from portal.client.captcha import Captcha, generate_captcha
from portal.client.storage import ClientStorage, ADMIN_LOGGED_IN_KEY, ADMIN_DATA_KEY
from portal.client.login_view import AdminLoginView

__all__ = [
    'Captcha',
    'generate_captcha',
    'ClientStorage',
    'ADMIN_LOGGED_IN_KEY',
    'ADMIN_DATA_KEY',
    'AdminLoginView'
]
