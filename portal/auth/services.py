"""
Auth Services

Credential check against the admins table.
"""

import logging
from werkzeug.security import check_password_hash
from portal.errors import ValidationError, AuthError
from portal.models import Admin

logger = logging.getLogger(__name__)


def find_admin_by_email(email):
    """Exact-match lookup of a single admin."""
    return Admin.query.filter_by(email=email).first()


def authenticate(email, password):
    """Return the Admin matching the credentials.

    Raises:
        ValidationError: email or password missing (store is not queried)
        AuthError: unknown email or wrong password, same message for both
    """
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ValidationError()

    admin = find_admin_by_email(email)
    if admin is None:
        logger.info('Login rejected: no admin for %s', email)
        raise AuthError()

    if not check_password_hash(admin.password, password):
        logger.info('Login rejected: bad password for %s', email)
        raise AuthError()

    return admin
