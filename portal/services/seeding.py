"""
Admin Seeding Service

Makes sure the default admin accounts exist with their configured
passwords. Safe to run repeatedly.
"""

import logging
from flask import current_app
from werkzeug.security import generate_password_hash
from portal.database import ensure_database
from portal.extensions import db
from portal.models import Admin

logger = logging.getLogger(__name__)

CREATED = 'created'
UPDATED = 'updated'


def ensure_admin(username, email, password):
    """Create the admin if missing, otherwise refresh its password hash.

    An empty username on an existing record is backfilled. Each account is
    committed on its own.
    """
    existing = Admin.query.filter_by(email=email).first()
    hashed = generate_password_hash(password)

    if existing is None:
        db.session.add(Admin(username=username, email=email, password=hashed))
        action = CREATED
    else:
        existing.username = existing.username or username
        existing.password = hashed
        action = UPDATED

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return action


def ensure_default_admins(accounts=None):
    """Ensure every configured default admin; returns [(email, action), ...]."""
    if accounts is None:
        accounts = current_app.config['DEFAULT_ADMINS']

    ensure_database()
    results = []
    for account in accounts:
        action = ensure_admin(account['username'], account['email'], account['password'])
        logger.info('%s admin %s', action.capitalize(), account['email'])
        results.append((account['email'], action))
    return results


def run(app, accounts=None):
    """Entry point for scripts/ensure_admins.py. Returns the process exit code."""
    try:
        with app.app_context():
            for email, action in ensure_default_admins(accounts):
                if action == CREATED:
                    print(f'Created admin {email}')
                else:
                    print(f'Updated admin {email}')
        print('Ensure admins completed.')
        return 0
    except Exception as e:
        logger.exception('Failed to ensure admins')
        print('Failed to ensure admins:', e)
        return 1
