"""
Auth Routes

Admin login, logout and profile endpoints.
"""

import logging
from flask import request, jsonify
from flask_login import login_user, logout_user, current_user
from portal.auth import auth_bp
from portal.auth.services import authenticate
from portal.database import ensure_database
from portal.errors import PortalError, InternalError

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Check email/password and return the admin's public profile."""
    try:
        ensure_database()

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        admin = authenticate(data.get('email'), data.get('password'))

        # Signed server-side session alongside the client-side flag
        login_user(admin)
        logger.info('Admin %s logged in', admin.email)

        return jsonify({
            'success': True,
            'message': 'Login berhasil',
            'admin': admin.to_profile(),
        })
    except PortalError as e:
        return jsonify({'error': e.message}), e.status_code
    except Exception:
        logger.exception('Login error')
        error = InternalError()
        return jsonify({'error': error.message}), error.status_code


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Drop the server-side admin session."""
    logout_user()
    return jsonify({'success': True, 'message': 'Logout berhasil'})


@auth_bp.route('/me')
def me():
    """Profile of the admin bound to the current session."""
    if not current_user.is_authenticated:
        return jsonify({'error': 'Belum login'}), 401
    return jsonify({'success': True, 'admin': current_user.to_profile()})
