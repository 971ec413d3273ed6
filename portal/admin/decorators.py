"""
Admin Decorator
"""

from functools import wraps
from flask import current_app, jsonify
from flask_login import current_user
from portal.admin.headers import apply_error_no_cache_headers


def admin_required(f):
    """Reject the request unless an admin session is present.

    Only enforced when SUBMISSIONS_REQUIRE_ADMIN is set; the listing is
    open otherwise.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if current_app.config.get('SUBMISSIONS_REQUIRE_ADMIN') and not current_user.is_authenticated:
            response = jsonify({'message': 'Silakan login sebagai admin'})
            response.status_code = 401
            return apply_error_no_cache_headers(response)
        return f(*args, **kwargs)
    return wrapper
