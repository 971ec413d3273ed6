"""
Admin Blueprint

Read-only JSON API over citizen submissions for the admin panel.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portal.admin import routes  # noqa: E402, F401
