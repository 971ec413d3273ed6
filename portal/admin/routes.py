"""
Admin Routes

Submissions listing for the admin dashboard.
"""

import logging
from flask import request, jsonify
from portal.admin import admin_bp
from portal.admin.decorators import admin_required
from portal.admin.headers import apply_no_cache_headers, apply_error_no_cache_headers
from portal.admin.services import list_submissions
from portal.database import ensure_database

logger = logging.getLogger(__name__)

CACHE_BUSTING_PARAMS = ('t', 'r', 'force', 'cb')
LISTING_ERROR_MESSAGE = 'Terjadi kesalahan internal server'


@admin_bp.route('/submissions')
@admin_required
def submissions():
    """List submissions with optional search and sort, never cached."""
    try:
        ensure_database()

        cache_params = {name: request.args.get(name) for name in CACHE_BUSTING_PARAMS}
        logger.debug('Query params: t=%(t)s, r=%(r)s, force=%(force)s, cb=%(cb)s', cache_params)

        rows = list_submissions(
            search=request.args.get('search', ''),
            sort_by=request.args.get('sortBy', 'created_at'),
            sort_dir=request.args.get('sortDir', 'DESC'),
        )

        return apply_no_cache_headers(jsonify(rows), cache_params)
    except Exception:
        logger.exception('Error fetching submissions')
        response = jsonify({'message': LISTING_ERROR_MESSAGE})
        response.status_code = 500
        return apply_error_no_cache_headers(response)
