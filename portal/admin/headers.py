"""
Anti-cache response headers for the submissions listing.
"""

import secrets
import time
from werkzeug.http import http_date

NO_CACHE_CONTROL = (
    'no-cache, no-store, must-revalidate, private, '
    'max-age=0, s-maxage=0, stale-while-revalidate=0'
)


def _cache_buster_token():
    return secrets.token_hex(4)


def apply_no_cache_headers(response, query_params=None):
    """Attach the full no-cache header set.

    query_params holds the ignored cache-busting parameters (t, r, force, cb)
    which are echoed back for diagnostics; missing ones echo as empty strings.
    """
    params = query_params or {}
    timestamp = int(time.time() * 1000)
    token = _cache_buster_token()
    q_t = params.get('t') or ''
    q_r = params.get('r') or ''
    q_force = params.get('force') or ''
    q_cb = params.get('cb') or ''

    headers = response.headers
    headers['Cache-Control'] = NO_CACHE_CONTROL
    headers['Pragma'] = 'no-cache'
    headers['Expires'] = '0'
    headers['Clear-Site-Data'] = '"cache"'

    headers['Surrogate-Control'] = 'no-store'
    headers['CDN-Cache-Control'] = 'no-cache'
    headers['Vercel-CDN-Cache-Control'] = 'no-cache'
    headers['X-Vercel-Cache'] = 'MISS'

    headers['Last-Modified'] = http_date(time.time())
    headers['ETag'] = f'"{timestamp}-{token}-{q_t}-{q_r}"'
    headers['X-Response-Time'] = str(int(time.time() * 1000))
    headers['X-Cache-Buster'] = f'{timestamp}-{token}-{q_cb}'
    headers['X-Force-Refresh'] = 'true'
    headers['X-Query-Params'] = f'{q_t}-{q_r}-{q_force}'
    return response


def apply_error_no_cache_headers(response):
    """Smaller header set used on error responses."""
    headers = response.headers
    headers['Cache-Control'] = 'no-cache, no-store, must-revalidate, private'
    headers['Pragma'] = 'no-cache'
    headers['Expires'] = '0'
    headers['Surrogate-Control'] = 'no-store'
    headers['CDN-Cache-Control'] = 'no-cache'
    return response
