"""
Submission Listing Services

Search and sort logic for the admin submissions listing.
"""

import logging
from sqlalchemy import or_
from portal.models import Submission, LISTING_FIELDS
from portal.models.submission import (
    STATUS_NEW, STATUS_IN_PROGRESS, STATUS_COMPLETED, STATUS_REJECTED
)

logger = logging.getLogger(__name__)

# Checked in order; first status whose synonym occurs in the search text wins
STATUS_SYNONYMS = (
    (STATUS_NEW, ('pengajuan baru', 'baru', 'new')),
    (STATUS_IN_PROGRESS, ('diproses', 'proses', 'in_progress')),
    (STATUS_COMPLETED, ('selesai', 'completed')),
    (STATUS_REJECTED, ('ditolak', 'rejected')),
)

# Accepted sortBy values mapped to the column they order by
SORTABLE_COLUMNS = {
    'created_at': Submission.created_at,
    'updated_at': Submission.updated_at,
    'nama': Submission.nama,
    'name': Submission.nama,
    'status': Submission.status,
    'jenis_layanan': Submission.jenis_layanan,
    'service_type': Submission.jenis_layanan,
    'service-type': Submission.jenis_layanan,
    'tracking_code': Submission.tracking_code,
}
DEFAULT_SORT_FIELD = 'created_at'


def status_for_search(text):
    """Map free search text to a status value, or None."""
    normalized = (text or '').strip().lower()
    if not normalized:
        return None
    for status, synonyms in STATUS_SYNONYMS:
        if any(s in normalized for s in synonyms):
            return status
    return None


def resolve_sort(sort_by, sort_dir):
    """Return (field_name, ascending) after applying the allow-list."""
    field = (sort_by or '').strip()
    if field not in SORTABLE_COLUMNS:
        field = DEFAULT_SORT_FIELD
    ascending = (sort_dir or '').strip().upper() == 'ASC'
    return field, ascending


def build_search_filter(search):
    """OR of literal case-insensitive matches plus the status equality, if any."""
    search = (search or '').strip()
    if not search:
        return None

    clauses = [
        Submission.tracking_code.icontains(search, autoescape=True),
        Submission.nama.icontains(search, autoescape=True),
        Submission.jenis_layanan.icontains(search, autoescape=True),
    ]
    status = status_for_search(search)
    if status:
        clauses.append(Submission.status == status)
    return or_(*clauses)


def serialize_submission(submission):
    data = {}
    for field in LISTING_FIELDS:
        value = getattr(submission, field)
        if hasattr(value, 'isoformat'):
            value = value.isoformat()
        data[field] = value
    return data


def list_submissions(search=None, sort_by=None, sort_dir=None):
    """Full, unpaginated listing filtered by search and ordered by the resolved field."""
    field, ascending = resolve_sort(sort_by, sort_dir)
    column = SORTABLE_COLUMNS[field]

    query = Submission.query
    where = build_search_filter(search)
    if where is not None:
        query = query.filter(where)

    if ascending:
        query = query.order_by(column.asc(), Submission.id.asc())
    else:
        query = query.order_by(column.desc(), Submission.id.desc())

    submissions = query.all()
    logger.info('Found %d submissions (search=%r, sort=%s %s)',
                len(submissions), search, field, 'ASC' if ascending else 'DESC')
    if submissions:
        logger.debug('First submission: %s (%s)', submissions[0].tracking_code, submissions[0].status)

    return [serialize_submission(s) for s in submissions]
