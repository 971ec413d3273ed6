"""
Models Package

Exports all models for easy importing.
"""

from portal.models.admin import Admin
from portal.models.submission import Submission, SUBMISSION_STATUSES, LISTING_FIELDS

__all__ = ['Admin', 'Submission', 'SUBMISSION_STATUSES', 'LISTING_FIELDS']
