"""
Services Package

Exports all services for easy importing.
"""

from portal.services.seeding import ensure_admin, ensure_default_admins, run

__all__ = [
    'ensure_admin',
    'ensure_default_admins',
    'run'
]
