"""Create or refresh the two default admin accounts.

Usage: python scripts/ensure_admins.py
Exits 0 on success, 1 on failure.
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portal import create_app  # noqa: E402
from portal.services import run  # noqa: E402

if __name__ == '__main__':
    sys.exit(run(create_app()))
