"""
Client-side key/value storage for the login flag and admin profile.

Values are plain strings, like browser localStorage. When a path is given
the data is kept in a JSON file so it survives between runs.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)

ADMIN_LOGGED_IN_KEY = 'adminLoggedIn'
ADMIN_DATA_KEY = 'adminData'


class ClientStorage:
    """localStorage-like string store, optionally file backed."""

    def __init__(self, path=None):
        self.path = path
        self._items = {}
        if path and os.path.exists(path):
            with open(path, encoding='utf-8') as fh:
                try:
                    items = json.load(fh)
                except ValueError:
                    logger.warning('Client storage %s is not valid JSON, starting empty', path)
                    items = {}
            if isinstance(items, dict):
                self._items = {str(k): str(v) for k, v in items.items()}
            else:
                logger.warning('Client storage %s does not hold an object, starting empty', path)

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)
        self._flush()

    def remove_item(self, key):
        if self._items.pop(key, None) is not None:
            self._flush()

    def clear(self):
        self._items = {}
        self._flush()

    def _flush(self):
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as fh:
            json.dump(self._items, fh, indent=2)

    # Login helpers

    def save_login(self, admin):
        self.set_item(ADMIN_LOGGED_IN_KEY, 'true')
        self.set_item(ADMIN_DATA_KEY, json.dumps(admin))

    def is_logged_in(self):
        return self.get_item(ADMIN_LOGGED_IN_KEY) == 'true'

    def load_admin(self):
        raw = self.get_item(ADMIN_DATA_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning('Stored admin data is not valid JSON')
            return None

    def clear_login(self):
        """Forget the login flag and profile, leaving other keys alone."""
        self.remove_item(ADMIN_LOGGED_IN_KEY)
        self.remove_item(ADMIN_DATA_KEY)
