"""
Admin Login View

Form controller behind the admin login page. It keeps the form fields,
runs the local captcha, calls the login API and, on success, stores the
login flag and profile before navigating to the dashboard.

States: idle -> validating -> submitting -> success | error
"""

import logging
import threading
import requests
from portal.client.captcha import generate_captcha, check_answer
from portal.client.storage import ClientStorage
from portal.config import Config
from portal.errors import CaptchaError, ValidationError

logger = logging.getLogger(__name__)

IDLE = 'idle'
VALIDATING = 'validating'
SUBMITTING = 'submitting'
SUCCESS = 'success'
ERROR = 'error'

LOGIN_PATH = '/api/admin/auth/login'
LOGOUT_PATH = '/api/admin/auth/logout'

MSG_CAPTCHA_REQUIRED = 'Captcha wajib diisi'
MSG_LOGIN_SUCCESS = 'Login berhasil! Mengalihkan ke dashboard...'
MSG_LOGIN_FAILED = 'Username atau password salah'
MSG_SERVER_ERROR = 'Terjadi kesalahan pada server'


def _start_timer(delay, callback):
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class AdminLoginView:
    """Headless admin login form."""

    def __init__(self, http=None, storage=None, base_url=None,
                 redirect_path=None, redirect_delay=None, timeout=None,
                 navigate=None, notify=None, schedule=None,
                 captcha_factory=generate_captcha):
        self.http = http or requests.Session()
        self.storage = storage if storage is not None else ClientStorage()
        self.base_url = (base_url or Config.PORTAL_BASE_URL).rstrip('/')
        self.redirect_path = redirect_path or Config.LOGIN_REDIRECT_PATH
        self.redirect_delay = Config.LOGIN_REDIRECT_DELAY if redirect_delay is None else redirect_delay
        self.timeout = timeout or Config.HTTP_TIMEOUT
        self._navigate = navigate or self._default_navigate
        self._notify = notify or self._default_notify
        self._schedule = schedule or _start_timer
        self._captcha_factory = captcha_factory
        self._lock = threading.Lock()

        self.email = ''
        self.password = ''
        self.captcha_input = ''
        self.errors = {}
        self.state = IDLE
        self.is_submitting = False
        self.admin = None
        self.location = None
        self.captcha = None
        self.refresh_captcha()

    @classmethod
    def from_config(cls, config=Config, **kwargs):
        kwargs.setdefault('base_url', config.PORTAL_BASE_URL)
        kwargs.setdefault('redirect_path', config.LOGIN_REDIRECT_PATH)
        kwargs.setdefault('redirect_delay', config.LOGIN_REDIRECT_DELAY)
        kwargs.setdefault('timeout', config.HTTP_TIMEOUT)
        kwargs.setdefault('storage', ClientStorage(config.CLIENT_STORAGE_PATH))
        return cls(**kwargs)

    @property
    def captcha_question(self):
        return self.captcha.question

    def refresh_captcha(self):
        """New challenge; clears whatever was typed in the captcha field."""
        self.captcha = self._captcha_factory()
        self.captcha_input = ''

    def update_field(self, name, value):
        """Set a form field and clear its pending error."""
        if name not in ('email', 'password', 'captcha'):
            raise KeyError(name)
        if name == 'captcha':
            self.captcha_input = value
        else:
            setattr(self, name, value)
        if self.errors.get(name):
            self.errors[name] = ''

    def submit(self):
        """Validate locally and call the login API.

        Returns True when login succeeded, False otherwise (including a
        submit ignored because another one is in flight).
        """
        with self._lock:
            if self.is_submitting:
                logger.debug('Submit ignored, login already in flight')
                return False
            self.state = VALIDATING
            try:
                self._validate()
            except (ValidationError, CaptchaError):
                self.state = ERROR
                return False
            self.is_submitting = True

        self.state = SUBMITTING
        self.errors = {}
        return self._send_login()

    def _validate(self):
        if not self.email or not self.password:
            error = ValidationError()
            self.errors = {'submit': error.message}
            raise error
        if not self.captcha_input.strip():
            error = CaptchaError(MSG_CAPTCHA_REQUIRED)
            self.errors = {'captcha': error.message}
            raise error
        if not check_answer(self.captcha, self.captcha_input):
            error = CaptchaError()
            self.errors = {'captcha': error.message}
            self.refresh_captcha()
            raise error

    def _send_login(self):
        url = self.base_url + LOGIN_PATH
        try:
            response = self.http.post(
                url,
                json={'email': self.email, 'password': self.password},
                timeout=self.timeout,
            )
            data = response.json()
        except (requests.RequestException, ValueError):
            logger.exception('Login request to %s failed', url)
            return self._fail(MSG_SERVER_ERROR)

        if not isinstance(data, dict):
            data = {}

        if response.ok and data.get('success'):
            self.admin = data.get('admin') or {}
            self.storage.save_login(self.admin)
            self.state = SUCCESS
            self._notify('success', MSG_LOGIN_SUCCESS)
            self._schedule(self.redirect_delay, lambda: self._navigate(self.redirect_path))
            return True

        return self._fail(data.get('error') or MSG_LOGIN_FAILED)

    def logout(self):
        """Forget the stored login and end the server session.

        Local storage is always cleared; returns False if the server could
        not be reached.
        """
        self.storage.clear_login()
        self.admin = None
        self.is_submitting = False
        self.state = IDLE
        self.refresh_captcha()

        url = self.base_url + LOGOUT_PATH
        try:
            self.http.post(url, timeout=self.timeout)
        except requests.RequestException:
            logger.warning('Logout request to %s failed', url, exc_info=True)
            return False
        return True

    def _fail(self, message):
        self.errors = {'submit': message}
        self.state = ERROR
        self.is_submitting = False
        self.refresh_captcha()
        return False

    def _default_navigate(self, path):
        self.location = path
        logger.info('Navigating to %s', path)

    def _default_notify(self, level, message):
        logger.info('[%s] %s', level, message)
