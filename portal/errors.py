"""
Error taxonomy shared by the API handlers and the login view.
"""


class PortalError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""
    status_code = 500
    default_message = 'Terjadi kesalahan pada server'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    """Client input is incomplete."""
    status_code = 400
    default_message = 'Email dan password wajib diisi'


class AuthError(PortalError):
    """Bad credentials. The message never says which part was wrong."""
    status_code = 401
    default_message = 'Email atau password salah'


class CaptchaError(PortalError):
    """Missing or wrong captcha answer. Raised and handled client side only."""
    status_code = 400
    default_message = 'Jawaban captcha salah'


class InternalError(PortalError):
    """Store or network failure, reported with a generic message."""
    status_code = 500
