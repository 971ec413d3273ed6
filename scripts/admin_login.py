"""Interactive admin login against a running portal.

Usage: python scripts/admin_login.py [base_url]
"""
import sys
import os
import getpass

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portal.client import AdminLoginView  # noqa: E402


def main(argv):
    kwargs = {}
    if len(argv) > 1:
        kwargs['base_url'] = argv[1]
    view = AdminLoginView.from_config(
        notify=lambda level, message: print(message),
        navigate=lambda path: print('Dashboard:', view.base_url + path),
        schedule=lambda delay, callback: callback(),
        **kwargs
    )

    view.update_field('email', input('Email: ').strip())
    view.update_field('password', getpass.getpass('Password: '))
    while True:
        view.update_field('captcha', input(f'Captcha {view.captcha_question} '))
        if view.submit():
            return 0
        for field, message in view.errors.items():
            if message:
                print(f'{field}: {message}')
        if 'captcha' not in view.errors:
            return 1


if __name__ == '__main__':
    sys.exit(main(sys.argv))
