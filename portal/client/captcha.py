"""
Arithmetic captcha for the login form.

Purely a friction step on the client; the answer is never sent to the server.
"""

import random
from collections import namedtuple

Captcha = namedtuple('Captcha', ['question', 'answer'])

OPERATORS = ('+', '-')


def generate_captcha(rng=random):
    """Single-digit addition or subtraction, operands 1-9."""
    a = rng.randint(1, 9)
    b = rng.randint(1, 9)
    op = rng.choice(OPERATORS)
    answer = a + b if op == '+' else a - b
    return Captcha(f'{a} {op} {b} = ?', str(answer))


def check_answer(captcha, value):
    return (value or '').strip() == captcha.answer
