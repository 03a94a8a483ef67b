"""
auth.py

Admin session helpers and the decorator that protects the settings page.
"""

import hmac
from functools import wraps

import structlog
from flask import current_app, flash, redirect, session, url_for

logger = structlog.get_logger()

SESSION_KEY = 'is_admin'


def check_admin_password(password):
    """Compare a submitted password with ADMIN_PASSWORD in constant time."""
    expected = current_app.config.get('ADMIN_PASSWORD')
    if not expected:
        logger.warning("Admin login attempted but ADMIN_PASSWORD is not set")
        return False
    if not password:
        return False
    return hmac.compare_digest(password.encode('utf-8'), expected.encode('utf-8'))


def login_admin():
    session[SESSION_KEY] = True
    session.permanent = True


def logout_admin():
    session.pop(SESSION_KEY, None)


def is_admin():
    return session.get(SESSION_KEY) is True


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_admin():
            flash('Please log in to manage settings.', 'warning')
            return redirect(url_for('admin.login'))
        return f(*args, **kwargs)
    return decorated_function
