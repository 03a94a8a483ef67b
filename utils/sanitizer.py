"""
Input Sanitization Module

Cleans admin-submitted option values and escapes values placed into
rendered HTML attributes.
"""

import re
from urllib.parse import urlparse

from markupsafe import escape

TOKEN_DISALLOWED_RE = re.compile(r'[^A-Za-z0-9]')
TOKEN_ALLOWED_RE = re.compile(r'[A-Za-z0-9]*')

_TAG_RE = re.compile(r'<[^>]*>')
_SCRIPT_STYLE_RE = re.compile(r'<(script|style)[^>]*?>.*?</\1>', re.IGNORECASE | re.DOTALL)
_WHITESPACE_RE = re.compile(r'[\r\n\t ]+')
_OCTET_RE = re.compile(r'%[a-fA-F0-9]{2}')
_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def strip_token(value):
    """Remove every character that is not an ASCII letter or digit."""
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    return TOKEN_DISALLOWED_RE.sub('', value)


def is_clean_token(value):
    """True when value contains only ASCII letters and digits (or is empty)."""
    return isinstance(value, str) and TOKEN_ALLOWED_RE.fullmatch(value) is not None


def sanitize_text_field(text):
    """
    Sanitize a single-line text field from a form submission.

    Strips tags (and the contents of script/style blocks), control
    characters and percent-encoded octets, collapses whitespace and trims
    the result.

    Args:
        text: The submitted value (can be None)

    Returns:
        Sanitized string
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    if '<' in text:
        text = _SCRIPT_STYLE_RE.sub('', text)
        text = _TAG_RE.sub('', text)
        text = text.replace('<', '&lt;')

    text = _CONTROL_RE.sub('', text)
    text = _WHITESPACE_RE.sub(' ', text)

    # Percent-encoded octets can hide characters the filters above remove
    while _OCTET_RE.search(text):
        text = _OCTET_RE.sub('', text)
    text = _WHITESPACE_RE.sub(' ', text)

    return text.strip()


def sanitize_url(url):
    """
    Sanitize a URL by rejecting dangerous schemes.

    Only http and https URLs (or scheme-relative ones) survive.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()

    try:
        scheme = urlparse(url).scheme.lower()
    except ValueError:
        return ''

    if scheme not in ('http', 'https', ''):
        return ''

    return url


def escape_url(url):
    """Sanitize a URL and escape it for use inside a single-quoted attribute."""
    url = sanitize_url(url)
    if not url:
        return ''
    url = url.replace(' ', '%20')
    return url.replace('&', '&#038;').replace("'", '&#039;').replace('"', '&#034;').replace('<', '%3C').replace('>', '%3E')


def escape_attr(value):
    """HTML-escape a value for an attribute, treating None as empty."""
    if value is None:
        return escape('')
    return escape(value)
