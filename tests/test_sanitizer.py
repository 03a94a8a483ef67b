"""Tests for input sanitization helpers."""

import pytest

from utils import escape_attr, escape_url, is_clean_token, sanitize_text_field, sanitize_url, strip_token


@pytest.mark.parametrize('text,expected', [
    (None, ''),
    ('  abc  ', 'abc'),
    ('a\tb\nc', 'a b c'),
    ('<b>abc</b>', 'abc'),
    ('<script>alert(1)</script>abc', 'abc'),
    ('ab%20cd', 'abcd'),
    ('ab\x00cd', 'abcd'),
    (123, '123'),
])
def test_sanitize_text_field(text, expected):
    assert sanitize_text_field(text) == expected


def test_strip_token():
    assert strip_token('ab!c-123') == 'abc123'
    assert strip_token(None) == ''
    assert strip_token('ÄbC1') == 'bC1'


def test_is_clean_token():
    assert is_clean_token('abc123XYZ')
    assert is_clean_token('')
    assert not is_clean_token('abc-123')
    assert not is_clean_token('abc"')
    assert not is_clean_token(None)


def test_sanitize_url_rejects_dangerous_schemes():
    assert sanitize_url('javascript:alert(1)') == ''
    assert sanitize_url('data:text/html,x') == ''
    assert sanitize_url(None) == ''
    assert sanitize_url(' https://example.com/a.js ') == 'https://example.com/a.js'


def test_escape_url():
    assert escape_url('https://static.cloudflareinsights.com/beacon.min.js') == \
        'https://static.cloudflareinsights.com/beacon.min.js'
    assert escape_url('https://x.com/a?b=1&c=2') == 'https://x.com/a?b=1&#038;c=2'
    assert escape_url('javascript:alert(1)') == ''


def test_escape_attr():
    assert str(escape_attr(None)) == ''
    assert str(escape_attr("a'b")) == 'a&#39;b'
