"""Tests for token validation and retrieval."""

import pytest

from constants import OPTION_NAME, TOKEN_ERROR_CODE, TOKEN_ERROR_MESSAGE
from services import MemoryOptionStore, get_token, save_options, should_emit, validate_options


@pytest.mark.parametrize('token', ['abc123XYZ', 'a', '0123456789', 'ABCDEFabcdef0099'])
def test_validate_clean_token_is_idempotent(token):
    first = validate_options({'token': token})
    second = validate_options(first.value)

    assert first.value == {'token': token}
    assert second.value == first.value
    assert first.errors == []
    assert second.errors == []


def test_validate_strips_disallowed_characters():
    result = validate_options({'token': 'ab!c-123'})

    assert result.token == 'abc123'
    assert len(result.errors) == 1
    assert result.errors[0].code == TOKEN_ERROR_CODE
    assert result.errors[0].message == TOKEN_ERROR_MESSAGE
    assert result.errors[0].type == 'error'


def test_validate_strips_hyphens_from_ui_pattern():
    result = validate_options({'token': 'abcd-1234'})

    assert result.token == 'abcd1234'
    assert result.errors


def test_validate_strips_quotes_and_markup():
    result = validate_options({'token': '"><script>alert(1)</script>'})

    assert result.token == 'scriptalert1script'
    assert result.errors


@pytest.mark.parametrize('data', [None, {}, {'token': None}])
def test_validate_missing_token_is_empty(data):
    result = validate_options(data)

    assert result.value == {'token': ''}
    assert result.errors == []


def test_validate_coerces_non_string_token():
    result = validate_options({'token': 12345678})

    assert result.token == '12345678'
    assert result.errors == []


def test_validate_short_token_is_accepted():
    # The 8 character minimum is only a form hint
    result = validate_options({'token': 'abc'})

    assert result.token == 'abc'
    assert result.errors == []


def test_save_options_persists_cleaned_value(store):
    result = save_options(store, {'token': ' abc 123 '})

    assert result.errors
    assert store.get(OPTION_NAME) == {'token': 'abc123'}


def test_get_token_unset_store(store):
    token = get_token(store)

    assert token == ''
    assert should_emit(token) is False


@pytest.mark.parametrize('record', [None, 'abc123', ['abc123'], {'other': 'x'}, {'token': None}])
def test_get_token_malformed_record(record):
    store = MemoryOptionStore({OPTION_NAME: record})

    assert get_token(store) == ''


def test_get_token_returns_stored_token():
    store = MemoryOptionStore({OPTION_NAME: {'token': 'abc123XYZ'}})

    assert get_token(store) == 'abc123XYZ'


def test_should_emit():
    assert should_emit('abc') is True
    assert should_emit('') is False
    assert should_emit(None) is False
