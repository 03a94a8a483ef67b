"""
Token validation and retrieval.

The token is the only value the settings page stores. Submissions are
never rejected: disallowed characters are stripped, a settings error is
reported, and the corrected value is saved.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

import structlog

from constants import (
    OPTION_NAME, TOKEN_ERROR_SETTING, TOKEN_ERROR_CODE, TOKEN_ERROR_MESSAGE,
)
from utils.sanitizer import strip_token, sanitize_text_field

logger = structlog.get_logger()


@dataclass(frozen=True)
class SettingsError:
    """A notice shown on the settings page after a save."""
    setting: str
    code: str
    message: str
    type: str = 'error'


@dataclass
class ValidationResult:
    value: dict
    errors: list = field(default_factory=list)

    @property
    def token(self):
        return self.value['token']


def validate_options(data):
    """
    Validate a submitted options record.

    Args:
        data: Mapping with a 'token' entry. None, a missing entry or a
            None token are all treated as an empty token.

    Returns:
        ValidationResult holding {'token': <clean token>} and any
        settings errors raised while cleaning it.
    """
    raw = None
    if isinstance(data, Mapping):
        raw = data.get('token')
    if raw is None:
        raw = ''
    elif not isinstance(raw, str):
        raw = str(raw)

    candidate = strip_token(raw)
    errors = []

    if candidate != raw:
        errors.append(SettingsError(
            setting=TOKEN_ERROR_SETTING,
            code=TOKEN_ERROR_CODE,
            message=TOKEN_ERROR_MESSAGE,
        ))
        logger.warning("Token contained invalid characters", removed=len(raw) - len(candidate))

    return ValidationResult(value={'token': sanitize_text_field(candidate)}, errors=errors)


def save_options(store, data):
    """Validate a submission and persist the cleaned record."""
    result = validate_options(data)
    store.set(OPTION_NAME, result.value)
    logger.info("Analytics options saved", token_set=bool(result.token))
    return result


def get_token(store):
    """Return the stored token, or '' when none is configured."""
    options = store.get(OPTION_NAME)
    if not isinstance(options, Mapping):
        return ''

    token = options.get('token')
    if token is None:
        return ''
    if not isinstance(token, str):
        token = str(token)
    return token


def should_emit(token):
    return token is not None and token != ''
