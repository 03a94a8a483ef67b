# Utility modules for the analytics settings app
from .sanitizer import (
    strip_token, is_clean_token, sanitize_text_field,
    sanitize_url, escape_url, escape_attr
)
from .logging import configure_logging
