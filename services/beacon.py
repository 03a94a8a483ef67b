"""
Cloudflare Web Analytics beacon.

Enqueues the beacon script when a token is configured and rewrites its tag
to carry the token in a data-cf-beacon attribute.
"""

import json

import structlog

from constants import SCRIPT_HANDLE, BEACON_URL
from services.options import OptionStoreError
from services.scripts import PageRenderObserver, TagRewriter
from services.token import get_token, should_emit
from utils.sanitizer import escape_url, is_clean_token

logger = structlog.get_logger()

# Two spaces before data-cf-beacon are part of the expected output
BEACON_TAG = "<script defer src='{src}'  data-cf-beacon='{config}'></script>"


def beacon_tag(src, token):
    """Build the beacon tag. The token must already be letters and digits."""
    if not is_clean_token(token):
        raise ValueError('token must contain only letters and digits')
    return BEACON_TAG.format(src=escape_url(src), config=json.dumps({'token': token}))


class BeaconEmitter(PageRenderObserver, TagRewriter):
    """Page render observer and tag rewriter for the beacon script."""

    def __init__(self, store, src=BEACON_URL):
        self.store = store
        self.src = src

    def current_token(self):
        """Stored token, or '' when none is configured or the store fails."""
        try:
            return get_token(self.store)
        except OptionStoreError as e:
            logger.error("Could not read analytics token", error=str(e))
            return ''

    def on_page_render(self, registry):
        token = self.current_token()
        if not should_emit(token):
            logger.debug("No analytics token configured, beacon skipped")
            return

        registry.enqueue(SCRIPT_HANDLE, self.src, deps=None, ver=None, in_footer=True)

    def rewrite_tag(self, tag, handle, src):
        if handle != SCRIPT_HANDLE:
            return tag

        token = self.current_token()
        if not should_emit(token):
            return tag
        if not is_clean_token(token):
            # Stored outside the validator; quotes would break the attribute
            logger.warning("Stored analytics token is not alphanumeric, beacon tag left unchanged")
            return tag

        return beacon_tag(src, token)
