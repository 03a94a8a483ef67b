"""
Analytics Constants

Option names, script handles and form hints shared by the settings page,
the token validator and the beacon emitter.
"""

# Settings store key holding the {'token': ...} record
OPTION_NAME = 'cf_web_analytics_options'

# Admin page slug
SETTINGS_PAGE = 'cf_web_analytics'

PAGE_TITLE = 'Cloudflare Web Analytics Settings'
MENU_TITLE = 'Cloudflare Web Analytics'
SECTION_TITLE = 'Cloudflare Web Analytics Settings'
SECTION_TEXT = 'Enter your token. Add instructions here.'
TOKEN_FIELD_LABEL = 'Token'

# Form field name, posted as cf_web_analytics_options[token]
TOKEN_FIELD_NAME = OPTION_NAME + '[token]'

# Client-side hints only. The server filter is stricter (no hyphens) and
# enforces no minimum length.
TOKEN_INPUT_PATTERN = '[a-zA-Z0-9-]+'
TOKEN_MIN_LENGTH = 8

# Settings error reported when the submitted token had to be corrected
TOKEN_ERROR_SETTING = 'cf_web_analytics_text_string'
TOKEN_ERROR_CODE = 'cf_web_analytics_texterror'
TOKEN_ERROR_MESSAGE = 'Incorrect value entered. Token should be only letters and numbers.'

# Beacon script
SCRIPT_HANDLE = 'cf-web-analytics'
BEACON_URL = 'https://static.cloudflareinsights.com/beacon.min.js'
