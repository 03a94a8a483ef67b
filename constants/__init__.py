from .analytics import (
    OPTION_NAME, SETTINGS_PAGE, PAGE_TITLE, MENU_TITLE,
    SECTION_TITLE, SECTION_TEXT, TOKEN_FIELD_LABEL, TOKEN_FIELD_NAME,
    TOKEN_INPUT_PATTERN, TOKEN_MIN_LENGTH, TOKEN_ERROR_SETTING,
    TOKEN_ERROR_CODE, TOKEN_ERROR_MESSAGE, SCRIPT_HANDLE, BEACON_URL,
)
