"""
Services Package

Business logic for the analytics settings app.
"""

from .options import (
    OptionStore,
    OptionStoreError,
    MemoryOptionStore,
    DatabaseOptionStore,
)

from .token import (
    SettingsError,
    ValidationResult,
    validate_options,
    save_options,
    get_token,
    should_emit,
)

from .scripts import (
    PageRenderObserver,
    TagRewriter,
    Script,
    ScriptRegistry,
    run_page_render,
)

from .beacon import (
    BEACON_TAG,
    BeaconEmitter,
    beacon_tag,
)

__all__ = [
    # Options
    'OptionStore',
    'OptionStoreError',
    'MemoryOptionStore',
    'DatabaseOptionStore',
    # Token
    'SettingsError',
    'ValidationResult',
    'validate_options',
    'save_options',
    'get_token',
    'should_emit',
    # Scripts
    'PageRenderObserver',
    'TagRewriter',
    'Script',
    'ScriptRegistry',
    'run_page_render',
    # Beacon
    'BEACON_TAG',
    'BeaconEmitter',
    'beacon_tag',
]
