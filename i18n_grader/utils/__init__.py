"""Utility modules."""

from .colors import Colors
from .config import (
    Config,
    GradingConfig,
    ConfigValidationError,
    create_default_config,
)
from .validators import (
    MALFORMED_KEY_ISSUE,
    should_flag_as_hardcoded,
    is_malformed_key,
)
from .file_discovery import (
    FileAccessError,
    SourceRecord,
    expand_braces,
    find_source_files,
    read_source_record,
)

__all__ = [
    'Colors',
    'Config',
    'GradingConfig',
    'ConfigValidationError',
    'create_default_config',
    'MALFORMED_KEY_ISSUE',
    'should_flag_as_hardcoded',
    'is_malformed_key',
    'FileAccessError',
    'SourceRecord',
    'expand_braces',
    'find_source_files',
    'read_source_record',
]
