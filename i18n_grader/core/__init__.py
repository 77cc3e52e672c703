"""Core grading modules."""

from .key_paths import resolve_key, has_key, extract_all_keys
from .score_model import ScoreModel, ScoreWeights
from .translation_loader import (
    ConfigurationError,
    TranslationFileNotFound,
    TranslationParseError,
    load_translations,
)
from .grader import (
    LanguageGrader,
    GraderState,
    GradeResult,
    GradeSummary,
    Report,
)

__all__ = [
    'resolve_key',
    'has_key',
    'extract_all_keys',
    'ScoreModel',
    'ScoreWeights',
    'ConfigurationError',
    'TranslationFileNotFound',
    'TranslationParseError',
    'load_translations',
    'LanguageGrader',
    'GraderState',
    'GradeResult',
    'GradeSummary',
    'Report',
]
