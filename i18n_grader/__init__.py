"""
i18n Grader
===========

Localization coverage grader for React Native projects. Scans JS/TS/TSX
sources for ``i18n.t('key')`` lookups and hardcoded JSX text, checks them
against a nested translation document and produces a score in [0, 1].

Usage:
    from i18n_grader import LanguageGrader, GradingConfig

    grader = LanguageGrader(GradingConfig(translation_file='store/en.json'))
    result = grader.grade()
    print(f"Score: {result.score:.2f} (passed: {result.success})")

CLI:
    i18n-grader init
    i18n-grader grade --json report.json
    i18n-grader keys --check screen.title
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.grader import LanguageGrader, GradeResult, GradeSummary, Report, GraderState
from .core.key_paths import resolve_key, has_key, extract_all_keys
from .core.score_model import ScoreModel, ScoreWeights

# Scanners
from .scanners.base import BaseScanner
from .scanners.react_native import ReactNativeScanner

# Configuration
from .utils.config import Config, GradingConfig

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'LanguageGrader',
    'GradeResult',
    'GradeSummary',
    'Report',
    'GraderState',
    'resolve_key',
    'has_key',
    'extract_all_keys',
    'ScoreModel',
    'ScoreWeights',
    'BaseScanner',
    'ReactNativeScanner',
    'Config',
    'GradingConfig',
]
