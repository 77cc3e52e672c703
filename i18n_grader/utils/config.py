"""Configuration management for i18n-grader."""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, fields

CONFIG_FILE_NAME = '.i18n-grader.yml'

VALID_SCANNERS = ['react-native']
VALID_REPORT_FORMATS = ['json', 'console']

# Request-body names used by the grading service.
CAMEL_CASE_ALIASES = {
    'translationFile': 'translation_file',
    'sourcePattern': 'source_pattern',
    'ignorePattern': 'ignore_pattern',
    'minimumScore': 'minimum_score',
    'missingKeyWeight': 'missing_key_weight',
    'hardcodedWeight': 'hardcoded_weight',
    'malformedWeight': 'malformed_weight',
    'unusedKeyWeight': 'unused_key_weight',
    'maxFileSize': 'max_file_size',
}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """A non-fatal configuration problem."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class ProjectConfig:
    """Project configuration."""
    name: str = "Unnamed Project"
    root: str = "."
    scanner: str = "react-native"


@dataclass
class GradingConfig:
    """Inputs of a single grading run."""
    translation_file: str = './store/en.json'
    source_pattern: str = './**/*.{js,jsx,ts,tsx}'
    ignore_pattern: str = 'node_modules/**'
    minimum_score: float = 0.8
    missing_key_weight: float = 0.4
    hardcoded_weight: float = 0.3
    malformed_weight: float = 0.2
    unused_key_weight: float = 0.1
    max_file_size: int = 5 * 1024 * 1024

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'GradingConfig':
        """
        Build a config from snake_case or camelCase keys.

        Unknown keys are ignored so a full service request body can be
        passed through unchanged.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            name = CAMEL_CASE_ALIASES.get(key, key)
            if name in known and value is not None:
                values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def weights(self) -> Dict[str, float]:
        return {
            'missing_key_weight': self.missing_key_weight,
            'hardcoded_weight': self.hardcoded_weight,
            'malformed_weight': self.malformed_weight,
            'unused_key_weight': self.unused_key_weight,
        }


@dataclass
class ReportsConfig:
    """Reports configuration."""
    formats: List[str] = field(default_factory=lambda: ["console"])
    output: str = "./i18n_reports/"


@dataclass
class Config:
    """Main configuration class."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    grading: GradingConfig = field(default_factory=GradingConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from a YAML file (defaults when absent)."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            project=ProjectConfig(**data.get('project', {})),
            grading=GradingConfig.from_dict(data.get('grading', {})),
            reports=ReportsConfig(**data.get('reports', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'project': {
                'name': self.project.name,
                'root': self.project.root,
                'scanner': self.project.scanner,
            },
            'grading': self.grading.to_dict(),
            'reports': {
                'formats': self.reports.formats,
                'output': self.reports.output,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to a YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        if self.project.scanner not in VALID_SCANNERS:
            errors.append(
                f"Invalid scanner '{self.project.scanner}'. "
                f"Valid options: {', '.join(VALID_SCANNERS)}"
            )

        if not Path(self.project.root).exists():
            warnings.append(ConfigValidationWarning(
                f"Project root does not exist: {self.project.root}"
            ))

        grading = self.grading

        if not grading.translation_file:
            errors.append("grading.translation_file cannot be empty")

        if not grading.source_pattern:
            errors.append("grading.source_pattern cannot be empty")

        if not _is_number(grading.minimum_score) or not 0 <= grading.minimum_score <= 1:
            errors.append(
                f"grading.minimum_score must be between 0 and 1, got {grading.minimum_score}"
            )

        for name, value in grading.weights.items():
            if not _is_number(value) or value < 0:
                errors.append(f"grading.{name} must be a non-negative number, got {value}")

        if not isinstance(grading.max_file_size, int) or grading.max_file_size <= 0:
            errors.append(
                f"grading.max_file_size must be a positive integer, got {grading.max_file_size}"
            )

        for fmt in self.reports.formats:
            if fmt not in VALID_REPORT_FORMATS:
                warnings.append(ConfigValidationWarning(
                    f"Unknown report format: '{fmt}'. "
                    f"Valid options: {', '.join(VALID_REPORT_FORMATS)}"
                ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def create_default_config(project_name: str = "Unnamed Project") -> Config:
    """Create the default configuration written by ``i18n-grader init``."""
    config = Config()
    config.project.name = project_name
    config.reports.formats = ["console", "json"]
    return config
