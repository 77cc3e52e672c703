"""Translation document loading."""

import json
from pathlib import Path
from typing import Any, Union

import yaml

YAML_SUFFIXES = {'.yml', '.yaml'}


class ConfigurationError(Exception):
    """The run cannot start: its translation document is unusable."""


class TranslationFileNotFound(ConfigurationError):
    """Translation file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Translation file not found: {self.path}")


class TranslationParseError(ConfigurationError):
    """Translation file is not valid JSON/YAML."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid translation file {self.path}: {reason}")


def load_translations(path: Union[str, Path]) -> Any:
    """
    Load a translation document.

    ``.yml``/``.yaml`` files are read with PyYAML, everything else as JSON.

    Args:
        path: Translation file path

    Returns:
        Parsed document (usually a dict)

    Raises:
        TranslationFileNotFound: Path does not exist or is not a file
        TranslationParseError: Content cannot be parsed
    """
    path = Path(path)
    if not path.is_file():
        raise TranslationFileNotFound(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise TranslationParseError(path, str(e)) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return _stringify_keys(yaml.safe_load(content))
        return json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TranslationParseError(path, str(e)) from e


def _stringify_keys(node: Any) -> Any:
    """YAML allows int/bool mapping keys; key paths address them as text."""
    if isinstance(node, dict):
        return {str(key): _stringify_keys(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(item) for item in node]
    return node
