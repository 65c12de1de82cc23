"""Identify the language of a file from its path or extension."""

from detectlang.classify import ClassificationResult, classify_paths
from detectlang.config import DetectlangConfig, parse_config
from detectlang.detect import extension_of, from_extension, from_lowercase_extension, from_path
from detectlang.exceptions import ConfigError, DetectlangError
from detectlang.languages import Language, all_languages, extensions_for

__all__ = [
    "ClassificationResult",
    "ConfigError",
    "DetectlangConfig",
    "DetectlangError",
    "Language",
    "all_languages",
    "classify_paths",
    "extension_of",
    "extensions_for",
    "from_extension",
    "from_lowercase_extension",
    "from_path",
    "parse_config",
]
