"""Batch classification of file paths by language."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING

from detectlang.config import DetectlangConfig
from detectlang.detect import from_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from detectlang.detect import PathInput
    from detectlang.languages import Language

logger = logging.getLogger(__name__)


@dataclass
class ClassificationResult:
    """Result of classifying a batch of paths."""

    recognized: dict[str, Language] = field(default_factory=dict)
    unrecognized: list[str] = field(default_factory=list)
    excluded: list[tuple[str, Language]] = field(default_factory=list)

    def by_language(self) -> dict[str, list[str]]:
        """Group recognized paths by language id, preserving input order."""
        groups: dict[str, list[str]] = {}
        for path, language in self.recognized.items():
            groups.setdefault(language.id, []).append(path)
        return groups


def _is_hidden(path: str) -> bool:
    return PurePath(path).name.startswith(".")


def classify_paths(paths: Iterable[PathInput], config: DetectlangConfig | None = None) -> ClassificationResult:
    """Classify paths by the language of their extension.

    Args:
        paths: Paths to classify. They are never read or checked on disk.
        config: Optional config with exclusions. Uses defaults if None.

    Returns:
        ClassificationResult keyed by the decoded path string.
    """
    if config is None:
        config = DetectlangConfig()

    excluded_ids = set(config.exclude_languages)
    result = ClassificationResult()

    for raw_path in paths:
        path = os.fsdecode(raw_path)
        if config.ignore_hidden_files and _is_hidden(path):
            logger.debug("Skipping hidden file %s", path)
            continue

        language = from_path(path)
        if language is None:
            logger.debug("No language recognized for %s", path)
            result.unrecognized.append(path)
        elif language.id in excluded_ids:
            logger.debug("Excluding %s (%s)", path, language.id)
            result.excluded.append((path, language))
        else:
            result.recognized[path] = language

    return result
