"""Language detection from file paths and extensions."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import TYPE_CHECKING

from detectlang.languages import EXTENSION_MAP, Language

if TYPE_CHECKING:
    from typing import TypeAlias

    PathInput: TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def extension_of(path: PathInput) -> str | None:
    """Return the text after the last dot of the path's file name.

    Returns None when the file name has no dot, or when its only dot is the
    leading dot of a hidden file (``.gitignore``). ``archive.tar.gz`` gives
    ``gz``. The path is never touched on disk.
    """
    name = PurePath(os.fsdecode(path)).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def from_lowercase_extension(extension: str) -> Language | None:
    """Identify a language from an extension that is already lowercase.

    No normalization is applied, so ``"jSoN"`` returns None. Use
    :func:`from_extension` when the casing is not guaranteed.
    """
    return EXTENSION_MAP.get(extension)


def from_extension(extension: str) -> Language | None:
    """Identify a language from a file extension, ignoring case.

    The extension is expected without a leading dot: ``"rs"`` matches
    Rust, ``".rs"`` does not.

    Args:
        extension: Bare file extension in any case.

    Returns:
        The matching Language, or None if the extension is unknown.
    """
    # Table keys are ASCII, so anything else can never match.
    if not extension.isascii():
        return None
    if not extension.islower():
        extension = extension.lower()
    return from_lowercase_extension(extension)


def from_path(path: PathInput) -> Language | None:
    """Identify a language from the extension of a path, ignoring case.

    Only the last dot-separated segment of the file name is used, and the
    path is not required to exist.

    Args:
        path: Absolute or relative path, as str, bytes or path-like.

    Returns:
        The matching Language, or None if no known extension was found.
    """
    ext = extension_of(path)
    if ext is None:
        return None
    return from_extension(ext)
