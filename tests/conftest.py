"""Shared pytest configuration and fixtures."""

import pytest


@pytest.fixture
def mixed_paths() -> list[str]:
    """Return a realistic mix of project paths."""
    return [
        "src/main.rs",
        "README.md",
        "Makefile",
        ".gitignore",
        "include/vector.hpp",
        "src/lib.cpp",
        "package.json",
        ".eslintrc.json",
        "dist/bundle.tar.gz",
    ]
