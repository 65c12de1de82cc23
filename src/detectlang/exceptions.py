"""Custom exception hierarchy for detectlang."""


class DetectlangError(Exception):
    """Base exception for all detectlang errors."""


class ConfigError(DetectlangError):
    """Configuration-related errors."""
