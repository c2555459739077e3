"""Domain errors."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """The round cannot be set up with the given configuration."""
