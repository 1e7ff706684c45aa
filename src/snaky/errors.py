from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a game is constructed with degenerate parameters."""
