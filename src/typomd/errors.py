"""typomd exception hierarchy.

The parsing core never raises; these are for the edges (config, CLI, API).
"""


class TypomdError(Exception):
    """Base exception for all typomd errors."""


class ConfigError(TypomdError):
    """Raised for invalid values in typomd.toml."""
