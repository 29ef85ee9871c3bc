"""Text normalization for typomd."""

from .normalize import normalize, normalize_inline, normalize_newlines

__all__ = [
    "normalize",
    "normalize_inline",
    "normalize_newlines",
]
