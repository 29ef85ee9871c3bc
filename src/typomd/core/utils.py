"""Utility functions for typomd."""

import re
import unicodedata


def slugify(text: str) -> str:
    """
    Turn heading text into an HTML id.

    Examples:
        >>> slugify("Getting Started")
        'getting-started'
        >>> slugify("Café – menu")
        'cafe-menu'
    """
    text = unicodedata.normalize("NFKD", text.lower())
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_-]+", "-", text)
    return text.strip("-")


def strip_emphasis_markers(text: str) -> str:
    """Drop ``**`` and ``__`` runs; headings are already rendered bold."""
    return text.replace("**", "").replace("__", "")
