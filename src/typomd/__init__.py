"""typomd - a small markdown parser for language-model output."""

from .adapters.inline import tokenize
from .adapters.markdown_parser import MarkdownParser, parse_markdown, segment
from .format import normalize

__version__ = "0.1.0"

__all__ = [
    "MarkdownParser",
    "normalize",
    "parse_markdown",
    "segment",
    "tokenize",
]
