"""Renderers and serializers for parsed documents."""

from .html import HtmlRenderer
from .serialize import document_to_dict, dumps_json, dumps_yaml
from .text import PlainTextRenderer, visible_text

__all__ = [
    "HtmlRenderer",
    "PlainTextRenderer",
    "document_to_dict",
    "dumps_json",
    "dumps_yaml",
    "visible_text",
]
