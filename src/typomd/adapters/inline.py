"""Inline span tokenizer for a single block's text.

Patterns are tried at each cursor position in a fixed priority order:

    `code`  **bold**  __bold__  *italic*  _italic_  [text](url)

The first one that matches a non-empty span wins and the cursor jumps past
it. Otherwise a run of plain text is emitted up to the next character that
could open a pattern. Nesting is not supported: the content of a matched
span is taken verbatim.
"""

from ..core.model import Bold, Code, InlineSpan, Italic, Link, Plain
from ..core.ports import InlineTokenizer
from ..format.normalize import normalize_inline

TRIGGERS = frozenset("`*_[")


class _Finder:
    """
    str.find with per-needle memo.

    A failed search from `start` also fails from any later start, and a hit
    at index k answers every search starting at or before k. This keeps a
    scan over long runs of unmatched markers linear.
    """

    def __init__(self, text: str):
        self.text = text
        self._hits: dict[str, tuple[int, int]] = {}

    def find(self, needle: str, start: int) -> int:
        cached = self._hits.get(needle)
        if cached is not None:
            searched_from, pos = cached
            if pos == -1 and searched_from <= start:
                return -1
            if pos != -1 and searched_from <= start <= pos:
                return pos
        pos = self.text.find(needle, start)
        self._hits[needle] = (start, pos)
        return pos


def _match_code(text: str, i: int, f: _Finder) -> tuple[InlineSpan, int] | None:
    close = f.find("`", i + 1)
    if close <= i + 1:
        return None
    return Code(text[i + 1 : close]), close + 1


def _match_double(
    text: str, i: int, f: _Finder, marker: str
) -> tuple[InlineSpan, int] | None:
    # Lazy: the first closing pair after at least one content character.
    close = f.find(marker, i + 3)
    if close == -1:
        return None
    newline = f.find("\n", i + 2)
    if newline != -1 and newline < close:
        return None
    return Bold(text[i + 2 : close]), close + 2


def _match_single(
    text: str, i: int, f: _Finder, marker: str
) -> tuple[InlineSpan, int] | None:
    close = f.find(marker, i + 1)
    if close <= i + 1:
        return None
    return Italic(text[i + 1 : close]), close + 1


def _match_link(text: str, i: int, f: _Finder) -> tuple[InlineSpan, int] | None:
    bracket = f.find("]", i + 1)
    if bracket <= i + 1:
        return None
    if bracket + 1 >= len(text) or text[bracket + 1] != "(":
        return None
    paren = f.find(")", bracket + 2)
    if paren <= bracket + 2:
        return None
    return Link(text=text[i + 1 : bracket], url=text[bracket + 2 : paren]), paren + 1


def _match_at(text: str, i: int, f: _Finder) -> tuple[InlineSpan, int] | None:
    ch = text[i]
    if ch == "`":
        return _match_code(text, i, f)
    if ch == "*":
        if text.startswith("**", i):
            hit = _match_double(text, i, f, "**")
            if hit:
                return hit
        return _match_single(text, i, f, "*")
    if ch == "_":
        if text.startswith("__", i):
            hit = _match_double(text, i, f, "__")
            if hit:
                return hit
        return _match_single(text, i, f, "_")
    if ch == "[":
        return _match_link(text, i, f)
    return None


def _plain_end(text: str, i: int) -> int:
    """End of a plain run starting at i; always at least one character."""
    if text[i] in TRIGGERS:
        return i + 1
    j = i + 1
    while j < len(text) and text[j] not in TRIGGERS:
        j += 1
    return j


def tokenize(text: str) -> list[InlineSpan]:
    """
    Split block text into inline spans, left to right.

    Never fails: unmatched markers come back as Plain text, so the visible
    text of the result always equals the input minus consumed markup.
    """
    text = normalize_inline(text)
    finder = _Finder(text)
    spans: list[InlineSpan] = []
    i = 0
    n = len(text)

    while i < n:
        hit = _match_at(text, i, finder)
        if hit is not None:
            span, i = hit
            spans.append(span)
            continue

        end = _plain_end(text, i)
        spans.append(Plain(text[i:end]))
        i = end

    return spans


class ScanningTokenizer(InlineTokenizer):
    def tokenize(self, text: str) -> list[InlineSpan]:
        return tokenize(text)
