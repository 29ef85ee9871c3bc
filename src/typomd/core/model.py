from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

# Blocks are created once by the segmenter and never mutated.


@dataclass(frozen=True)
class CodeBlock:
    language: str  # fence info, trimmed; may be ""
    code: str  # lines between the fences joined with "\n"
    kind: str = field(default="code", init=False)


@dataclass(frozen=True)
class Heading:
    level: int  # 1, 2 or 3
    text: str
    kind: str = field(default="heading", init=False)


@dataclass(frozen=True)
class Bullet:
    text: str
    kind: str = field(default="bullet", init=False)


@dataclass(frozen=True)
class Numbered:
    marker: str  # e.g. "2."
    text: str
    kind: str = field(default="numbered", init=False)


@dataclass(frozen=True)
class Paragraph:
    text: str
    kind: str = field(default="paragraph", init=False)


Block = Union[CodeBlock, Heading, Bullet, Numbered, Paragraph]


@dataclass(frozen=True)
class Plain:
    text: str
    kind: str = field(default="plain", init=False)


@dataclass(frozen=True)
class Bold:
    text: str
    kind: str = field(default="bold", init=False)


@dataclass(frozen=True)
class Italic:
    text: str
    kind: str = field(default="italic", init=False)


@dataclass(frozen=True)
class Code:
    text: str
    kind: str = field(default="code", init=False)


@dataclass(frozen=True)
class Link:
    text: str
    url: str
    kind: str = field(default="link", init=False)


InlineSpan = Union[Plain, Bold, Italic, Code, Link]


def span_text(span: InlineSpan) -> str:
    """Visible text of a span: markers gone, link resolved to its label."""
    return span.text


@dataclass(frozen=True)
class ParsedBlock:
    block: Block
    spans: tuple[InlineSpan, ...] = ()  # always empty for CodeBlock


@dataclass
class Document:
    source: str
    blocks: list[ParsedBlock] = field(default_factory=list)

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
