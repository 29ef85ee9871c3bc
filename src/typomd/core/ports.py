from typing import Protocol

from .model import Document, InlineSpan


class ParserStrategy(Protocol):
    """
    Turn raw model output into an ordered Document. MUST NOT raise on any
    input; malformed markup degrades to plain text.
    """

    def parse(self, text: str) -> Document:
        pass


class InlineTokenizer(Protocol):
    def tokenize(self, text: str) -> list[InlineSpan]:
        pass


class Renderer(Protocol):
    """
    Presentation of a parsed Document. Renderers own all styling decisions;
    the parser makes no assumption about them.
    """

    def render(self, doc: Document) -> str:
        pass
