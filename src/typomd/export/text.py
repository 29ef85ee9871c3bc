"""Plain-text rendering for terminals and clipboards."""

from collections.abc import Iterable

from ..core.model import (
    Bullet,
    CodeBlock,
    Document,
    Heading,
    InlineSpan,
    Numbered,
    span_text,
)
from ..core.ports import Renderer
from ..core.utils import strip_emphasis_markers


def visible_text(spans: Iterable[InlineSpan]) -> str:
    """Concatenate what a reader sees: markers removed, links as their label."""
    return "".join(span_text(s) for s in spans)


class PlainTextRenderer(Renderer):
    def __init__(self, code_indent: int = 4, strip_heading_emphasis: bool = True):
        self.code_indent = code_indent
        self.strip_heading_emphasis = strip_heading_emphasis

    def _inline(self, spans: Iterable[InlineSpan]) -> str:
        # Code spans keep a one-space pad so they stand out without styling.
        return "".join(f" {s.text} " if s.kind == "code" else span_text(s) for s in spans)

    def render(self, doc: Document) -> str:
        pad = " " * self.code_indent
        out: list[str] = []
        prev_kind = None
        for pb in doc.blocks:
            block = pb.block
            if isinstance(block, CodeBlock):
                out.append("\n".join(pad + ln for ln in block.code.split("\n")))
            elif isinstance(block, Heading):
                text = self._inline(pb.spans)
                if self.strip_heading_emphasis:
                    text = strip_emphasis_markers(text)
                underline = {1: "=", 2: "-"}.get(block.level)
                if underline and text:
                    text = f"{text}\n{underline * len(text)}"
                out.append(text)
            elif isinstance(block, Bullet):
                out.append(f"• {self._inline(pb.spans)}")
            elif isinstance(block, Numbered):
                out.append(f"{block.marker} {self._inline(pb.spans)}")
            else:
                out.append(self._inline(pb.spans))
            # Consecutive list items of one kind stay tight.
            if prev_kind == block.kind and block.kind in ("bullet", "numbered"):
                out[-2:] = [out[-2] + "\n" + out[-1]]
            prev_kind = block.kind
        return "\n\n".join(out) + ("\n" if out else "")
