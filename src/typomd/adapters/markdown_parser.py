import logging
import re

from ..core.model import (
    Block,
    Bullet,
    CodeBlock,
    Document,
    Heading,
    Numbered,
    Paragraph,
    ParsedBlock,
)
from ..core.ports import InlineTokenizer, ParserStrategy
from ..format.normalize import normalize
from .inline import ScanningTokenizer

logger = logging.getLogger("typomd.parser")

FENCE = "```"
NUMBERED_RE = re.compile(r"^(\d+\.)\s+")
BULLET_PREFIXES = ("- ", "* ")
MAX_HEADING_LEVEL = 3


def _is_block_start(trimmed: str) -> bool:
    """True if a trimmed line opens a non-paragraph block or is blank."""
    return (
        not trimmed
        or trimmed.startswith(FENCE)
        or trimmed.startswith("#")
        or trimmed.startswith(BULLET_PREFIXES)
        or NUMBERED_RE.match(trimmed) is not None
    )


def _heading(trimmed: str) -> Heading:
    # Runs longer than three are capped at level 3; the whole run is stripped.
    run = len(trimmed) - len(trimmed.lstrip("#"))
    content = trimmed[run:]
    if content.startswith(" "):
        content = content[1:]
    return Heading(level=min(run, MAX_HEADING_LEVEL), text=content)


def segment(text: str) -> list[Block]:
    """
    Partition normalized text into blocks, in source order.

    Single forward pass over the lines. Per line, first match wins:
    fence, heading, bullet, numbered item, blank (skipped), paragraph.
    An unterminated fence swallows the rest of the input as code.
    """
    lines = text.split("\n")
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        trimmed = lines[i].strip()

        if trimmed.startswith(FENCE):
            language = trimmed[len(FENCE):].strip()
            code_lines = []
            i += 1
            while i < len(lines):
                if lines[i].strip().startswith(FENCE):
                    i += 1
                    break
                code_lines.append(lines[i])
                i += 1
            else:
                logger.debug("unterminated fence %r; treating rest as code", language)
            blocks.append(CodeBlock(language=language, code="\n".join(code_lines)))
            continue

        if trimmed.startswith("#"):
            blocks.append(_heading(trimmed))
            i += 1
            continue

        if trimmed.startswith(BULLET_PREFIXES):
            blocks.append(Bullet(text=trimmed[2:]))
            i += 1
            continue

        m = NUMBERED_RE.match(trimmed)
        if m:
            blocks.append(Numbered(marker=m.group(1), text=trimmed[m.end():]))
            i += 1
            continue

        if not trimmed:
            i += 1
            continue

        paragraph_lines = [trimmed]
        i += 1
        while i < len(lines):
            nxt = lines[i].strip()
            if _is_block_start(nxt):
                break
            paragraph_lines.append(nxt)
            i += 1
        blocks.append(Paragraph(text=" ".join(paragraph_lines)))

    return blocks


class MarkdownParser(ParserStrategy):
    def __init__(
        self,
        tokenizer: InlineTokenizer | None = None,
        smart_quotes: bool = True,
    ):
        self.tokenizer = tokenizer or ScanningTokenizer()
        self.smart_quotes = smart_quotes

    def parse(self, text: str) -> Document:
        doc = Document(source=text)
        normalized = normalize(text, smart_quotes=self.smart_quotes)

        for block in segment(normalized):
            if isinstance(block, CodeBlock):
                doc.blocks.append(ParsedBlock(block=block))
            else:
                spans = tuple(self.tokenizer.tokenize(block.text))
                doc.blocks.append(ParsedBlock(block=block, spans=spans))

        logger.debug("parsed %d chars into %d blocks", len(text), len(doc.blocks))
        return doc


def parse_markdown(text: str, smart_quotes: bool = True) -> Document:
    return MarkdownParser(smart_quotes=smart_quotes).parse(text)
