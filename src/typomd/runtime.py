"""Runtime wiring helper for the CLI and the API."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.markdown_parser import MarkdownParser
from .config import TypomdConfig, load_config
from .core.model import Document
from .core.ports import ParserStrategy, Renderer
from .export import dumps_json, dumps_yaml
from .export.html import HtmlRenderer
from .export.text import PlainTextRenderer


@dataclass
class Runtime:
    """Container for all wired components."""
    parser: ParserStrategy
    renderers: dict[str, Renderer]
    config: TypomdConfig

    def output(self, doc: Document, fmt: str | None = None) -> str:
        """Render or serialize a Document in one of the OUTPUT_FORMATS."""
        fmt = fmt or self.config.render.format
        if fmt == "json":
            return dumps_json(doc) + "\n"
        if fmt == "yaml":
            return dumps_yaml(doc)
        renderer = self.renderers.get(fmt)
        if renderer is None:
            raise ValueError(f"Unknown output format: {fmt}")
        return renderer.render(doc)


def build_runtime(
    config_path: Path | None = None,
    config: TypomdConfig | None = None,
) -> Runtime:
    """Build and wire all components."""
    if config is None:
        config = load_config(config_path=config_path)

    parser = MarkdownParser(smart_quotes=config.normalize.smart_quotes)
    strip = config.render.strip_heading_emphasis
    renderers: dict[str, Renderer] = {
        "html": HtmlRenderer(strip_heading_emphasis=strip),
        "text": PlainTextRenderer(strip_heading_emphasis=strip),
    }

    return Runtime(parser=parser, renderers=renderers, config=config)
