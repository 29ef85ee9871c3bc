from collections.abc import Iterable
from html import escape
from urllib.parse import urlsplit

from ..core.model import (
    Bullet,
    CodeBlock,
    Document,
    Heading,
    InlineSpan,
    Numbered,
    Paragraph,
)
from ..core.ports import Renderer
from ..core.utils import slugify, strip_emphasis_markers

SAFE_SCHEMES = {"http", "https", "mailto"}


def link_href(url: str) -> str | None:
    """Return a usable href, or None if the link should render as text."""
    url = url.strip()
    if not url or any(c.isspace() for c in url):
        return None
    parts = urlsplit(url)
    if parts.scheme:
        if parts.scheme.lower() not in SAFE_SCHEMES:
            return None
        if parts.scheme.lower() != "mailto" and not parts.netloc:
            return None
    return url


def render_spans(spans: Iterable[InlineSpan], in_heading: bool = False) -> str:
    out = []
    for span in spans:
        text = escape(span.text, quote=False)
        if span.kind == "bold":
            out.append(text if in_heading else f"<strong>{text}</strong>")
        elif span.kind == "italic":
            out.append(f"<em>{text}</em>")
        elif span.kind == "code":
            out.append(f"<code>{text}</code>")
        elif span.kind == "link":
            href = link_href(span.url)
            if href is None:
                out.append(text)
            else:
                out.append(f'<a href="{escape(href)}">{text}</a>')
        else:
            out.append(text)
    return "".join(out)


class HtmlRenderer(Renderer):
    """
    Render a Document as an HTML fragment.

    Consecutive bullets share one <ul>, consecutive numbered items one <ol>;
    any other block closes the open list.
    """

    def __init__(self, strip_heading_emphasis: bool = True, heading_ids: bool = True):
        self.strip_heading_emphasis = strip_heading_emphasis
        self.heading_ids = heading_ids

    def render(self, doc: Document) -> str:
        lines: list[str] = []
        open_list: str | None = None
        used_ids: dict[str, int] = {}

        def close_list() -> None:
            nonlocal open_list
            if open_list:
                lines.append(f"</{open_list}>")
                open_list = None

        for pb in doc.blocks:
            block = pb.block
            want = "ul" if isinstance(block, Bullet) else "ol" if isinstance(block, Numbered) else None
            if want != open_list:
                close_list()
                if want:
                    lines.append(f"<{want}>")
                    open_list = want

            if isinstance(block, CodeBlock):
                cls = f' class="language-{escape(block.language)}"' if block.language else ""
                lines.append(f"<pre><code{cls}>{escape(block.code, quote=False)}</code></pre>")
            elif isinstance(block, Heading):
                inner = render_spans(pb.spans, in_heading=self.strip_heading_emphasis)
                if self.strip_heading_emphasis:
                    inner = strip_emphasis_markers(inner)
                tag = f"h{block.level}"
                attr = ""
                if self.heading_ids:
                    hid = self._unique_id(slugify(block.text), used_ids)
                    if hid:
                        attr = f' id="{hid}"'
                lines.append(f"<{tag}{attr}>{inner}</{tag}>")
            elif isinstance(block, Bullet):
                lines.append(f"<li>{render_spans(pb.spans)}</li>")
            elif isinstance(block, Numbered):
                value = block.marker.rstrip(".")
                lines.append(f'<li value="{value}">{render_spans(pb.spans)}</li>')
            elif isinstance(block, Paragraph):
                lines.append(f"<p>{render_spans(pb.spans)}</p>")

        close_list()
        return "\n".join(lines) + ("\n" if lines else "")

    @staticmethod
    def _unique_id(slug: str, used: dict[str, int]) -> str:
        if not slug:
            return ""
        count = used.get(slug, 0)
        used[slug] = count + 1
        return slug if count == 0 else f"{slug}-{count}"
