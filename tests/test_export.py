"""Tests for renderers and serializers."""

import json

import yaml

from typomd.adapters.markdown_parser import parse_markdown
from typomd.export import HtmlRenderer, PlainTextRenderer, dumps_json, dumps_yaml
from typomd.export.html import link_href


def test_html_headings_with_ids():
    """Test heading tags, slug ids, and duplicate id suffixes."""
    html = HtmlRenderer().render(parse_markdown("# Getting Started\n## Getting Started"))
    assert '<h1 id="getting-started">Getting Started</h1>' in html
    assert '<h2 id="getting-started-1">Getting Started</h2>' in html


def test_html_heading_drops_emphasis():
    """Test bold markup is not repeated inside headings."""
    html = HtmlRenderer().render(parse_markdown("## **Bold** title"))
    assert "<h2" in html
    assert "<strong>" not in html
    assert "Bold title</h2>" in html


def test_html_heading_keeps_emphasis_when_asked():
    """Test strip_heading_emphasis=False keeps <strong>."""
    html = HtmlRenderer(strip_heading_emphasis=False).render(parse_markdown("# **B**"))
    assert "<strong>B</strong>" in html


def test_html_lists_grouped():
    """Test consecutive items share one list element."""
    html = HtmlRenderer().render(parse_markdown("- a\n- b\n\n1. x\n3. y\n\npara"))
    assert html == (
        "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"
        '<ol>\n<li value="1">x</li>\n<li value="3">y</li>\n</ol>\n'
        "<p>para</p>\n"
    )


def test_html_code_block_escaped():
    """Test code block content is escaped and tagged with its language."""
    html = HtmlRenderer().render(parse_markdown("```python\nif a < b & c:\n```"))
    assert html == '<pre><code class="language-python">if a &lt; b &amp; c:</code></pre>\n'


def test_html_inline_spans():
    """Test inline span tags."""
    html = HtmlRenderer().render(parse_markdown("**b** *i* `c` [l](https://x.y/?a=1&b=2)"))
    assert html == (
        '<p><strong>b</strong> <em>i</em> <code>c</code> '
        '<a href="https://x.y/?a=1&amp;b=2">l</a></p>\n'
    )


def test_html_escapes_text():
    """Test raw HTML in model output is escaped."""
    html = HtmlRenderer().render(parse_markdown("<script>alert(1)</script>"))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_link_href():
    """Test which link targets become anchors."""
    assert link_href("https://example.com") == "https://example.com"
    assert link_href("mailto:a@b.c") == "mailto:a@b.c"
    assert link_href("/relative/path") == "/relative/path"
    assert link_href("#section") == "#section"
    assert link_href("javascript:alert(1)") is None
    assert link_href("http://") is None
    assert link_href("not a url") is None


def test_html_bad_link_renders_text():
    """Test unusable URLs render as their text only."""
    html = HtmlRenderer().render(parse_markdown("[click](javascript:alert(1))"))
    assert "<a" not in html
    assert "click" in html


def test_html_empty():
    """Test empty document renders to empty string."""
    assert HtmlRenderer().render(parse_markdown("")) == ""


def test_text_renderer():
    """Test plain text layout of every block kind."""
    text = "# Title\n\nSome **bold** and `code`.\n\n- a\n- b\n\n2. two\n\n```\nx = 1\n```"
    out = PlainTextRenderer().render(parse_markdown(text))
    assert out == (
        "Title\n=====\n\n"
        "Some bold and  code .\n\n"
        "• a\n• b\n\n"
        "2. two\n\n"
        "    x = 1\n"
    )


def test_dumps_json():
    """Test JSON serialization shape."""
    data = json.loads(dumps_json(parse_markdown("## Hi\n\n```sh\nls\n```")))
    assert data["schema_version"] == "1"
    assert data["blocks"][0] == {
        "level": 2,
        "text": "Hi",
        "kind": "heading",
        "spans": [{"text": "Hi", "kind": "plain"}],
    }
    assert data["blocks"][1] == {"language": "sh", "code": "ls", "kind": "code"}


def test_dumps_yaml():
    """Test YAML serialization round-trips through safe_load."""
    data = yaml.safe_load(dumps_yaml(parse_markdown("see [x](http://a.b)")))
    spans = data["blocks"][0]["spans"]
    assert spans[1] == {"text": "x", "url": "http://a.b", "kind": "link"}
