"""Unit tests for the format registry and the built-in render engines."""

from __future__ import annotations

from pagekit.config import EngineSettings
from pagekit.engines import JinjaEngine, MarkdownEngine
from pagekit.formats import Formats, build_default_formats
from pagekit.models import Engine, Format
from pagekit.parsers import asset_loader, text_loader


def test_search_prefers_longest_extension() -> None:
    """Compound extensions beat their shorter suffixes regardless of order."""
    formats = Formats()
    formats.set(Format(ext=".jinja.md"))
    formats.set(Format(ext=".md"))
    assert formats.search("notes/intro.jinja.md").ext == ".jinja.md"
    assert formats.search("notes/intro.md").ext == ".md"
    assert formats.search("notes/intro.txt") is None


def test_set_replaces_existing_extension() -> None:
    """Registering the same extension twice keeps the latest format."""
    formats = Formats()
    formats.set(Format(ext=".css"))
    replacement = Format(ext=".css", asset=True)
    formats.set(replacement)
    assert len(formats) == 1
    assert formats.get(".css") is replacement


def test_default_formats_capabilities() -> None:
    """Built-in formats expose the expected loaders and engine chains."""
    formats = build_default_formats()
    exts = {fmt.ext for fmt in formats}
    assert exts == {".jinja", ".md", ".jinja.md", ".css", ".js", ".yaml", ".yml", ".json"}

    jinja_md = formats.get(".jinja.md")
    assert jinja_md.component_loader is text_loader
    assert jinja_md.page_loader is None
    assert [type(engine) for engine in jinja_md.engines] == [
        JinjaEngine,
        MarkdownEngine,
    ]

    css = formats.get(".css")
    assert css.asset is True
    assert css.page_loader is asset_loader
    assert css.component_loader is None
    assert not css.engines


def test_default_formats_apply_engine_settings() -> None:
    """Engine options from the config reach the engine instances."""
    formats = build_default_formats(
        EngineSettings(pygments_style="friendly", autoescape=False)
    )
    markdown = formats.get(".md").engines[0]
    jinja = formats.get(".jinja").engines[0]
    assert markdown.pygments_style == "friendly"
    assert jinja.render_sync("{{ v }}", {"v": "<b>"}, "x.jinja") == "<b>"


def test_engines_satisfy_protocol() -> None:
    """Both built-in engines implement the Engine protocol."""
    assert isinstance(JinjaEngine(), Engine)
    assert isinstance(MarkdownEngine(), Engine)


def test_jinja_engine_renders_and_escapes() -> None:
    """Jinja templates interpolate data with HTML escaping by default."""
    engine = JinjaEngine()
    html = engine.render_sync(
        '<div class="card">{{ title }}</div>', {"title": "<Hi>"}, "card.jinja"
    )
    assert html == '<div class="card">&lt;Hi&gt;</div>'


def test_markdown_engine_ignores_data() -> None:
    """Markdown rendering depends only on the content."""
    engine = MarkdownEngine()
    html = engine.render_sync("# {{ title }}", {"title": "x"}, "note.md")
    assert html == "<h1>{{ title }}</h1>"


def test_markdown_engine_highlights_code_blocks() -> None:
    """Fenced blocks are wrapped in a codehilite block."""
    engine = MarkdownEngine()
    html = engine.render_sync(
        "Intro\n\n```rust\nfn main() {}\n```\n", {}, "note.md"
    )
    assert '<div class="codehilite">' in html
    assert "main" in html


def test_markdown_engine_resets_between_renders() -> None:
    """Link references from one render do not resolve in the next."""
    engine = MarkdownEngine()
    first = engine.render_sync("[home][]\n\n[home]: /index.html\n", {}, "a.md")
    second = engine.render_sync("[home][]\n", {}, "b.md")
    assert '<a href="/index.html">home</a>' in first
    assert "<a" not in second


def test_markdown_engine_blank_input() -> None:
    """Whitespace-only content renders to an empty string."""
    assert MarkdownEngine().render_sync("   \n", {}, "blank.md") == ""
