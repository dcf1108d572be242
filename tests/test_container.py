"""Tests for the caching view container and the Jinja template engine."""

from __future__ import annotations

import io
import typing as typ

import pytest

from pageweave.container import ViewContainer, cache_key, line_at
from pageweave.engine import JinjaTemplateEngine
from pageweave.errors import TemplateNotFoundError, TemplateParseError, ViewParseError
from pageweave.sources import PageSource

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def _write(root: Path, name: str, text: str) -> PageSource:
    path = root / f"{name}.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return PageSource(root, name)


def test_combine_single_page_is_not_merged(tmp_path: Path) -> None:
    """One page is returned exactly as composed."""
    page = _write(tmp_path, "solo", "<p>solo</p>")
    assert ViewContainer(".html").combine(page) == "<p>solo</p>"


def test_combine_pages_from_different_directories(tmp_path: Path) -> None:
    """Each page resolves against its own directory before merging."""
    site = _write(tmp_path / "site", "index", "<head><title>Site</title></head><body>s</body>")
    widget = _write(tmp_path / "widgets", "chat", "<body class='chat'>w</body>")
    merged = ViewContainer(".html").combine(site, widget)
    assert "<title>Site</title>" in merged
    assert "<div>s</div>\n<div class='chat'>w</div>" in merged, (
        f"expected both bodies in order:\n{merged}"
    )


def test_combine_nothing_is_empty() -> None:
    """Combining no pages yields an empty document."""
    assert ViewContainer().combine() == ""


def test_render_escapes_mapping_data(tmp_path: Path) -> None:
    """Mapping data becomes the Jinja context with HTML autoescaping."""
    page = _write(tmp_path, "hello", "<p>{{ name }}</p>")
    assert ViewContainer().render({"name": "<Ada>"}, page) == "<p>&lt;Ada&gt;</p>"


def test_render_exposes_scalar_data(tmp_path: Path) -> None:
    """Non-mapping data is available as ``data``."""
    page = _write(tmp_path, "number", "{{ data + 18 }}")
    assert ViewContainer().render(28, page) == "46"


def test_display_writes_to_writer(tmp_path: Path) -> None:
    """``display`` streams into the supplied writer."""
    page = _write(tmp_path, "hello", "hi {{ who }}")
    out = io.StringIO()
    ViewContainer().display(out, {"who": "there"}, page)
    assert out.getvalue() == "hi there"


def test_template_handler_registers_filters(tmp_path: Path) -> None:
    """The handler sees the environment before the view is compiled."""
    page = _write(tmp_path, "sum", "{{ [28, 18] | total }}")
    container = ViewContainer(debug=True)
    container.set_template_handler(lambda env: env.filters.update(total=sum))
    assert container.render({}, page) == "46"


def test_compiled_views_are_cached(tmp_path: Path, mocker: MockerFixture) -> None:
    """Outside debug mode a view is composed once and then served from cache."""
    page = _write(tmp_path, "page", "v1")
    container = ViewContainer()
    spy = mocker.spy(container, "combine")
    assert container.render({}, page) == "v1"
    _write(tmp_path, "page", "v2")
    assert container.render({}, page) == "v1", "expected the cached template"
    assert spy.call_count == 1

    container.clear()
    assert container.render({}, page) == "v2", "expected recompilation after clear"
    assert spy.call_count == 2


def test_debug_mode_recomposes_each_time(tmp_path: Path) -> None:
    """Debug containers always read the latest files."""
    page = _write(tmp_path, "page", "v1")
    container = ViewContainer(debug=True)
    assert container.render({}, page) == "v1"
    _write(tmp_path, "page", "v2")
    assert container.render({}, page) == "v2"


def test_parse_error_reports_composed_line(tmp_path: Path) -> None:
    """Syntax errors carry the offending merged line and non-debug pages."""
    broken = _write(tmp_path / "site", "broken", "<body>\n{{ name | }}\n</body>")
    helper = PageSource(tmp_path / "debug", "helper", debug=True)
    _write(tmp_path / "debug", "helper", "<body>ok</body>")

    with pytest.raises(ViewParseError) as excinfo:
        ViewContainer().render({}, broken, helper)

    err = excinfo.value
    assert err.line == "{{ name | }}", f"unexpected reported line: {err.line!r}"
    assert err.pages == (broken,), "expected debug pages to be left out"
    assert "Text line: {{ name | }}" in str(err)
    assert isinstance(err.__cause__, TemplateParseError)


def test_parse_error_line_ignores_unicode_line_separators(tmp_path: Path) -> None:
    """Only real newlines count when locating the offending line."""
    page = _write(tmp_path, "page", "<p>a\u2028b</p>\n{% if %}\n")

    with pytest.raises(ViewParseError) as excinfo:
        ViewContainer().render({}, page)

    assert excinfo.value.line == "{% if %}", (
        f"expected the second physical line, got {excinfo.value.line!r}"
    )


def test_missing_page_propagates(tmp_path: Path) -> None:
    """Missing files surface unchanged from ``display``."""
    with pytest.raises(TemplateNotFoundError):
        ViewContainer().render({}, PageSource(tmp_path, "missing"))


def test_cache_key_joins_page_paths(tmp_path: Path) -> None:
    """Keys concatenate each page's directory and name."""
    key = cache_key([PageSource(tmp_path, "a"), PageSource(tmp_path, "b")])
    assert key == f"{tmp_path}/a{tmp_path}/b"


def test_line_at_clamps_to_available_lines() -> None:
    """Line lookup never fails on out-of-range numbers."""
    assert line_at("one\ntwo", 2) == "two"
    assert line_at("one\ntwo", 9) == "two"
    assert line_at("", 1) == ""
    assert line_at("one\r\ntwo\rthree\n", 9) == "three"
    assert line_at("a\x0cb\nc", 1) == "a\x0cb"


def test_engine_wraps_syntax_errors() -> None:
    """Jinja syntax errors become ``TemplateParseError`` with a line number."""
    with pytest.raises(TemplateParseError) as excinfo:
        JinjaTemplateEngine().parse("ok\n{% if %}", "bad")
    assert excinfo.value.lineno == 2
