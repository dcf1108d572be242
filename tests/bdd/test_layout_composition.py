"""Behaviour tests for layout composition.

These pytest-bdd scenarios compose a page that extends a layout and includes a
partial, checking that sections land in the layout's yields and that the
include is inlined. A second scenario confirms that a missing layout aborts
composition with ``TemplateNotFoundError``.

Usage
-----
Run ``pytest tests/bdd/test_layout_composition.py -v``. Templates are written
under ``tmp_path`` so no fixtures beyond pytest's built-ins are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from pageweave.composer import DirectiveComposer
from pageweave.errors import TemplateNotFoundError
from pageweave.sources import FileSystemSource

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "layout_composition.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Return mutable scenario state seeded with the template root."""
    return {"root": tmp_path}


def _write(state: ScenarioState, name: str, text: str) -> None:
    path = typ.cast("Path", state["root"]) / f"{name}.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@given("a layout with title and content yields")
def given_layout(scenario_state: ScenarioState) -> None:
    """Write a layout exposing ``title`` and ``content`` yields."""
    _write(
        scenario_state,
        "layouts/base",
        "<!DOCTYPE html>\n<html>\n<head><title>@yield('title')</title></head>\n"
        "<body>\n@include('partials/nav')\n<main>@yield('content')</main>\n</body>\n"
        "</html>\n",
    )


@given("a page extending the layout with a navigation include")
def given_page(scenario_state: ScenarioState) -> None:
    """Write the page and the navigation partial it relies on."""
    _write(scenario_state, "partials/nav", '<nav id="site-nav"><a href="/">Home</a></nav>')
    _write(
        scenario_state,
        "index",
        "@extends('layouts/base')\n\n"
        "@section('title')Welcome@endsection\n\n"
        "@section('content')\n  <p class=\"lead\">Hello there.</p>\n",
    )


@given("a page extending a layout that does not exist")
def given_orphan_page(scenario_state: ScenarioState) -> None:
    """Write a page whose layout is missing."""
    _write(scenario_state, "orphan", "@extends('layouts/absent')\n@section('a')x")


@when("I compose the page")
def when_compose(scenario_state: ScenarioState) -> None:
    """Compose ``index`` from the scenario's template root."""
    source = FileSystemSource(scenario_state["root"], ".html")
    scenario_state["html"] = DirectiveComposer(source).compose("index")


@when("I try to compose the page")
def when_try_compose(scenario_state: ScenarioState) -> None:
    """Compose ``orphan`` and capture the resulting error."""
    source = FileSystemSource(scenario_state["root"], ".html")
    with pytest.raises(TemplateNotFoundError) as excinfo:
        DirectiveComposer(source).compose("orphan")
    scenario_state["error"] = excinfo.value


@then("the layout contains the page title and content")
def then_title_and_content(scenario_state: ScenarioState) -> None:
    """Verify the title and lead paragraph reached the layout."""
    soup = BeautifulSoup(scenario_state["html"], "html.parser")
    assert soup.title is not None, "expected a <title> element"
    assert soup.title.get_text() == "Welcome", (
        f"expected title 'Welcome', got {soup.title.get_text()!r}"
    )
    lead = soup.select_one("main p.lead")
    assert lead is not None, "expected the content section inside <main>"
    assert lead.get_text() == "Hello there."


@then("the navigation partial is inlined")
def then_nav_inlined(scenario_state: ScenarioState) -> None:
    """Verify the include was replaced by the partial."""
    soup = BeautifulSoup(scenario_state["html"], "html.parser")
    assert soup.select_one("body > nav#site-nav") is not None, (
        "expected the navigation partial directly inside <body>"
    )


@then("no directive text remains")
def then_no_directives(scenario_state: ScenarioState) -> None:
    """Verify no ``@`` directives survive composition."""
    html = scenario_state["html"]
    for directive in ("@extends", "@section", "@yield", "@include", "@endsection"):
        assert directive not in html, f"unexpected {directive} in composed output"


@then("composition fails with a not found error naming the layout")
def then_not_found(scenario_state: ScenarioState) -> None:
    """Verify the error names the missing layout."""
    error = typ.cast("TemplateNotFoundError", scenario_state["error"])
    assert error.name == "layouts/absent", f"unexpected missing name {error.name!r}"
