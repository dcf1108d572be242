"""Cyclopts CLI entrypoint for composing, merging, and building pages.

The ``pageweave`` console script exposes three commands: ``compose`` flattens
one page with its layout and includes, ``merge`` combines already rendered HTML
files into one document, and ``build`` renders every view listed in a site
configuration file.

Examples
--------
Compose a page from the ``templates`` directory:

>>> from pageweave.cli import app
>>> app(["compose", "index", "--root", "templates"])  # doctest: +SKIP

Build all configured views:

>>> from pageweave.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import ViewBuilder
from .composer import compose as compose_page
from .config import load_site_config
from .merger import merge_html

DEFAULT_CONFIG = Path("pageweave.yaml")

app = App(name="pageweave", config=cyclopts.config.Env("PAGEWEAVE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _emit(text: str, output: Path | None) -> None:
    """Write ``text`` to ``output`` or print it to stdout."""
    if output is None:
        print(text, end="" if text.endswith("\n") else "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Compose a page with its layout, sections, and includes.")
def compose(
    name: typ.Annotated[str, Parameter(help="Logical page name, without extension")],
    *,
    root: typ.Annotated[
        Path, Parameter(help="Directory pages resolve against", env_var="PAGEWEAVE_ROOT")
    ] = Path("templates"),
    extension: typ.Annotated[
        str, Parameter(help="File extension of page files")
    ] = ".html",
    output: typ.Annotated[
        Path | None, Parameter(help="Write to this file instead of stdout")
    ] = None,
) -> None:
    """Compose ``name`` and print or write the flattened document.

    Parameters
    ----------
    name : str
        Logical page name, e.g. ``"blog/index"``.
    root : Path, optional
        Directory containing the page, its layout, and its includes.
    extension : str, optional
        Extension appended to every logical name.
    output : Path or None, optional
        Destination file; stdout when ``None``.

    Raises
    ------
    TemplateNotFoundError
        If the page, its layout, or an include is missing.
    """
    _emit(compose_page(root, name, extension), output)


@app.command(help="Merge rendered HTML documents into a single page.")
def merge(
    *files: typ.Annotated[Path, Parameter(help="HTML documents in merge order")],
    output: typ.Annotated[
        Path | None, Parameter(help="Write to this file instead of stdout")
    ] = None,
) -> None:
    """Merge ``files`` with the default head tag set.

    Raises
    ------
    ValueError
        If no files are given.
    """
    if not files:
        msg = "merge requires at least one HTML file."
        raise ValueError(msg)
    documents = [path.read_text(encoding="utf-8") for path in files]
    _emit(merge_html(documents), output)


@app.command(help="Render the views listed in a site configuration file.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="PAGEWEAVE_CONFIG")
    ] = DEFAULT_CONFIG,
    view: typ.Annotated[
        str | None, Parameter(help="Render only this view", env_var="PAGEWEAVE_VIEW")
    ] = None,
) -> None:
    """Render configured views and report the written files.

    Parameters
    ----------
    config : Path, optional
        Path to the ``pageweave.yaml`` configuration file.
    view : str or None, optional
        Specific view key to render; all views when ``None``.
    """
    site_config = load_site_config(config)
    for path in ViewBuilder(site_config).run(view):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pageweave` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
