"""Typed dataclasses describing a pageweave site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from pageweave.errors import SiteConfigError
from pageweave.merger import TagRegistry
from pageweave.sources import PageSource


@dc.dataclass(slots=True)
class ViewConfig:
    """One output file built from an ordered list of pages.

    Attributes
    ----------
    key : str
        Identifier used on the command line.
    pages : list[PageSource]
        Pages combined into the view, in merge order.
    output : Path
        Destination of the rendered HTML.
    data : dict[str, Any]
        Template context passed to the engine.
    """

    key: str
    pages: list[PageSource]
    output: Path
    data: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class SiteConfig:
    """Top-level configuration consumed by :class:`~pageweave.builder.ViewBuilder`."""

    views: dict[str, ViewConfig]
    root: Path = Path("templates")
    extension: str = ".html"
    debug: bool = False
    output_dir: Path = Path("public")
    registry: TagRegistry = dc.field(default_factory=TagRegistry)

    def get_view(self, key: str) -> ViewConfig:
        """Return the view registered under ``key``.

        Raises
        ------
        SiteConfigError
            If no view uses that key.
        """
        try:
            return self.views[key]
        except KeyError as exc:
            msg = f"Unknown view '{key}'."
            raise SiteConfigError(msg) from exc


__all__ = ["SiteConfig", "SiteConfigError", "ViewConfig"]
