"""Render configured views to static HTML files.

:class:`ViewBuilder` takes a :class:`~pageweave.config.SiteConfig`, builds a
:class:`~pageweave.container.ViewContainer` from its extension, debug flag,
and head tag registry, and writes each view's rendered output.

>>> from pathlib import Path
>>> from pageweave.config import load_site_config
>>> builder = ViewBuilder(load_site_config(Path("pageweave.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/index.html')]
"""

from __future__ import annotations

import logging
import typing as typ

from .container import ViewContainer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig, ViewConfig

logger = logging.getLogger(__name__)


class ViewBuilder:
    """Render every configured view and persist the HTML."""

    def __init__(
        self, site_config: SiteConfig, *, container: ViewContainer | None = None
    ) -> None:
        self.site_config = site_config
        self.container = container or ViewContainer(
            site_config.extension,
            debug=site_config.debug,
            registry=site_config.registry,
        )

    def run(self, view: str | None = None) -> list[Path]:
        """Render the selected view, or all views, returning the written paths.

        Raises
        ------
        SiteConfigError
            If ``view`` names an unknown view.
        ViewParseError
            If a combined view does not compile.
        """
        if view:
            targets = [self.site_config.get_view(view)]
        else:
            targets = list(self.site_config.views.values())
        return [self._write(target) for target in targets]

    def _write(self, view: ViewConfig) -> Path:
        html = self.container.render(view.data, *view.pages)
        if not html.endswith("\n"):
            html += "\n"
        output_path = view.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.debug("wrote view %s to %s", view.key, output_path)
        return output_path


__all__ = ["ViewBuilder"]
