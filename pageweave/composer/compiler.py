"""Compose a page and its layout into one flat document.

:class:`DirectiveComposer` loads a page, follows a leading ``@extends`` to its
layout, fills the layout's ``@yield`` slots with the page's sections, and
finally expands ``@include`` directives.

Example
-------
>>> from pathlib import Path
>>> from pageweave.composer import compose
>>> html = compose(Path("templates"), "index", ".html")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from pageweave.sources import FileSystemSource

from .directives import EXTENDS_PATTERN, YIELD_PATTERN
from .includes import IncludeExpander
from .sections import extract_sections

if typ.TYPE_CHECKING:
    from pageweave.sources import FileSource

logger = logging.getLogger(__name__)


class DirectiveComposer:
    """Resolve layout inheritance, sections, and includes for one page."""

    def __init__(self, source: FileSource) -> None:
        self.source = source
        self.includes = IncludeExpander(source)

    def compose(self, name: str) -> str:
        """Return the fully composed text for the page ``name``.

        Parameters
        ----------
        name : str
            Logical page name understood by the configured source.

        Returns
        -------
        str
            Layout with sections substituted and includes expanded, or the
            page itself with includes expanded when it extends nothing.

        Raises
        ------
        TemplateNotFoundError
            If the page, its layout, or one of the includes is missing.
        """
        content = self.source.read(name)
        layout = self._read_layout(content)
        sections = extract_sections(content)
        if layout is None:
            return self.includes.expand(content)
        return self.includes.expand(fill_yields(layout, sections))

    def _read_layout(self, content: str) -> str | None:
        match = EXTENDS_PATTERN.match(content)
        if match is None:
            return None
        layout_name = match.group(1)
        logger.debug("page extends layout %r", layout_name)
        return self.source.read(layout_name)


def fill_yields(layout: str, sections: typ.Mapping[str, str]) -> str:
    """Replace every ``@yield`` in ``layout`` with the matching section.

    Yields naming an unknown section are replaced with an empty string.
    """
    for match in list(YIELD_PATTERN.finditer(layout)):
        replacement = sections.get(match.group(1), "")
        layout = layout.replace(match.group(0), replacement)
    return layout


def compose(directory: Path | str, name: str, extension: str) -> str:
    """Compose ``name`` from ``directory`` using files ending in ``extension``."""
    return DirectiveComposer(FileSystemSource(Path(directory), extension)).compose(
        name
    )


__all__ = ["DirectiveComposer", "compose", "fill_yields"]
