"""Compose, merge, compile, and cache views built from several pages.

A view is an ordered list of :class:`~pageweave.sources.PageSource` entries.
Each page is composed from its own directory; a single page is used as is and
several pages are merged into one document. The result is compiled by the
template engine and cached under the pages' identity unless the container runs
in debug mode, where every request re-reads the files.

Example
-------
>>> from pathlib import Path
>>> from pageweave.container import ViewContainer
>>> from pageweave.sources import PageSource
>>> container = ViewContainer(".html", debug=True)
>>> html = container.render(
...     {"user": "ada"},
...     PageSource(Path("templates"), "index"),
...     PageSource(Path("widgets"), "chat", debug=True),
... )  # doctest: +SKIP
"""

from __future__ import annotations

import io
import logging
import re
import threading
import typing as typ

from .composer import DirectiveComposer
from .engine import JinjaTemplateEngine
from .errors import TemplateParseError, ViewParseError
from .merger import TagRegistry, merge_html
from .sources import FileSystemSource

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .engine import EnvironmentHandler, TemplateEngine
    from .sources import PageSource

logger = logging.getLogger(__name__)

NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def cache_key(pages: cabc.Sequence[PageSource]) -> str:
    """Return the cache key identifying a combination of pages."""
    return "".join(page.path_hint for page in pages)


def line_at(text: str, lineno: int) -> str:
    """Return the 1-based ``lineno`` of ``text``, or the last line if it runs out.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line, matching how Jinja counts
    ``lineno``.
    """
    if not text:
        return ""
    lines = NEWLINE_PATTERN.split(text)
    if lines[-1] == "" and len(lines) > 1:
        lines.pop()
    return lines[min(max(lineno, 1), len(lines)) - 1]


class ViewContainer:
    """Cache compiled views keyed by the pages they are built from."""

    def __init__(
        self,
        extension: str = ".html",
        *,
        debug: bool = False,
        engine: TemplateEngine | None = None,
        registry: TagRegistry | None = None,
    ) -> None:
        """Initialize the container.

        Parameters
        ----------
        extension : str, optional
            File extension appended to every logical page name.
        debug : bool, optional
            When ``True`` nothing is cached and each call recomposes the view.
        engine : TemplateEngine, optional
            Engine used to compile views; a :class:`JinjaTemplateEngine` by
            default.
        registry : TagRegistry, optional
            Head tags collected when several pages are merged.
        """
        self.extension = extension
        self.debug = debug
        self.engine = engine or JinjaTemplateEngine()
        self.registry = registry if registry is not None else TagRegistry()
        self._templates: dict[str, typ.Any] = {}
        self._lock = threading.Lock()

    def set_template_handler(self, handler: EnvironmentHandler) -> None:
        """Run ``handler`` on the Jinja environment before each compile."""
        self.engine.handler = handler

    def clear(self) -> None:
        """Drop every cached template."""
        with self._lock:
            self._templates = {}

    def combine(self, *pages: PageSource) -> str:
        """Compose each page and merge them when there is more than one.

        Raises
        ------
        TemplateNotFoundError
            If any page, layout, or include is missing.
        """
        documents = [
            DirectiveComposer(FileSystemSource(page.directory, self.extension)).compose(
                page.name
            )
            for page in pages
        ]
        if len(documents) > 1:
            return merge_html(documents, self.registry)
        if documents:
            return documents[0]
        return ""

    def display(self, writer: typ.TextIO, data: object, *pages: PageSource) -> None:
        """Render the view built from ``pages`` with ``data`` into ``writer``.

        Raises
        ------
        ViewParseError
            If the combined view does not compile.
        TemplateNotFoundError
            If any page, layout, or include is missing.
        """
        key = cache_key(pages)
        with self._lock:
            compiled = self._templates.get(key)
        if compiled is None:
            compiled = self._compile(key, pages)
            if not self.debug:
                with self._lock:
                    self._templates[key] = compiled
        else:
            logger.debug("cache hit for view %s", key)
        self.engine.execute(compiled, data, writer)

    def render(self, data: object, *pages: PageSource) -> str:
        """Return the rendered view as a string."""
        buffer = io.StringIO()
        self.display(buffer, data, *pages)
        return buffer.getvalue()

    def _compile(self, key: str, pages: cabc.Sequence[PageSource]) -> typ.Any:
        text = self.combine(*pages)
        logger.debug("compiling view %s", key)
        try:
            return self.engine.parse(text, key)
        except TemplateParseError as exc:
            reported = [page for page in pages if not page.debug]
            raise ViewParseError(line_at(text, exc.lineno), exc.message, reported) from exc


__all__ = ["ViewContainer", "cache_key", "line_at"]
