"""Exception types raised while composing, merging, and rendering pages.

Every error derives from :class:`PageweaveError` so callers can catch the whole
family at once, while the file-related errors also subclass the matching
built-in (``FileNotFoundError`` / ``OSError``) so existing ``except`` clauses
keep working.

Examples
--------
>>> from pageweave.errors import TemplateNotFoundError
>>> err = TemplateNotFoundError("layouts/base", "templates/layouts/base.html")
>>> isinstance(err, FileNotFoundError)
True
>>> str(err)
"Template 'layouts/base' not found at 'templates/layouts/base.html'."
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .sources import PageSource


class PageweaveError(Exception):
    """Base class for every error raised by pageweave."""


class TemplateNotFoundError(PageweaveError, FileNotFoundError):
    """Raised when a page, layout, or include cannot be located."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Template '{name}' not found at '{path}'.")

    def __str__(self) -> str:
        return self.args[0]


class TemplateReadError(PageweaveError, OSError):
    """Raised when a template exists but could not be read."""

    def __init__(self, name: str, path: str, reason: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Failed to read template '{name}' at '{path}': {reason}")

    def __str__(self) -> str:
        return self.args[0]


class TemplateParseError(PageweaveError):
    """Raised by a template engine when composed text cannot be compiled.

    Attributes
    ----------
    lineno : int
        1-based line number inside the composed text.
    message : str
        Engine-specific description of the problem.
    """

    def __init__(self, lineno: int, message: str) -> None:
        self.lineno = lineno
        self.message = message
        super().__init__(f"line {lineno}: {message}")


class ViewParseError(PageweaveError):
    """Report a compile failure against the composed buffer.

    Line numbers reported by the engine point into the flattened document, not
    into any of the files it was built from, so the literal text of the
    offending line is reported instead together with the pages involved.

    Attributes
    ----------
    line : str
        Literal text of the offending line in the composed buffer.
    message : str
        Original engine message.
    pages : tuple[PageSource, ...]
        Non-debug pages that were combined into the failing view.
    """

    def __init__(
        self, line: str, message: str, pages: cabc.Sequence[PageSource]
    ) -> None:
        self.line = line
        self.message = message
        self.pages = tuple(pages)
        super().__init__(line, message, self.pages)

    def __str__(self) -> str:
        origins = "".join(f"\n{page.path_hint}" for page in self.pages)
        return (
            f"Parse view file got error: {self.message};\n"
            f"Text line: {self.line}\n"
            f"Error from: {origins}"
        )


class SiteConfigError(PageweaveError, ValueError):
    """Raised when the site configuration is invalid or incomplete."""


__all__ = [
    "PageweaveError",
    "SiteConfigError",
    "TemplateNotFoundError",
    "TemplateParseError",
    "TemplateReadError",
    "ViewParseError",
]
