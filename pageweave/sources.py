"""Resolve logical template names to text.

A :class:`FileSource` turns a logical name such as ``"layouts/base"`` into the
content of the matching file. :class:`FileSystemSource` is the on-disk
implementation: it joins the configured root, the name, and a fixed extension,
then reads the file as UTF-8.

Examples
--------
>>> from pathlib import Path
>>> source = FileSystemSource(Path("templates"), ".html")
>>> source.resolve("layouts/base")
PosixPath('templates/layouts/base.html')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ
from pathlib import Path

from .errors import TemplateNotFoundError, TemplateReadError

logger = logging.getLogger(__name__)


class FileSource(typ.Protocol):
    """Anything that can load template text by logical name."""

    def read(self, name: str) -> str:
        """Return the content for ``name`` or raise ``TemplateNotFoundError``."""
        ...


@dc.dataclass(frozen=True, slots=True)
class PageSource:
    """Identity of one page fragment requested by a caller.

    Attributes
    ----------
    directory : Path
        Root directory the page (and its layout and includes) resolve against.
    name : str
        Logical file name without extension, e.g. ``"blog/index"``.
    debug : bool
        Debug pages are combined like any other page but are left out of
        parse-error reports.
    """

    directory: Path
    name: str
    debug: bool = False

    @property
    def path_hint(self) -> str:
        """Return ``directory/name`` for messages and cache keys."""
        return os.path.join(str(self.directory), self.name)


class FileSystemSource:
    """Load templates from ``root / (name + extension)``."""

    def __init__(self, root: Path | str, extension: str = ".html") -> None:
        self.root = Path(root)
        self.extension = extension

    def resolve(self, name: str) -> Path:
        """Return the filesystem path backing ``name``."""
        return self.root / f"{name}{self.extension}"

    def read(self, name: str) -> str:
        """Read ``name`` as UTF-8 text.

        Raises
        ------
        TemplateNotFoundError
            If no file exists for ``name``.
        TemplateReadError
            If the file exists but cannot be read or decoded.
        """
        path = self.resolve(name)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise TemplateNotFoundError(name, str(path)) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadError(name, str(path), str(exc)) from exc
        logger.debug("loaded template %r from %s", name, path)
        return content

    def __repr__(self) -> str:
        return f"FileSystemSource(root={str(self.root)!r}, extension={self.extension!r})"


__all__ = ["FileSource", "FileSystemSource", "PageSource"]
