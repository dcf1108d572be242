"""Expand ``@include("name")`` directives in a single pass."""

from __future__ import annotations

import logging
import typing as typ

from .directives import INCLUDE_PATTERN

if typ.TYPE_CHECKING:
    from pageweave.sources import FileSource

logger = logging.getLogger(__name__)


class IncludeExpander:
    """Replace include directives with the content of the named files."""

    def __init__(self, source: FileSource) -> None:
        self.source = source

    def expand(self, content: str) -> str:
        """Return ``content`` with every include directive replaced.

        The directives are collected once up front. Each one then replaces the
        first remaining occurrence of its exact text, so includes inside
        freshly inserted content are left as they are.

        Raises
        ------
        TemplateNotFoundError
            If an included file does not exist.
        TemplateReadError
            If an included file cannot be read.
        """
        for match in list(INCLUDE_PATTERN.finditer(content)):
            name = match.group(1)
            logger.debug("expanding include %r", name)
            included = self.source.read(name)
            content = content.replace(match.group(0), included, 1)
        return content


__all__ = ["IncludeExpander"]
