"""Merge the ``<head>`` sections of several documents.

Every registered head tag is collected from each head, re-rendered with only
its allow-listed attributes, and deduplicated on the rendered text. Each entry
carries a priority of ``(document_index << 8) + occurrence`` and a duplicate
overwrites the priority of the earlier copy, so shared markup moves to where
its last occurrence sits.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .scanner import TagScanner
from .tags import TagRegistry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .scanner import AttributeSet
    from .tags import HeadTag

logger = logging.getLogger(__name__)

PRIORITY_SHIFT = 8


def render_tag(tag: HeadTag, content: str, attributes: AttributeSet) -> str:
    """Render ``tag`` keeping only its allow-listed attributes.

    Examples
    --------
    >>> from pageweave.merger.tags import HeadTag
    >>> link = HeadTag("link", False, ("rel", "href"))
    >>> render_tag(link, "", {"href": "/a.css", "id": "x", "rel": "stylesheet"})
    '<link rel="stylesheet" href="/a.css"/>'
    """
    pairs = "".join(
        f' {key}="{attributes[key]}"' for key in tag.attributes if key in attributes
    )
    if tag.has_content:
        return f"<{tag.name}{pairs}>{content}</{tag.name}>"
    return f"<{tag.name}{pairs}/>"


@dc.dataclass(slots=True)
class HeadMergeResult:
    """Outcome of :meth:`HeadMerger.merge`.

    Attributes
    ----------
    entries : list[str]
        Rendered head tags, grouped by tag in registry order and sorted by
        priority within each group.
    title_index : int | None
        Index of the last head containing a ``<title``, if any.
    """

    entries: list[str]
    title_index: int | None


class HeadMerger:
    """Deduplicate and order head tags across documents."""

    def __init__(self, registry: TagRegistry | None = None) -> None:
        self.registry = registry if registry is not None else TagRegistry()

    def merge(self, heads: cabc.Sequence[str | None]) -> HeadMergeResult:
        """Merge head contents given in document order.

        Parameters
        ----------
        heads : Sequence[str | None]
            Inner content of each document's ``<head>``; ``None`` for
            documents without one. Positions are the document indexes used
            for priorities and title selection.
        """
        cache: dict[str, dict[str, int]] = {}
        title_index: int | None = None
        for index, head in enumerate(heads):
            if head is None:
                continue
            if "<title" in head:
                title_index = index
            for tag in self.registry:
                bucket = cache.setdefault(tag.name, {})
                scanner = TagScanner(head, tag.name, has_content=tag.has_content)
                for occurrence, (content, attributes) in enumerate(scanner, start=1):
                    rendered = render_tag(tag, content, attributes)
                    bucket[rendered] = (index << PRIORITY_SHIFT) + occurrence

        entries: list[str] = []
        for tag in self.registry:
            bucket = cache.get(tag.name, {})
            entries.extend(sorted(bucket, key=bucket.__getitem__))
        logger.debug(
            "merged %d head(s) into %d entries (title from %s)",
            len(heads),
            len(entries),
            title_index,
        )
        return HeadMergeResult(entries=entries, title_index=title_index)


__all__ = ["HeadMergeResult", "HeadMerger", "PRIORITY_SHIFT", "render_tag"]
