"""Head tag definitions used when merging ``<head>`` sections.

A :class:`HeadTag` says which element kinds are collected from every head,
whether they wrap content, and which attributes survive re-rendering. The
:class:`TagRegistry` holds the ordered set in use; its order is the order in
which tag groups appear in the merged head.

Configure a registry once before merging and treat it as read-only while
merges are running; the registry itself does no locking.

Examples
--------
>>> registry = TagRegistry()
>>> [tag.name for tag in registry]
['meta', 'link', 'script', 'style']
>>> registry.upsert(HeadTag("base", has_content=False, attributes=("href",)))
>>> registry.names()
['meta', 'link', 'script', 'style', 'base']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class HeadTag:
    """One mergeable head element kind.

    Attributes
    ----------
    name : str
        Element name, e.g. ``"link"``.
    has_content : bool
        ``True`` for elements with a closing tag (``script``, ``style``);
        ``False`` for void elements rendered as ``<name .../>``.
    attributes : tuple[str, ...]
        Attribute names kept when the element is rendered, in output order.
    """

    name: str
    has_content: bool = False
    attributes: tuple[str, ...] = ()


DEFAULT_HEAD_TAGS: tuple[HeadTag, ...] = (
    HeadTag("meta", False, ("name", "http-equiv", "content", "charset")),
    HeadTag("link", False, ("rel", "href", "media", "type", "sizes")),
    HeadTag("script", True, ("type", "async", "src", "charset", "defer")),
    HeadTag("style", True, ("media", "type")),
)


class TagRegistry:
    """Ordered, name-unique collection of :class:`HeadTag` definitions."""

    def __init__(self, tags: cabc.Iterable[HeadTag] | None = None) -> None:
        self._tags: dict[str, HeadTag] = {}
        self.replace(DEFAULT_HEAD_TAGS if tags is None else tags)

    def replace(self, tags: cabc.Iterable[HeadTag]) -> None:
        """Discard every definition and install ``tags`` in order."""
        self._tags = {}
        for tag in tags:
            self._tags[tag.name] = tag

    def upsert(self, tag: HeadTag) -> None:
        """Add ``tag`` or replace the definition with the same name in place."""
        self._tags[tag.name] = tag

    def get(self, name: str) -> HeadTag | None:
        """Return the definition registered under ``name``, if any."""
        return self._tags.get(name)

    def names(self) -> list[str]:
        """Return registered tag names in registration order."""
        return list(self._tags)

    def __iter__(self) -> cabc.Iterator[HeadTag]:
        return iter(list(self._tags.values()))

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagRegistry({self.names()!r})"


__all__ = ["DEFAULT_HEAD_TAGS", "HeadTag", "TagRegistry"]
