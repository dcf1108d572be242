"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pageweave.errors import SiteConfigError
from pageweave.merger import HeadTag, TagRegistry
from pageweave.sources import PageSource

HEAD_TAG_MODES = ("upsert", "replace")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_head_tag(payload: object) -> HeadTag:
    """Build a HeadTag from a ``head_tags.tags`` entry."""
    if not isinstance(payload, dict):
        msg = "Head tag entries must be mappings."
        raise SiteConfigError(msg)
    name = _optional_str(payload.get("name"))
    if not name:
        msg = "Head tag entries require a 'name'."
        raise SiteConfigError(msg)
    attributes = payload.get("attributes", []) or []
    if not isinstance(attributes, list):
        msg = f"Head tag '{name}' attributes must be a list."
        raise SiteConfigError(msg)
    return HeadTag(
        name=name,
        has_content=bool(payload.get("has_content", False)),
        attributes=tuple(str(attribute) for attribute in attributes),
    )


def _build_registry(payload: typ.Mapping[str, typ.Any] | None) -> TagRegistry:
    """Return the default registry adjusted by the ``head_tags`` block."""
    registry = TagRegistry()
    if not payload:
        return registry
    mode = payload.get("mode", "upsert")
    if mode not in HEAD_TAG_MODES:
        msg = f"Unknown head_tags mode '{mode}'; expected one of {HEAD_TAG_MODES}."
        raise SiteConfigError(msg)
    tags = [_build_head_tag(entry) for entry in payload.get("tags", []) or []]
    match mode:
        case "replace":
            registry.replace(tags)
        case _:
            for tag in tags:
                registry.upsert(tag)
    return registry


def _build_page_source(
    payload: object, *, view: str, root: Path
) -> PageSource:
    """Build a PageSource from a bare name or a ``{name, root, debug}`` mapping."""
    match payload:
        case str() as name if name.strip():
            return PageSource(directory=root, name=name.strip())
        case dict():
            name = _optional_str(payload.get("name"))
            if not name:
                msg = f"View '{view}' has a page without a 'name'."
                raise SiteConfigError(msg)
            directory = Path(payload.get("root", root))
            return PageSource(
                directory=directory,
                name=name,
                debug=bool(payload.get("debug", False)),
            )
        case _:
            msg = f"View '{view}' pages must be names or mappings."
            raise SiteConfigError(msg)


__all__ = [
    "HEAD_TAG_MODES",
    "_build_head_tag",
    "_build_page_source",
    "_build_registry",
    "_optional_str",
]
