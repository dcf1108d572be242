"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from pageweave.errors import SiteConfigError

from .helpers import _build_page_source, _build_registry
from .models import SiteConfig, ViewConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing views and head tag rules.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``pageweave.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied and relative paths resolved
        against the configuration file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If ``views`` is not a mapping or yields no usable view, a view has no
        pages, or the ``head_tags`` block is malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("pageweave.yaml"))  # doctest: +SKIP
    >>> config.get_view("home").pages[0].name  # doctest: +SKIP
    'index'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    base_dir = path.parent

    root = base_dir / defaults.get("root", "templates")
    extension = str(defaults.get("extension", ".html"))
    debug = bool(defaults.get("debug", False))
    output_dir = base_dir / defaults.get("output_dir", "public")
    registry = _build_registry(raw.get("head_tags"))

    views_raw = raw.get("views") or {}
    if not isinstance(views_raw, dict):
        msg = "Site configuration views must be a mapping of view keys."
        raise SiteConfigError(msg)
    if not views_raw:
        msg = "No views defined in site configuration."
        raise SiteConfigError(msg)

    views: dict[str, ViewConfig] = {}
    for key, payload in views_raw.items():
        match payload:
            case dict():
                views[key] = _build_view_config(
                    key=key,
                    payload=payload,
                    root=root,
                    base_dir=base_dir,
                    output_dir=output_dir,
                )
            case _:
                continue
    if not views:
        msg = "No view in site configuration is a mapping with pages."
        raise SiteConfigError(msg)

    return SiteConfig(
        views=views,
        root=root,
        extension=extension,
        debug=debug,
        output_dir=output_dir,
        registry=registry,
    )


def _build_view_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    root: Path,
    base_dir: Path,
    output_dir: Path,
) -> ViewConfig:
    """Build a ViewConfig for a single view entry."""
    pages_raw = payload.get("pages") or []
    if isinstance(pages_raw, str):
        pages_raw = [pages_raw]
    if not pages_raw:
        msg = f"View '{key}' does not list any pages."
        raise SiteConfigError(msg)
    pages = [
        _build_page_source(
            _resolve_page_root(entry, base_dir), view=key, root=root
        )
        for entry in pages_raw
    ]
    output = output_dir / payload.get("output", f"{key}.html")
    data = payload.get("data") or {}
    if not isinstance(data, dict):
        msg = f"View '{key}' data must be a mapping."
        raise SiteConfigError(msg)
    return ViewConfig(key=key, pages=pages, output=output, data=dict(data))


def _resolve_page_root(entry: object, base_dir: Path) -> object:
    """Anchor a page-level ``root`` override to the configuration directory."""
    if isinstance(entry, dict) and "root" in entry:
        return {**entry, "root": base_dir / entry["root"]}
    return entry


__all__ = ["load_site_config"]
