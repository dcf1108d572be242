"""Load and validate pageweave site configuration YAML.

The configuration names the template root, file extension, and debug flag,
optionally adjusts the head tags collected when pages are merged, and lists the
views to build. :func:`load_site_config` returns a :class:`SiteConfig` ready
for :class:`~pageweave.builder.ViewBuilder`.

Examples
--------
>>> from pathlib import Path
>>> from pageweave.config import load_site_config
>>> site = load_site_config(Path("pageweave.yaml"))  # doctest: +SKIP
>>> site.get_view("home").output  # doctest: +SKIP
PosixPath('public/index.html')
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError, ViewConfig

__all__ = ["SiteConfig", "SiteConfigError", "ViewConfig", "load_site_config"]
