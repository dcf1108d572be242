"""Compose directive-based page fragments and merge rendered HTML pages.

Pages use a small directive language: ``@extends`` picks a layout,
``@section``/``@endsection`` define blocks that fill the layout's ``@yield``
slots, and ``@include`` pulls in other files. Several composed pages can be
merged into one document whose head tags are deduplicated.

Exports
-------
- ``compose``: compose one page from a directory.
- ``merge_html``: merge rendered documents.
- ``ViewContainer``: compose, merge, compile with Jinja2, and cache views.
- ``app`` / ``main``: the Cyclopts command line.

Examples
--------
>>> from pageweave import merge_html
>>> merge_html(["<body></body>"]).endswith("</html>")
True
"""

from __future__ import annotations

from .cli import app, main
from .composer import DirectiveComposer, compose
from .container import ViewContainer
from .merger import HeadTag, TagRegistry, merge_html
from .sources import FileSystemSource, PageSource

__all__ = [
    "DirectiveComposer",
    "FileSystemSource",
    "HeadTag",
    "PageSource",
    "TagRegistry",
    "ViewContainer",
    "app",
    "compose",
    "main",
    "merge_html",
]
