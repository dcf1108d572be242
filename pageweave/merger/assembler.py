"""Combine several rendered HTML documents into one page.

The merged page takes its preamble (everything up to and including the
``<head>`` opening tag) and its ``<title>`` from the last document that has a
title. The merged head follows, then each document's ``<body>`` rewritten as a
``<div>`` in input order, then every ``<script>`` found after each body.

Example
-------
>>> page = merge_html([
...     '<head><title>A</title></head><body class="a"></body>',
...     '<head><title>B</title></head><body class="b"></body>',
... ])
>>> print(page)
<head>
    <title>B</title>
</head>
<body>
<div class="a"></div>
<div class="b"></div>
</body>
</html>
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ

from .head import HeadMerger
from .scanner import TagScanner, first_block, first_content

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .tags import TagRegistry

logger = logging.getLogger(__name__)

DEFAULT_PREAMBLE = "<!DOCTYPE html>\n<html>\n<head>"
HEAD_OPEN_PATTERN = re.compile(r"<head(?=[\s>])[^>]*>")
ENTRY_INDENT = "\n    "


@dc.dataclass(slots=True)
class DocumentParts:
    """Pieces of one input document that take part in the merge.

    Attributes
    ----------
    source : str
        The full document text.
    head : str | None
        Inner content of the first ``<head>``.
    body : str | None
        First whole ``<body ...>...</body>`` block.
    scripts : list[str]
        Whole ``<script>`` blocks found after the body.
    """

    source: str
    head: str | None
    body: str | None
    scripts: list[str]


def split_document(document: str) -> DocumentParts:
    """Extract the head content, body block, and post-body scripts.

    Scripts are collected after the body when there is one, otherwise after
    the head, otherwise across the whole document.
    """
    head = None
    scripts_from = 0
    found_head = first_content(document, "head")
    if found_head is not None:
        head, scripts_from = found_head

    body = None
    found_body = first_block(document, "body")
    if found_body is not None:
        body, scripts_from = found_body

    scanner = TagScanner(document, "script", start=scripts_from)
    scripts: list[str] = []
    while (script := scanner.next_with_tag()) is not None:
        scripts.append(script)
    return DocumentParts(source=document, head=head, body=body, scripts=scripts)


def body_to_div(body: str) -> str:
    """Rewrite a ``<body ...>...</body>`` block as ``<div ...>...</div>``.

    Attributes on the body are kept verbatim.
    """
    inner = body[len("<body") :]
    if inner.endswith("</body>"):
        inner = inner[: -len("</body>")] + "</div>"
    return f"<div{inner}"


def _preamble_and_title(parts: DocumentParts) -> tuple[str, str | None]:
    source = parts.source
    match = HEAD_OPEN_PATTERN.search(source)
    preamble = source[: match.end()] if match else DEFAULT_PREAMBLE

    title = None
    head = parts.head or ""
    start = head.find("<title")
    if start != -1:
        end = head.find("</title>", start)
        title = head[start:] if end == -1 else head[start : end + len("</title>")]
    return preamble, title


def merge_html(
    documents: cabc.Sequence[str], registry: TagRegistry | None = None
) -> str:
    """Merge ``documents`` into a single HTML page.

    Parameters
    ----------
    documents : Sequence[str]
        Rendered documents in the order their bodies and scripts should
        appear.
    registry : TagRegistry, optional
        Head tags to collect; the default meta/link/script/style set when
        omitted.

    Returns
    -------
    str
        The merged page; ``""`` when ``documents`` is empty.
    """
    if not documents:
        return ""
    parts = [split_document(document) for document in documents]
    heads = HeadMerger(registry).merge([part.head for part in parts])

    title_source = parts[heads.title_index if heads.title_index is not None else 0]
    preamble, title = _preamble_and_title(title_source)

    chunks = [preamble]
    if title is not None:
        chunks.append(ENTRY_INDENT + title)
    chunks.extend(ENTRY_INDENT + entry for entry in heads.entries)
    chunks.append("\n</head>\n<body>")
    chunks.extend(f"\n{body_to_div(part.body)}" for part in parts if part.body)
    chunks.append("\n</body>")
    for part in parts:
        chunks.extend(f"\n{script}" for script in part.scripts)
    chunks.append("\n</html>")
    logger.debug("merged %d document(s)", len(parts))
    return "".join(chunks)


__all__ = [
    "DEFAULT_PREAMBLE",
    "DocumentParts",
    "body_to_div",
    "merge_html",
    "split_document",
]
