r"""Extract ``@section`` blocks from a page into a name -> content table.

The scan peels sections off the front of the text one at a time. The first
``@section("name")`` is matched through the *last* ``@endsection`` of the
remaining text and the capture is trimmed. When the capture still holds an
``@endsection``, everything before that marker is the section's value and the
scan continues from the marker; otherwise the whole capture is the value.

A page whose final section is left open gets an ``@endsection`` appended
before scanning.

Examples
--------
>>> extract_sections('@section("a") A @endsection @section("b") B')
{'a': 'A ', 'b': 'B'}
"""

from __future__ import annotations

from .directives import (
    ENDSECTION,
    SECTION_PATTERN,
    SECTION_TRIM,
    TRAILING_ENDSECTION_PATTERN,
)


def extract_sections(content: str) -> dict[str, str]:
    """Return every section defined in ``content`` keyed by name.

    Parameters
    ----------
    content : str
        Page text containing zero or more ``@section`` blocks.

    Returns
    -------
    dict[str, str]
        Section values by name. A repeated name keeps the last value seen.
    """
    table: dict[str, str] = {}
    remaining: str | None = content
    while remaining is not None:
        remaining = _peel_section(remaining, table)
    return table


def _peel_section(content: str, table: dict[str, str]) -> str | None:
    """Record the first section of ``content`` and return the text still to scan."""
    if not TRAILING_ENDSECTION_PATTERN.search(content):
        content += ENDSECTION

    match = SECTION_PATTERN.search(content)
    if match is None:
        return None

    name = match.group(1)
    captured = match.group(2).strip(SECTION_TRIM)
    index = captured.find(ENDSECTION)
    if index == -1:
        table[name] = captured
        return None
    table[name] = captured[:index]
    return captured[index:]


__all__ = ["extract_sections"]
