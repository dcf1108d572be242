r"""Best-effort scanning of HTML tags, attributes, and inner content.

This is markup pattern matching rather than a parser: it finds ``<tag``
openings, the next ``>``, and the paired ``</tag>``. Comments, CDATA, and
quoted values that contain markup characters are not understood.

Examples
--------
>>> normalize_whitespace('<  head  >')
'<head>'
>>> parse_attributes('rel="stylesheet"  href = "/a.css" async')
{'rel': 'stylesheet', 'href': '/a.css', 'async': ''}
>>> scanner = TagScanner('<link rel="icon" href="/i.png"/><link rel="next">', "link")
>>> [attrs for _content, attrs in scanner]
[{'rel': 'icon', 'href': '/i.png'}, {'rel': 'next'}]
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

STRUCTURAL_SPACE_PATTERN = re.compile(r"\s*([<>=;])\s*")
SPACE_RUN_PATTERN = re.compile(r"\s+")
ATTRIBUTE_PATTERN = re.compile(
    r"""([^\s="']+)(?:=(?:"([^"]*)"|'([^']*)'|([^\s"']*)))?"""
)

AttributeSet = dict[str, str]


def normalize_whitespace(markup: str) -> str:
    """Collapse whitespace the way hand-written markup is usually meant.

    Whitespace touching ``<``, ``>``, ``=`` or ``;`` is removed, any other run
    becomes a single space, and both ends are trimmed.
    """
    squeezed = STRUCTURAL_SPACE_PATTERN.sub(r"\1", markup)
    return SPACE_RUN_PATTERN.sub(" ", squeezed).strip()


def parse_attributes(region: str) -> AttributeSet:
    """Parse the attribute region of an opening tag.

    Tokens are read left to right as ``key``, ``key="value"``, ``key='value'``
    or ``key=value``. A key without ``=`` maps to an empty string and a
    repeated key keeps its last value.
    """
    attributes: AttributeSet = {}
    for match in ATTRIBUTE_PATTERN.finditer(normalize_whitespace(region)):
        key, double, single, bare = match.groups()
        attributes[key] = next(
            (value for value in (double, single, bare) if value is not None), ""
        )
    return attributes


class TagScanner:
    """Cursor that walks successive occurrences of one tag in ``text``.

    Parameters
    ----------
    text : str
        Markup to scan.
    tag : str
        Tag name, e.g. ``"script"``. ``<scripts`` does not match ``script``.
    has_content : bool, optional
        Whether :meth:`next` should look for a closing ``</tag>`` and return
        the inner content. Defaults to ``True``.
    start : int, optional
        Offset at which scanning begins.
    """

    def __init__(
        self, text: str, tag: str, *, has_content: bool = True, start: int = 0
    ) -> None:
        self.text = text
        self.tag = tag
        self.has_content = has_content
        self.position = start
        self._open = re.compile(rf"<{re.escape(tag)}(?=[\s/>]|\Z)")
        self._close = f"</{tag}>"

    def _find_open(self) -> int:
        match = self._open.search(self.text, self.position)
        return -1 if match is None else match.start()

    def next_with_tag(self) -> str | None:
        """Return the next whole ``<tag ...>...</tag>`` block, or ``None``.

        An unclosed block runs to the end of the text.
        """
        start = self._find_open()
        if start == -1:
            return None
        close = self.text.find(self._close, start)
        end = len(self.text) if close == -1 else close + len(self._close)
        self.position = end
        return self.text[start:end]

    def next(self) -> tuple[str, AttributeSet] | None:
        """Return ``(content, attributes)`` for the next tag, or ``None``.

        ``content`` is the text between the opening and closing tags for
        content-bearing tags and ``""`` otherwise, including for tags closed
        with ``/>``. As with :meth:`next_with_tag`, a content-bearing tag with
        no closing tag takes the rest of the text as its content.
        """
        start = self._find_open()
        if start == -1:
            return None
        bracket = self.text.find(">", start)
        if bracket == -1:
            self.position = len(self.text)
            return "", parse_attributes(self.text[start + len(self.tag) + 1 :])

        region_start = start + len(self.tag) + 1
        region_end = bracket
        self_closing = self.text[bracket - 1] == "/" and bracket - 1 >= region_start
        if self_closing:
            region_end -= 1
        attributes = parse_attributes(self.text[region_start:region_end])

        content = ""
        self.position = bracket + 1
        if self.has_content and not self_closing:
            close = self.text.find(self._close, bracket)
            end = len(self.text) if close == -1 else close
            content = self.text[bracket + 1 : end]
            self.position = end if close == -1 else close + len(self._close)
        return content, attributes

    def __iter__(self) -> cabc.Iterator[tuple[str, AttributeSet]]:
        while (found := self.next()) is not None:
            yield found


def first_block(text: str, tag: str) -> tuple[str, int] | None:
    """Return the first whole ``tag`` block in ``text`` and the offset after it."""
    scanner = TagScanner(text, tag)
    block = scanner.next_with_tag()
    if block is None:
        return None
    return block, scanner.position


def first_content(text: str, tag: str) -> tuple[str, int] | None:
    """Return the inner content of the first ``tag`` and the offset after it."""
    scanner = TagScanner(text, tag)
    found = scanner.next()
    if found is None:
        return None
    return found[0], scanner.position


__all__ = [
    "AttributeSet",
    "TagScanner",
    "first_block",
    "first_content",
    "normalize_whitespace",
    "parse_attributes",
]
