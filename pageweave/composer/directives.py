"""Regular expressions recognising the page directive language.

Directives are matched literally and case-sensitively. Names may be quoted
with single or double quotes:

* ``@extends("layouts/base")`` must open the page (leading whitespace allowed).
* ``@section("name")`` ... ``@endsection`` wraps a named block.
* ``@yield("name")`` marks where a layout receives a section.
* ``@include("partials/nav")`` pulls another file in verbatim.
"""

from __future__ import annotations

import re

ENDSECTION = "@endsection"
# Section values are trimmed of ASCII whitespace only; U+00A0 is kept.
SECTION_TRIM = " \t\n\r\f"

EXTENDS_PATTERN = re.compile(r"""\s*@extends\(["']([\w/.\-]+)["']\)""")
SECTION_PATTERN = re.compile(r"""@section\(["'](\w+)["']\)(.+)@endsection""", re.DOTALL)
TRAILING_ENDSECTION_PATTERN = re.compile(r"@endsection\s*\Z")
YIELD_PATTERN = re.compile(r"""@yield\(["'](\w+)["']\)""")
INCLUDE_PATTERN = re.compile(r"""@include\(["']([\w/.\-\\]+)["']\)""")


__all__ = [
    "ENDSECTION",
    "EXTENDS_PATTERN",
    "INCLUDE_PATTERN",
    "SECTION_PATTERN",
    "SECTION_TRIM",
    "TRAILING_ENDSECTION_PATTERN",
    "YIELD_PATTERN",
]
