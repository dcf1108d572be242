"""Directive composition: layouts, sections, yields, and includes."""

from .compiler import DirectiveComposer, compose, fill_yields
from .includes import IncludeExpander
from .sections import extract_sections

__all__ = [
    "DirectiveComposer",
    "IncludeExpander",
    "compose",
    "extract_sections",
    "fill_yields",
]
