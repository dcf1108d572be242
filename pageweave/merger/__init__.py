"""Merge rendered HTML documents: head deduplication, bodies, and scripts."""

from .assembler import DocumentParts, body_to_div, merge_html, split_document
from .head import HeadMergeResult, HeadMerger, render_tag
from .scanner import TagScanner, normalize_whitespace, parse_attributes
from .tags import DEFAULT_HEAD_TAGS, HeadTag, TagRegistry

__all__ = [
    "DEFAULT_HEAD_TAGS",
    "DocumentParts",
    "HeadMergeResult",
    "HeadMerger",
    "HeadTag",
    "TagRegistry",
    "TagScanner",
    "body_to_div",
    "merge_html",
    "normalize_whitespace",
    "parse_attributes",
    "render_tag",
]
