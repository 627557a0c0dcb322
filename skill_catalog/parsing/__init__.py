"""Parsing module for SKILL.md frontmatter and body."""

from skill_catalog.parsing.frontmatter import (
    FrontmatterSplitter,
    MetadataParser,
    split_lines,
)
from skill_catalog.parsing.markdown import DescriptionExtractor

__all__ = [
    "DescriptionExtractor",
    "FrontmatterSplitter",
    "MetadataParser",
    "split_lines",
]
