"""Search and filtering over discovered skills."""

from skill_catalog.search.filters import (
    SearchFilters,
    available_tags,
    filter_skills,
    location_counts,
    tag_counts,
)
from skill_catalog.search.query import (
    HighlightMatch,
    ParsedQuery,
    highlight_matches,
    match_skill,
    parse_search_query,
)

__all__ = [
    "HighlightMatch",
    "ParsedQuery",
    "SearchFilters",
    "available_tags",
    "filter_skills",
    "highlight_matches",
    "location_counts",
    "match_skill",
    "parse_search_query",
    "tag_counts",
]
