"""Location and tag filters over a skill catalog."""

from collections import Counter
from dataclasses import dataclass, field

from skill_catalog.models import Location, Skill
from skill_catalog.search.query import match_skill, parse_search_query


@dataclass
class SearchFilters:
    """Filters applied before the text query. Empty lists filter nothing."""
    locations: list[Location] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


def filter_skills(
    skills: list[Skill],
    query: str = "",
    filters: SearchFilters | None = None,
) -> list[Skill]:
    """Return the skills passing the filters and the query, in input order.

    A skill passes the tag filter when it carries any of the selected tags.
    """
    filters = filters or SearchFilters()
    parsed = parse_search_query(query)

    result = []
    for skill in skills:
        if filters.locations and skill.location not in filters.locations:
            continue
        if filters.tags and not set(filters.tags) & set(skill.tags):
            continue
        if not parsed.is_empty and not match_skill(skill, parsed):
            continue
        result.append(skill)
    return result


def available_tags(skills: list[Skill]) -> list[str]:
    """Sorted unique tags across all skills."""
    return sorted({tag for skill in skills for tag in skill.tags})


def tag_counts(skills: list[Skill]) -> dict[str, int]:
    return dict(Counter(tag for skill in skills for tag in skill.tags))


def location_counts(skills: list[Skill]) -> dict[Location, int]:
    counts = {location: 0 for location in Location}
    for skill in skills:
        counts[skill.location] += 1
    return counts
