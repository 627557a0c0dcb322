"""Search query language for the skill catalog.

Supported syntax:
    name:pdf, description:excel, location:claude   field-specific queries
    pdf AND excel                                 every term must match
    pdf OR excel                                  any term must match
    pdf NOT pptx                                  exclude skills matching pptx
    pdf excel                                     bare terms, treated as OR
"""

import re
from dataclasses import dataclass, field

from skill_catalog.models import Skill

_FIELD_QUERY = re.compile(r"(\w+):(\S+)")
_AND = re.compile(r"\s+AND\s+", re.IGNORECASE)
_OR = re.compile(r"\s+OR\s+", re.IGNORECASE)
_NOT = re.compile(r"\s+NOT\s+", re.IGNORECASE)


@dataclass
class ParsedQuery:
    """A search query broken into its parts. All values are lower-case."""
    terms: list[str] = field(default_factory=list)
    field_queries: dict[str, list[str]] = field(default_factory=dict)
    and_terms: list[str] = field(default_factory=list)
    or_terms: list[str] = field(default_factory=list)
    not_terms: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.terms or self.field_queries or self.and_terms
            or self.or_terms or self.not_terms
        )

    def all_terms(self) -> list[str]:
        """Terms that count as matches for highlighting; NOT terms excluded."""
        values = [v for vs in self.field_queries.values() for v in vs]
        return [t for t in self.terms + self.and_terms + self.or_terms + values if t]


@dataclass
class HighlightMatch:
    """A segment of text and whether it matched the query."""
    text: str
    is_match: bool


def parse_search_query(query: str) -> ParsedQuery:
    """Parse a search query.

    Args:
        query: Raw query text

    Returns:
        ParsedQuery; bare terms with no operator become OR terms

    Example:
        >>> parse_search_query("name:pdf excel NOT draft").not_terms
        ['draft']
    """
    parsed = ParsedQuery()
    if not query.strip():
        return parsed

    working = query
    for match in _FIELD_QUERY.finditer(query):
        parsed.field_queries.setdefault(match.group(1).lower(), []).append(match.group(2).lower())
        working = working.replace(match.group(0), "", 1)

    and_parts = _split(_AND, working)
    for part in and_parts:
        not_parts = _split(_NOT, part)

        if len(not_parts) > 1:
            parsed.and_terms.append(not_parts[0].lower())
            parsed.not_terms.extend(p.lower() for p in not_parts[1:])
            continue

        if len(not_parts) == 1:
            or_parts = _split(_OR, not_parts[0])
            if len(or_parts) > 1:
                parsed.or_terms.extend(p.lower() for p in or_parts)
            elif len(and_parts) > 1:
                parsed.and_terms.append(or_parts[0].lower())
            else:
                parsed.terms.extend(or_parts[0].lower().split())

    if parsed.terms and not (parsed.and_terms or parsed.or_terms or parsed.not_terms):
        parsed.or_terms = parsed.terms
        parsed.terms = []

    return parsed


def _split(pattern: re.Pattern, text: str) -> list[str]:
    return [part.strip() for part in pattern.split(text) if part.strip()]


def searchable_text(skill: Skill) -> str:
    return " ".join([
        skill.name,
        skill.description or "",
        skill.location.value,
        skill.content_clean,
    ]).lower()


def match_skill(skill: Skill, parsed: ParsedQuery) -> bool:
    """Check whether a skill satisfies a parsed query."""
    text = searchable_text(skill)

    if any(term in text for term in parsed.not_terms):
        return False

    for field_name, values in parsed.field_queries.items():
        if not any(_field_matches(skill, field_name, value, text) for value in values):
            return False

    if not all(term in text for term in parsed.and_terms):
        return False

    if parsed.or_terms and not any(term in text for term in parsed.or_terms):
        return False

    return True


def _field_matches(skill: Skill, field_name: str, value: str, text: str) -> bool:
    if field_name == "name":
        return value in skill.name.lower()
    if field_name == "description":
        return value in (skill.description or "").lower()
    if field_name == "location":
        return value in skill.location.value
    return value in text


def highlight_matches(text: str, query: str) -> list[HighlightMatch]:
    """Split text into segments that do and do not match the query terms.

    Matching is case-insensitive; segment text keeps its original case.
    """
    if not query.strip() or not text:
        return [HighlightMatch(text=text, is_match=False)]

    terms = parse_search_query(query).all_terms()
    if not terms:
        return [HighlightMatch(text=text, is_match=False)]

    pattern = re.compile("(" + "|".join(re.escape(t) for t in terms) + ")", re.IGNORECASE)
    lowered = {t.lower() for t in terms}
    return [
        HighlightMatch(text=part, is_match=part.lower() in lowered)
        for part in pattern.split(text)
        if part
    ]
