"""Description extraction from SKILL.md bodies."""

from skill_catalog.parsing.frontmatter import split_lines


class DescriptionExtractor:
    """Derives a one-paragraph summary from a markdown body."""

    def extract(self, body: str) -> str | None:
        """
        Return the first paragraph of the body, flattened to one line.

        Leading blank lines and '#' header lines are skipped. Collection
        starts at the first other line and stops at the next blank line.
        Collected lines are trimmed and joined with single spaces.

        Args:
            body: Markdown body with frontmatter already removed

        Returns:
            The paragraph, or None if the body holds only headers and
            blank lines.
        """
        paragraph: list[str] = []

        for line in split_lines(body):
            trimmed = line.strip()

            if not paragraph:
                if not trimmed or trimmed.startswith("#"):
                    continue
                paragraph.append(trimmed)
                continue

            if not trimmed:
                break
            paragraph.append(trimmed)

        if not paragraph:
            return None
        return " ".join(paragraph)
