"""Frontmatter splitting and parsing for SKILL.md files."""

import base64
from datetime import date, datetime
from typing import Any

import yaml

from skill_catalog.exceptions import MetadataParseError

DELIMITER = "---"


def split_lines(text: str) -> list[str]:
    """Split text into lines.

    Splits on '\\n' only, drops one trailing '\\r' per line, and does not
    yield an empty final line for text ending in a newline.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class FrontmatterSplitter:
    """Separates a leading '---' delimited block from the markdown body."""

    def split(self, content: str) -> tuple[str | None, str]:
        """
        Split content into (frontmatter_text, body).

        The block exists only if the first line, trimmed, starts with '---'
        and a later line, trimmed, also starts with '---'. Without a closing
        delimiter the document is treated as having no block at all.

        Args:
            content: Raw SKILL.md text

        Returns:
            Tuple of (text strictly between the delimiters or None,
            body text). When no block is found the body is ``content``
            unchanged.
        """
        lines = split_lines(content)

        if not lines or not lines[0].strip().startswith(DELIMITER):
            return None, content

        end_index = None
        for i in range(1, len(lines)):
            if lines[i].strip().startswith(DELIMITER):
                end_index = i
                break

        if end_index is None:
            return None, content

        frontmatter_text = "\n".join(lines[1:end_index])
        body = "\n".join(lines[end_index + 1:])
        return frontmatter_text, body


class MetadataParser:
    """Parses a frontmatter block as YAML into JSON-compatible values."""

    def parse(self, text: str) -> Any:
        """
        Parse frontmatter text.

        Args:
            text: YAML text found between the frontmatter delimiters

        Returns:
            The parsed value normalized to dicts, lists, strings, numbers,
            booleans and None. An empty block yields None.

        Raises:
            MetadataParseError: If the text is not valid YAML
        """
        try:
            value = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError) as e:
            raise MetadataParseError(f"Invalid YAML in frontmatter: {e}") from e

        return normalize(value)


def normalize(value: Any) -> Any:
    """Convert a YAML-loaded value into JSON-compatible data."""
    if isinstance(value, dict):
        return {_normalize_key(k): normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((normalize(v) for v in value), key=str)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def _normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(normalize(key))
