"""Exception classes for the skill catalog."""


class SkillCatalogError(Exception):
    """Base exception for all skill-catalog errors."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class RootUnreadableError(SkillCatalogError):
    """Raised when a skill root cannot be listed."""
    pass


class SkillLoadError(SkillCatalogError):
    """Raised when a SKILL.md cannot be read or its name cannot be derived."""
    pass


class MetadataParseError(SkillCatalogError):
    """Raised when a frontmatter block is not valid YAML."""
    pass


class AssetUnreadableError(SkillCatalogError):
    """Raised when a references/ or scripts/ entry cannot be read."""
    pass
