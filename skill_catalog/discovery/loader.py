"""Loading of a single skill from its SKILL.md."""

from pathlib import Path

from skill_catalog.exceptions import MetadataParseError, SkillLoadError
from skill_catalog.models import FailureKind, Location, ScanPolicy, Skill
from skill_catalog.observability.audit import ScanDiagnostics
from skill_catalog.parsing.frontmatter import FrontmatterSplitter, MetadataParser
from skill_catalog.parsing.markdown import DescriptionExtractor
from skill_catalog.resources.assets import AssetLoader


class SkillLoader:
    """Creates Skill objects from SKILL.md paths.

    Reading the descriptor and deriving the skill name are the only steps
    that can fail a load. Malformed frontmatter and unreadable assets are
    recorded on the diagnostics and the skill is still returned.
    """

    def __init__(
        self,
        policy: ScanPolicy | None = None,
        diagnostics: ScanDiagnostics | None = None,
    ):
        self.diagnostics = diagnostics or ScanDiagnostics()
        self.splitter = FrontmatterSplitter()
        self.metadata_parser = MetadataParser()
        self.description_extractor = DescriptionExtractor()
        self.asset_loader = AssetLoader(policy, self.diagnostics)

    def load(self, skill_md: Path, location: Location) -> Skill:
        """Load one skill.

        Args:
            skill_md: Absolute path to the SKILL.md file
            location: Root the skill was found under

        Returns:
            Fully populated Skill

        Raises:
            SkillLoadError: If SKILL.md cannot be read or the skill name
                            cannot be derived from its directory
        """
        content = self._read_descriptor(skill_md)
        skill_dir = skill_md.parent
        name = self._skill_name(skill_md)

        frontmatter_text, content_clean = self.splitter.split(content)

        metadata = None
        if frontmatter_text is not None:
            try:
                metadata = self.metadata_parser.parse(frontmatter_text)
            except MetadataParseError as e:
                self.diagnostics.failure(
                    FailureKind.METADATA_MALFORMED, e, path=skill_md, skill=name
                )

        skill = Skill(
            name=name,
            location=location,
            path=str(skill_md),
            content=content,
            content_clean=content_clean,
            description=self.description_extractor.extract(content_clean),
            references=self.asset_loader.load_references(skill_dir, name),
            scripts=self.asset_loader.load_scripts(skill_dir, name),
            metadata=metadata,
        )

        self.diagnostics.emit(
            "skill",
            skill=name,
            path=skill.path,
            bytes=len(content.encode("utf-8")),
            location=location.value,
            references=len(skill.references),
            scripts=len(skill.scripts),
        )
        return skill

    def _read_descriptor(self, skill_md: Path) -> str:
        try:
            with open(skill_md, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SkillLoadError(f"Failed to read SKILL.md: {e}", path=str(skill_md)) from e

    def _skill_name(self, skill_md: Path) -> str:
        name = skill_md.parent.name
        if not name:
            raise SkillLoadError("SKILL.md has no parent directory", path=str(skill_md))
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SkillLoadError(
                f"Skill directory name is not valid text: {name!r}", path=str(skill_md)
            ) from e
        return name
