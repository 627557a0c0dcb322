"""Filesystem scanning for skill discovery."""

import stat
from pathlib import Path

from skill_catalog.exceptions import RootUnreadableError, SkillLoadError
from skill_catalog.models import FailureKind, Location, ScanPolicy, Skill
from skill_catalog.observability.audit import ScanDiagnostics
from skill_catalog.discovery.loader import SkillLoader

SKILL_FILE = "SKILL.md"


class SkillScanner:
    """Scans one root directory for skills.

    A skill is an immediate subdirectory of the root that contains a file
    named exactly SKILL.md. Other entries are skipped silently. Skill
    directories are visited in lexical order of their names.
    """

    def __init__(
        self,
        policy: ScanPolicy | None = None,
        diagnostics: ScanDiagnostics | None = None,
    ):
        self.diagnostics = diagnostics or ScanDiagnostics()
        self.loader = SkillLoader(policy, self.diagnostics)

    def find_skill_files(self, root: Path) -> list[Path]:
        """Return SKILL.md paths of the skill directories directly under root.

        Raises:
            RootUnreadableError: If root does not exist or cannot be listed
        """
        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise RootUnreadableError(f"Failed to read directory: {e}", path=str(root)) from e

        skill_files = []
        for entry in entries:
            try:
                if not entry.is_dir():
                    continue
            except OSError:
                continue
            skill_md = entry / SKILL_FILE
            try:
                found = stat.S_ISREG(skill_md.stat().st_mode)
            except (FileNotFoundError, NotADirectoryError):
                continue
            except OSError as e:
                self.diagnostics.failure(
                    FailureKind.SKILL_UNREADABLE,
                    SkillLoadError(f"Failed to stat {SKILL_FILE}: {e}", path=str(skill_md)),
                    skill=entry.name,
                )
                continue
            if found:
                skill_files.append(skill_md)
        return skill_files

    def scan(self, root: Path, location: Location) -> list[Skill]:
        """Load every skill found directly under root.

        Args:
            root: Root directory to scan
            location: Location tag given to every skill found

        Returns:
            Skills that loaded successfully; failed skills are recorded on
            the diagnostics and left out

        Raises:
            RootUnreadableError: If root does not exist or cannot be listed
        """
        skills = []
        for skill_md in self.find_skill_files(root):
            try:
                skills.append(self.loader.load(skill_md, location))
            except SkillLoadError as e:
                self.diagnostics.failure(
                    FailureKind.SKILL_UNREADABLE, e, skill=skill_md.parent.name
                )

        self.diagnostics.emit(
            "root", path=str(root), location=location.value, skills_found=len(skills)
        )
        return skills
