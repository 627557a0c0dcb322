"""Loading of references/ and scripts/ assets bundled with a skill."""

import stat
from pathlib import Path

from skill_catalog.exceptions import AssetUnreadableError
from skill_catalog.models import (
    UNKNOWN_LANGUAGE,
    FailureKind,
    RefType,
    Reference,
    ScanPolicy,
    Script,
)
from skill_catalog.observability.audit import ScanDiagnostics

REFERENCES_DIR = "references"
SCRIPTS_DIR = "scripts"
GLOB_CHAR = "*"


class AssetLoader:
    """Enumerates the references/ and scripts/ directories of a skill.

    Both listings are non-recursive and sorted by file name. A missing
    directory yields an empty list. An unreadable directory or script is
    recorded on the diagnostics and degrades to an empty list or empty
    content; it never fails the skill.
    """

    def __init__(
        self,
        policy: ScanPolicy | None = None,
        diagnostics: ScanDiagnostics | None = None,
    ):
        self.policy = policy or ScanPolicy()
        self.diagnostics = diagnostics or ScanDiagnostics()

    def load_references(self, skill_dir: Path, skill_name: str | None = None) -> list[Reference]:
        """Build a Reference for each file directly under references/.

        Args:
            skill_dir: Path to the skill directory
            skill_name: Skill name used when reporting failures

        Returns:
            List of Reference objects, GLOB-typed when the file name
            contains '*', FILE-typed otherwise
        """
        try:
            files = self._list_files(skill_dir / REFERENCES_DIR, skill_name)
        except AssetUnreadableError as e:
            self.diagnostics.failure(FailureKind.ASSET_UNREADABLE, e, skill=skill_name)
            return []

        references = []
        for path in files:
            ref_type = RefType.GLOB if GLOB_CHAR in path.name else RefType.FILE
            references.append(Reference(path=str(path), ref_type=ref_type, required=False))
        return references

    def load_scripts(self, skill_dir: Path, skill_name: str | None = None) -> list[Script]:
        """Build a Script for each file directly under scripts/.

        Args:
            skill_dir: Path to the skill directory
            skill_name: Skill name used when reporting failures

        Returns:
            List of Script objects; scripts that cannot be read have
            empty content
        """
        try:
            files = self._list_files(skill_dir / SCRIPTS_DIR, skill_name)
        except AssetUnreadableError as e:
            self.diagnostics.failure(FailureKind.ASSET_UNREADABLE, e, skill=skill_name)
            return []

        scripts = []
        for path in files:
            content = ""
            if self.policy.load_script_content:
                try:
                    content = self._read_script(path)
                except AssetUnreadableError as e:
                    self.diagnostics.failure(FailureKind.ASSET_UNREADABLE, e, skill=skill_name)

            scripts.append(Script(
                name=path.name,
                language=script_language(path),
                content=content,
                line_number=None,
            ))
        return scripts

    def _list_files(self, directory: Path, skill_name: str | None = None) -> list[Path]:
        """List regular files in directory, sorted by name.

        Entries that cannot be stat'ed or whose names are not valid UTF-8
        are recorded as failures and left out.

        Raises:
            AssetUnreadableError: If the directory exists but cannot be listed
        """
        try:
            if not directory.is_dir():
                return []
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise AssetUnreadableError(
                f"Failed to list {directory.name}/: {e}", path=str(directory)
            ) from e

        files = []
        for entry in entries:
            try:
                if not stat.S_ISREG(entry.stat().st_mode):
                    continue
            except FileNotFoundError:
                continue
            except OSError as e:
                self.diagnostics.failure(
                    FailureKind.ASSET_UNREADABLE,
                    AssetUnreadableError(f"Failed to stat asset: {e}", path=str(entry)),
                    skill=skill_name,
                )
                continue
            try:
                entry.name.encode("utf-8")
            except UnicodeEncodeError:
                self.diagnostics.failure(
                    FailureKind.ASSET_UNREADABLE,
                    AssetUnreadableError(
                        f"Asset file name is not valid text: {entry.name!r}", path=str(entry)
                    ),
                    skill=skill_name,
                )
                continue
            files.append(entry)
        return files

    def _read_script(self, path: Path) -> str:
        """Read a script as UTF-8 text.

        ``max_script_bytes`` is applied to the decoded text stream, so the
        limit counts characters; a multi-byte character counts once.
        """
        max_chars = self.policy.max_script_bytes
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                if max_chars is None:
                    return f.read()
                return f.read(max_chars)
        except (OSError, UnicodeDecodeError) as e:
            raise AssetUnreadableError(
                f"Failed to read script: {e}", path=str(path)
            ) from e


def script_language(path: Path) -> str:
    """Return the file extension without its dot, or the unknown sentinel.

    A name with no extension and a name ending in a bare dot such as
    ``run.`` both yield the sentinel.
    """
    suffix = path.suffix
    if len(suffix) <= 1:
        return UNKNOWN_LANGUAGE
    return suffix[1:]
