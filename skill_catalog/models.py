"""Data models for the skill catalog."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


UNKNOWN_LANGUAGE = "text"


class Location(str, Enum):
    """Known skill roots, in scan order."""
    CLAUDE = "claude"
    OPENCODE = "opencode"


class RefType(str, Enum):
    """Kind of a reference entry.

    DIRECTORY is reserved; directory-based loading only assigns FILE or GLOB.
    """
    FILE = "file"
    GLOB = "glob"
    DIRECTORY = "directory"


class ScriptLanguage(str, Enum):
    """Language family of a script, classified from its extension."""
    SHELL = "shell"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    RUBY = "ruby"
    PERL = "perl"
    POWERSHELL = "powershell"
    TEXT = "text"
    OTHER = "other"

    @classmethod
    def from_extension(cls, extension: str) -> "ScriptLanguage":
        """Classify a raw extension; unrecognized extensions map to OTHER."""
        if extension == UNKNOWN_LANGUAGE:
            return cls.TEXT
        return _EXTENSION_FAMILIES.get(extension.lower(), cls.OTHER)


_EXTENSION_FAMILIES = {
    "sh": ScriptLanguage.SHELL,
    "bash": ScriptLanguage.SHELL,
    "zsh": ScriptLanguage.SHELL,
    "fish": ScriptLanguage.SHELL,
    "py": ScriptLanguage.PYTHON,
    "js": ScriptLanguage.JAVASCRIPT,
    "mjs": ScriptLanguage.JAVASCRIPT,
    "cjs": ScriptLanguage.JAVASCRIPT,
    "ts": ScriptLanguage.TYPESCRIPT,
    "rb": ScriptLanguage.RUBY,
    "pl": ScriptLanguage.PERL,
    "ps1": ScriptLanguage.POWERSHELL,
}


class FailureKind(str, Enum):
    """Reasons a part of the catalog could not be loaded."""
    ROOT_UNREADABLE = "root_unreadable"
    SKILL_UNREADABLE = "skill_unreadable"
    METADATA_MALFORMED = "metadata_malformed"
    ASSET_UNREADABLE = "asset_unreadable"


@dataclass(frozen=True)
class Reference:
    """A file under a skill's references/ directory."""
    path: str
    ref_type: RefType = RefType.FILE
    required: bool = False

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "path": self.path,
            "ref_type": self.ref_type.value,
            "required": self.required,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Reference":
        """Deserialize from dict."""
        return cls(
            path=data["path"],
            ref_type=RefType(data.get("ref_type", "file")),
            required=data.get("required", False),
        )


@dataclass(frozen=True)
class Script:
    """A file under a skill's scripts/ directory. Never executed."""
    name: str
    language: str
    content: str = ""
    line_number: int | None = None

    @property
    def language_kind(self) -> ScriptLanguage:
        return ScriptLanguage.from_extension(self.language)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "name": self.name,
            "language": self.language,
            "content": self.content,
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Script":
        """Deserialize from dict."""
        return cls(
            name=data["name"],
            language=data.get("language", UNKNOWN_LANGUAGE),
            content=data.get("content", ""),
            line_number=data.get("line_number"),
        )


@dataclass(frozen=True)
class Skill:
    """One discovered skill.

    ``path`` is the absolute SKILL.md path and serves as identity.
    ``content_clean`` equals ``content`` when no frontmatter block was
    found, in which case ``metadata`` is None.
    """
    name: str
    location: Location
    path: str
    content: str
    content_clean: str
    description: str | None = None
    references: list[Reference] = field(default_factory=list)
    scripts: list[Script] = field(default_factory=list)
    metadata: Any = None

    @property
    def tags(self) -> list[str]:
        """Tags declared in frontmatter metadata, if any."""
        if not isinstance(self.metadata, dict):
            return []
        tags = self.metadata.get("tags")
        if not isinstance(tags, list):
            return []
        return [str(tag) for tag in tags]

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "name": self.name,
            "description": self.description,
            "location": self.location.value,
            "path": self.path,
            "content": self.content,
            "content_clean": self.content_clean,
            "references": [ref.to_dict() for ref in self.references],
            "scripts": [script.to_dict() for script in self.scripts],
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Skill":
        """Deserialize from dict."""
        return cls(
            name=data["name"],
            location=Location(data["location"]),
            path=data["path"],
            content=data.get("content", ""),
            content_clean=data.get("content_clean", ""),
            description=data.get("description"),
            references=[Reference.from_dict(r) for r in data.get("references", [])],
            scripts=[Script.from_dict(s) for s in data.get("scripts", [])],
            metadata=data.get("metadata"),
        )


@dataclass
class ScanFailure:
    """A recovered failure encountered during a scan."""
    kind: FailureKind
    path: str
    message: str
    skill: str | None = None

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "kind": self.kind.value,
            "path": self.path,
            "message": self.message,
            "skill": self.skill,
        }


@dataclass
class ScanReport:
    """Skills found by a scan together with everything that went wrong."""
    skills: list[Skill] = field(default_factory=list)
    failures: list[ScanFailure] = field(default_factory=list)
    roots: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def failures_of(self, kind: FailureKind) -> list[ScanFailure]:
        return [f for f in self.failures if f.kind == kind]

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "skills": [skill.to_dict() for skill in self.skills],
            "failures": [failure.to_dict() for failure in self.failures],
            "roots": list(self.roots),
        }


@dataclass
class AuditEvent:
    """Record of a catalog operation."""
    ts: datetime
    kind: str  # "scan", "root", "skill", "error"
    skill: str | None = None
    path: str | None = None
    bytes: int | None = None
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ts": self.ts.isoformat(),
            "kind": self.kind,
            "skill": self.skill,
            "path": self.path,
            "bytes": self.bytes,
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AuditEvent":
        """Deserialize from dict."""
        return cls(
            ts=datetime.fromisoformat(data["ts"]),
            kind=data["kind"],
            skill=data.get("skill"),
            path=data.get("path"),
            bytes=data.get("bytes"),
            detail=data.get("detail", {}),
        )


@dataclass
class ScanPolicy:
    """Configuration for how much of each skill is loaded.

    ``max_script_bytes`` caps script content read from the decoded text
    stream, so it counts characters rather than encoded bytes.
    """
    load_script_content: bool = True
    max_script_bytes: int | None = None

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "load_script_content": self.load_script_content,
            "max_script_bytes": self.max_script_bytes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScanPolicy":
        """Deserialize from dict."""
        return cls(
            load_script_content=data.get("load_script_content", True),
            max_script_bytes=data.get("max_script_bytes"),
        )
