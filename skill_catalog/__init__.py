"""Skill Catalog - discovery of local Agent Skills.

This library scans the well-known skill roots on the local filesystem, reads
each skill's SKILL.md (frontmatter and body) together with its references/
and scripts/ assets, and returns a structured catalog. A failing root, skill
or asset never aborts the scan.
"""

from skill_catalog.exceptions import (
    AssetUnreadableError,
    MetadataParseError,
    RootUnreadableError,
    SkillCatalogError,
    SkillLoadError,
)

from skill_catalog.models import (
    AuditEvent,
    FailureKind,
    Location,
    Reference,
    RefType,
    ScanFailure,
    ScanPolicy,
    ScanReport,
    Script,
    ScriptLanguage,
    Skill,
)

from skill_catalog.observability import (
    AuditSink,
    JSONLAuditSink,
    MemoryAuditSink,
    ScanDiagnostics,
    StdoutAuditSink,
)
from skill_catalog.discovery import (
    RootResolver,
    SkillCatalog,
    SkillLoader,
    SkillScanner,
    scan_skills,
)
from skill_catalog.rendering import CatalogJSONRenderer
from skill_catalog.search import SearchFilters, filter_skills, parse_search_query

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "SkillCatalogError",
    "RootUnreadableError",
    "SkillLoadError",
    "MetadataParseError",
    "AssetUnreadableError",
    # Models
    "Skill",
    "Reference",
    "Script",
    "Location",
    "RefType",
    "ScriptLanguage",
    "FailureKind",
    "ScanFailure",
    "ScanReport",
    "ScanPolicy",
    "AuditEvent",
    # Discovery
    "RootResolver",
    "SkillCatalog",
    "SkillLoader",
    "SkillScanner",
    "scan_skills",
    # Observability
    "AuditSink",
    "JSONLAuditSink",
    "MemoryAuditSink",
    "ScanDiagnostics",
    "StdoutAuditSink",
    # Rendering and search
    "CatalogJSONRenderer",
    "SearchFilters",
    "filter_skills",
    "parse_search_query",
]
