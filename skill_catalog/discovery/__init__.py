"""Discovery module for skill roots, scanning and loading."""

from skill_catalog.discovery.catalog import SkillCatalog, scan_skills
from skill_catalog.discovery.loader import SkillLoader
from skill_catalog.discovery.roots import RootResolver
from skill_catalog.discovery.scanner import SkillScanner

__all__ = ["RootResolver", "SkillCatalog", "SkillLoader", "SkillScanner", "scan_skills"]
