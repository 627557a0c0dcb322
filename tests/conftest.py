"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from skill_catalog.observability.audit import MemoryAuditSink, ScanDiagnostics


SAMPLE_SKILL_MD = """---
name: test-skill
description: A test skill for unit tests
tags:
  - testing
  - pdf
metadata:
  author: Test Author
  version: 1.0.0
---

# Test Skill Instructions

This is a test skill for unit testing.
It spans two lines.

## Usage

1. Read the documentation
2. Execute the script
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def home(temp_dir: Path) -> Path:
    """Create a fake home directory with both skill roots."""
    (temp_dir / ".claude" / "skills").mkdir(parents=True)
    (temp_dir / ".config" / "opencode" / "skills").mkdir(parents=True)
    return temp_dir


@pytest.fixture
def claude_root(home: Path) -> Path:
    return home / ".claude" / "skills"


@pytest.fixture
def opencode_root(home: Path) -> Path:
    return home / ".config" / "opencode" / "skills"


@pytest.fixture
def skill_root(temp_dir: Path) -> Path:
    """Create a temporary skill directory."""
    skill_dir = temp_dir / "test-skill"
    skill_dir.mkdir(parents=True)
    return skill_dir


@pytest.fixture
def sample_skill_md(skill_root: Path) -> Path:
    """Create a sample SKILL.md file."""
    skill_md = skill_root / "SKILL.md"
    skill_md.write_text(SAMPLE_SKILL_MD)
    return skill_md


@pytest.fixture
def sample_skill_with_assets(skill_root: Path, sample_skill_md: Path) -> Path:
    """Create a sample skill with references and scripts."""
    refs_dir = skill_root / "references"
    refs_dir.mkdir()
    (refs_dir / "notes.md").write_text("# Notes\n\nSome notes.")
    (refs_dir / "*.json").write_text("{}")

    scripts_dir = skill_root / "scripts"
    scripts_dir.mkdir()
    script_file = scripts_dir / "run.sh"
    script_file.write_text("#!/bin/sh\necho done\n")
    script_file.chmod(0o755)

    return skill_root


@pytest.fixture
def audit_sink() -> MemoryAuditSink:
    return MemoryAuditSink()


@pytest.fixture
def diagnostics(audit_sink: MemoryAuditSink) -> ScanDiagnostics:
    return ScanDiagnostics(audit_sink)


@pytest.fixture
def make_skill():
    """Return a factory creating a skill directory under a root.

    The factory returns the path of the created SKILL.md.
    """
    def _make_skill(root: Path, name: str, content: str = SAMPLE_SKILL_MD) -> Path:
        skill_dir = root / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        skill_md = skill_dir / "SKILL.md"
        skill_md.write_text(content)
        return skill_md

    return _make_skill
