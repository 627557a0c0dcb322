"""Tests for CLI functionality."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.fixture
def cli_home(tmp_path):
    """Create a home directory with one skill in each root."""
    claude_skill = tmp_path / ".claude" / "skills" / "test-skill"
    claude_skill.mkdir(parents=True)
    (claude_skill / "SKILL.md").write_text("""---
name: test-skill
tags: [testing]
---

# Test Skill

A test skill for CLI testing.
""")

    references_dir = claude_skill / "references"
    references_dir.mkdir()
    (references_dir / "example.md").write_text("# Example\n\nTest reference.")

    scripts_dir = claude_skill / "scripts"
    scripts_dir.mkdir()
    (scripts_dir / "hello.py").write_text("print('Hello, World!')\n")

    opencode_skill = tmp_path / ".config" / "opencode" / "skills" / "other-skill"
    opencode_skill.mkdir(parents=True)
    (opencode_skill / "SKILL.md").write_text("# Other\n\nSomething else entirely.\n")

    return tmp_path


def run_cli(*args):
    """Run the CLI and return the result."""
    cmd = [sys.executable, "-m", "skill_catalog"] + list(args)
    return subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8")


class TestCLI:
    """Test CLI commands."""

    def test_list_command(self, cli_home):
        result = run_cli("list", "--home", str(cli_home))

        assert result.returncode == 0
        assert "Found 2 skill(s)" in result.stdout
        assert "test-skill [claude]" in result.stdout
        assert "A test skill for CLI testing." in result.stdout
        assert "other-skill [opencode]" in result.stdout

    def test_list_command_location_filter(self, cli_home):
        result = run_cli("list", "--home", str(cli_home), "--location", "opencode")

        assert result.returncode == 0
        assert "other-skill" in result.stdout
        assert "test-skill" not in result.stdout

    def test_list_command_tag_filter(self, cli_home):
        result = run_cli("list", "--home", str(cli_home), "--tag", "testing")

        assert result.returncode == 0
        assert "Found 1 skill(s)" in result.stdout
        assert "test-skill" in result.stdout

    def test_list_command_no_skills(self, tmp_path):
        result = run_cli("list", "--home", str(tmp_path))

        assert result.returncode == 0
        assert "No skills found" in result.stdout

    def test_show_command(self, cli_home):
        result = run_cli("show", "test-skill", "--home", str(cli_home))

        assert result.returncode == 0
        assert "test-skill [claude]" in result.stdout
        assert "example.md (file)" in result.stdout
        assert "hello.py (py)" in result.stdout
        assert "# Test Skill" in result.stdout

    def test_show_command_not_found(self, cli_home):
        result = run_cli("show", "nonexistent", "--home", str(cli_home))

        assert result.returncode == 1
        assert "Skill not found" in result.stderr
        assert "test-skill" in result.stderr

    def test_search_command(self, cli_home):
        result = run_cli("search", "name:other", "--home", str(cli_home))

        assert result.returncode == 0
        assert "1 of 2 skill(s) match" in result.stdout
        assert "other-skill" in result.stdout

    def test_search_command_no_match(self, cli_home):
        result = run_cli("search", "zzz-nothing", "--home", str(cli_home))

        assert result.returncode == 0
        assert "No skills match" in result.stdout

    def test_export_command_stdout(self, cli_home):
        result = run_cli("export", "--home", str(cli_home))

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert [d["name"] for d in data] == ["test-skill", "other-skill"]
        assert data[0]["metadata"] == {"name": "test-skill", "tags": ["testing"]}
        assert data[1]["metadata"] is None
        assert data[0]["scripts"][0]["content"] == "print('Hello, World!')\n"

    def test_export_skips_undecodable_reference_name(self, cli_home):
        references_dir = cli_home / ".claude" / "skills" / "test-skill" / "references"
        (references_dir / os.fsdecode(b"bad\xff.md")).write_text("bad")

        result = run_cli("export", "--home", str(cli_home))

        assert result.returncode == 0
        data = json.loads(result.stdout)
        paths = [Path(ref["path"]).name for ref in data[0]["references"]]
        assert paths == ["example.md"]

    def test_validate_reports_undecodable_reference_name(self, cli_home):
        references_dir = cli_home / ".claude" / "skills" / "test-skill" / "references"
        (references_dir / os.fsdecode(b"bad\xff.md")).write_text("bad")

        result = run_cli("validate", "--home", str(cli_home))

        assert result.returncode == 1
        assert "asset_unreadable" in result.stdout

    def test_export_command_to_file(self, cli_home, tmp_path):
        output = tmp_path / "out" / "catalog.json"

        result = run_cli("export", "--home", str(cli_home), "--output", str(output), "--no-content")

        assert result.returncode == 0
        assert "Wrote 2 skill(s)" in result.stdout
        data = json.loads(output.read_text())
        assert "content" not in data[0]

    def test_validate_command_success(self, cli_home):
        result = run_cli("validate", "--home", str(cli_home))

        assert result.returncode == 0
        assert "Loaded 2 skill(s) from 2 root(s)" in result.stdout
        assert "All skills loaded successfully" in result.stdout

    def test_validate_command_missing_root_is_not_an_error(self, tmp_path):
        result = run_cli("validate", "--home", str(tmp_path))

        assert result.returncode == 0
        assert "not present" in result.stdout

    def test_validate_command_reports_failures(self, cli_home):
        broken = cli_home / ".claude" / "skills" / "broken"
        broken.mkdir()
        (broken / "SKILL.md").write_text("---\nname: [oops\n---\nBody\n")

        result = run_cli("validate", "--home", str(cli_home))

        assert result.returncode == 1
        assert "Validation errors" in result.stdout
        assert "broken: metadata_malformed" in result.stdout

    def test_audit_log(self, cli_home, tmp_path):
        log_path = tmp_path / "logs" / "audit.jsonl"

        result = run_cli("list", "--home", str(cli_home), "--audit-log", str(log_path))

        assert result.returncode == 0
        events = [json.loads(line) for line in log_path.read_text().splitlines()]
        assert events[0]["kind"] == "scan"
        assert [e["skill"] for e in events if e["kind"] == "skill"] == ["test-skill", "other-skill"]

    def test_no_command(self):
        result = run_cli()

        assert result.returncode == 1
