"""Unit tests for audit sinks and ScanDiagnostics."""

import json
import os
from datetime import datetime
from pathlib import Path

import pytest

from skill_catalog.exceptions import SkillLoadError
from skill_catalog.models import AuditEvent, FailureKind
from skill_catalog.observability.audit import (
    AuditSink,
    JSONLAuditSink,
    MemoryAuditSink,
    ScanDiagnostics,
    StdoutAuditSink,
    printable,
)


def make_event(kind: str = "skill") -> AuditEvent:
    return AuditEvent(
        ts=datetime(2024, 1, 1, 12, 0, 0),
        kind=kind,
        skill="pdf",
        path="/skills/pdf/SKILL.md",
        bytes=42,
        detail={"location": "claude"},
    )


class TestAuditSink:
    """Tests for the AuditSink abstract interface."""

    def test_abstract_interface(self):
        with pytest.raises(TypeError):
            AuditSink()

    def test_log_method_required(self):
        with pytest.raises(TypeError):
            class IncompleteAuditSink(AuditSink):
                pass
            IncompleteAuditSink()


class TestJSONLAuditSink:
    """Tests for JSONLAuditSink."""

    def test_writes_one_line_per_event(self, temp_dir: Path):
        log_path = temp_dir / "logs" / "audit.jsonl"
        sink = JSONLAuditSink(log_path)

        sink.log(make_event("scan"))
        sink.log(make_event("skill"))

        lines = log_path.read_text().splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["kind"] == "scan"
        assert first["ts"] == "2024-01-01T12:00:00"
        assert first["detail"] == {"location": "claude"}

    def test_creates_parent_directory(self, temp_dir: Path):
        log_path = temp_dir / "a" / "b" / "audit.jsonl"

        JSONLAuditSink(log_path)

        assert log_path.parent.is_dir()

    def test_appends_to_existing_file(self, temp_dir: Path):
        log_path = temp_dir / "audit.jsonl"
        log_path.write_text('{"existing": true}\n')

        JSONLAuditSink(log_path).log(make_event())

        assert len(log_path.read_text().splitlines()) == 2


class TestStdoutAuditSink:
    """Tests for StdoutAuditSink."""

    def test_prints_json_line(self, capsys):
        StdoutAuditSink().log(make_event())

        captured = capsys.readouterr()
        data = json.loads(captured.out.strip())
        assert data["skill"] == "pdf"
        assert data["bytes"] == 42


class TestMemoryAuditSink:
    """Tests for MemoryAuditSink."""

    def test_collects_events(self):
        sink = MemoryAuditSink()
        sink.log(make_event("scan"))
        sink.log(make_event("error"))

        assert len(sink.events) == 2
        assert [e.kind for e in sink.of_kind("error")] == ["error"]


class TestScanDiagnostics:
    """Tests for ScanDiagnostics."""

    def test_emit_without_sink_is_noop(self):
        diagnostics = ScanDiagnostics()

        diagnostics.emit("scan", phase="start")

        assert diagnostics.failures == []

    def test_emit_forwards_detail(self):
        sink = MemoryAuditSink()

        ScanDiagnostics(sink).emit("root", path="/r", location="claude", skills_found=3)

        event = sink.events[0]
        assert event.kind == "root"
        assert event.path == "/r"
        assert event.skill is None
        assert event.detail == {"location": "claude", "skills_found": 3}

    def test_failure_uses_exception_path(self):
        sink = MemoryAuditSink()
        diagnostics = ScanDiagnostics(sink)

        failure = diagnostics.failure(
            FailureKind.SKILL_UNREADABLE,
            SkillLoadError("Failed to read SKILL.md", path="/s/SKILL.md"),
            skill="s",
        )

        assert failure.path == "/s/SKILL.md"
        assert failure.message == "Failed to read SKILL.md"
        assert diagnostics.failures == [failure]
        event = sink.events[0]
        assert event.kind == "error"
        assert event.skill == "s"
        assert event.detail == {
            "reason": "skill_unreadable",
            "message": "Failed to read SKILL.md",
        }

    def test_failure_with_message_and_path(self, temp_dir: Path):
        diagnostics = ScanDiagnostics()

        failure = diagnostics.failure(FailureKind.ROOT_UNREADABLE, "missing", path=temp_dir)

        assert failure.path == str(temp_dir)
        assert failure.message == "missing"
        assert failure.skill is None

    def test_failure_text_is_always_encodable(self, temp_dir: Path):
        diagnostics = ScanDiagnostics()
        bad = temp_dir / os.fsdecode(b"bad\xff.md")

        failure = diagnostics.failure(
            FailureKind.ASSET_UNREADABLE, f"cannot read {bad}", path=bad, skill=os.fsdecode(b"s\xff")
        )

        assert failure.path == str(temp_dir / "bad\ufffd.md")
        assert failure.message == f"cannot read {temp_dir}/bad\ufffd.md"
        assert failure.skill == "s\ufffd"


def test_printable_keeps_valid_text():
    assert printable("héllo") == "héllo"
