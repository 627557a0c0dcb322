"""Audit logging interfaces and implementations for the skill catalog.

This module provides the AuditSink abstract interface for recording catalog
operations, concrete sinks for different backends, and ScanDiagnostics, the
injectable channel through which scan components report recovered failures.
"""

import json
import os
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from skill_catalog.exceptions import SkillCatalogError
from skill_catalog.models import AuditEvent, FailureKind, ScanFailure


class AuditSink(ABC):
    """Abstract interface for audit logging.

    AuditSink defines the contract for recording audit events emitted while a
    catalog is built. Implementations can write to different backends (files,
    stdout, in-memory lists, etc.).
    """

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: The AuditEvent to record, containing timestamp, operation
                   kind, skill name, and operation-specific details.
        """
        pass


class JSONLAuditSink(AuditSink):
    """Writes audit events to a JSONL (JSON Lines) file.

    Each audit event is serialized as a single JSON line and appended to the
    log file, so it can be processed with jq, grep, etc.

    Example log file content:
        {"ts": "2024-01-01T12:00:00", "kind": "scan", "skill": null, ...}
        {"ts": "2024-01-01T12:00:01", "kind": "skill", "skill": "pdf", ...}
    """

    def __init__(self, log_path: Path):
        """Initialize JSONLAuditSink with log file path.

        Args:
            log_path: Path to the JSONL log file. Parent directories will be
                     created if they don't exist.
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: AuditEvent) -> None:
        """Append audit event as a JSON line to the log file."""
        json_line = json.dumps(event.to_dict(), separators=(',', ':'))

        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(json_line + '\n')


class StdoutAuditSink(AuditSink):
    """Writes audit events to stdout, one JSON line per event."""

    def log(self, event: AuditEvent) -> None:
        print(json.dumps(event.to_dict(), separators=(',', ':')))


class MemoryAuditSink(AuditSink):
    """Keeps audit events in memory.

    Useful for tests and for embedding callers that want to inspect the
    diagnostic stream without capturing process output.
    """

    def __init__(self):
        self.events: list[AuditEvent] = []

    def log(self, event: AuditEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: str) -> list[AuditEvent]:
        return [event for event in self.events if event.kind == kind]


class ScanDiagnostics:
    """Collects recovered failures for a scan and forwards events to a sink.

    Every component of the scan pipeline takes an optional ScanDiagnostics.
    Failures are kept as ScanFailure records (returned in the ScanReport) and
    also emitted as "error" audit events when a sink is configured.
    """

    def __init__(self, audit_sink: AuditSink | None = None):
        self.audit_sink = audit_sink
        self.failures: list[ScanFailure] = []

    def emit(
        self,
        kind: str,
        skill: str | None = None,
        path: str | None = None,
        bytes: int | None = None,
        **detail,
    ) -> None:
        """Send an audit event to the sink, if any."""
        if self.audit_sink is None:
            return
        self.audit_sink.log(AuditEvent(
            ts=datetime.now(),
            kind=kind,
            skill=skill,
            path=path,
            bytes=bytes,
            detail=detail,
        ))

    def failure(
        self,
        kind: FailureKind,
        error: SkillCatalogError | str,
        path: str | Path | None = None,
        skill: str | None = None,
    ) -> ScanFailure:
        """Record a recovered failure.

        Args:
            kind: Taxonomy entry for the failure
            error: The exception that was recovered from, or a message
            path: Path the failure relates to; defaults to ``error.path``
            skill: Name of the skill involved, if known

        Returns:
            The recorded ScanFailure
        """
        if path is None and isinstance(error, SkillCatalogError):
            path = error.path
        failure = ScanFailure(
            kind=kind,
            path=printable(str(path)) if path is not None else "",
            message=printable(str(error)),
            skill=printable(skill) if skill is not None else None,
        )
        self.failures.append(failure)
        self.emit(
            "error",
            skill=failure.skill,
            path=failure.path,
            reason=kind.value,
            message=failure.message,
        )
        return failure


def printable(text: str) -> str:
    """Replace undecodable file-name bytes so the text can be written as UTF-8.

    Names that are not valid UTF-8 reach Python with lone surrogates in
    place of the bad bytes; those become U+FFFD.
    """
    return os.fsencode(text).decode("utf-8", "replace")
