"""Observability module for audit logging and scan diagnostics."""

from skill_catalog.observability.audit import (
    AuditSink,
    JSONLAuditSink,
    MemoryAuditSink,
    ScanDiagnostics,
    StdoutAuditSink,
)

__all__ = [
    "AuditSink",
    "JSONLAuditSink",
    "MemoryAuditSink",
    "ScanDiagnostics",
    "StdoutAuditSink",
]
