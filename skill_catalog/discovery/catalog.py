"""Catalog building across all skill roots.

SkillCatalog is the single entry point callers use: it resolves the known
roots, scans each of them and concatenates the results. A scan never
raises; unreadable roots, skills and assets are recovered at the lowest
level possible and reported through the ScanReport and the audit sink.
"""

from pathlib import Path

from skill_catalog.discovery.roots import RootResolver
from skill_catalog.discovery.scanner import SkillScanner
from skill_catalog.exceptions import RootUnreadableError
from skill_catalog.models import FailureKind, Location, ScanPolicy, ScanReport, Skill
from skill_catalog.observability.audit import AuditSink, ScanDiagnostics


class SkillCatalog:
    """Builds the catalog of skills found under the known roots.

    Example:
        >>> catalog = SkillCatalog()
        >>> for skill in catalog.scan():
        ...     print(f"{skill.location.value}: {skill.name}")

        >>> report = SkillCatalog(home=Path("/tmp/home")).scan_report()
        >>> for failure in report.failures:
        ...     print(failure.kind.value, failure.path)
    """

    def __init__(
        self,
        home: Path | None = None,
        roots: list[tuple[Location, Path]] | None = None,
        policy: ScanPolicy | None = None,
        audit_sink: AuditSink | None = None,
    ):
        """Initialize the catalog.

        Args:
            home: Home directory override used to resolve the known roots
            roots: Explicit (location, path) pairs replacing the resolved
                   roots
            policy: Optional ScanPolicy. If None, uses default policy.
            audit_sink: Optional AuditSink receiving scan events
        """
        self._resolver = RootResolver(home)
        self._roots = [(location, Path(path)) for location, path in roots] if roots is not None else None
        self._policy = policy or ScanPolicy()
        self._audit_sink = audit_sink

    def roots(self) -> list[tuple[Location, Path]]:
        """Return the (location, path) pairs that will be scanned."""
        if self._roots is not None:
            return list(self._roots)
        return self._resolver.resolve()

    def scan_report(self) -> ScanReport:
        """Scan all roots and return skills together with recovered failures."""
        diagnostics = ScanDiagnostics(self._audit_sink)
        scanner = SkillScanner(self._policy, diagnostics)
        report = ScanReport()

        roots = self.roots()
        diagnostics.emit("scan", phase="start", roots=[str(path) for _, path in roots])

        for location, root in roots:
            report.roots.append(str(root))
            try:
                report.skills.extend(scanner.scan(root, location))
            except RootUnreadableError as e:
                diagnostics.failure(FailureKind.ROOT_UNREADABLE, e)

        report.failures = diagnostics.failures
        diagnostics.emit(
            "scan",
            phase="end",
            skills_found=len(report.skills),
            failures=len(report.failures),
        )
        return report

    def scan(self) -> list[Skill]:
        """Scan all roots and return the skills found."""
        return self.scan_report().skills


def scan_skills() -> list[Skill]:
    """Produce the full catalog of skills under the known roots."""
    return SkillCatalog().scan()
