#!/usr/bin/env python3
"""Example: Standalone usage of the skill catalog.

This example scans the example skills shipped in this directory, prints a
summary of each one and shows the recovered failures, if any.
"""

from pathlib import Path

from skill_catalog import (
    CatalogJSONRenderer,
    Location,
    SearchFilters,
    SkillCatalog,
    StdoutAuditSink,
    filter_skills,
)


def main():
    """Demonstrate standalone usage."""
    print("=" * 60)
    print("Skill Catalog - Standalone Usage Example")
    print("=" * 60)
    print()

    skills_dir = Path(__file__).parent / "skills"

    catalog = SkillCatalog(
        roots=[(Location.CLAUDE, skills_dir)],
        audit_sink=StdoutAuditSink(),
    )

    print("Scanning...")
    report = catalog.scan_report()
    print(f"\nFound {len(report.skills)} skill(s)\n")

    for skill in report.skills:
        print(f"  - {skill.name}: {skill.description}")
        for ref in skill.references:
            print(f"      reference: {Path(ref.path).name} ({ref.ref_type.value})")
        for script in skill.scripts:
            print(f"      script: {script.name} ({script.language_kind.value})")

    for failure in report.failures:
        print(f"  ! {failure.kind.value}: {failure.path} - {failure.message}")

    print("\nSkills tagged 'csv':")
    for skill in filter_skills(report.skills, filters=SearchFilters(tags=["csv"])):
        print(f"  - {skill.name}")

    print("\nCompact JSON:")
    print(CatalogJSONRenderer().render(report.skills, include_content=False))


if __name__ == "__main__":
    main()
