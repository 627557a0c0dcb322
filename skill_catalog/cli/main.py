"""Command-line interface for the skill catalog.

This module provides a CLI for inspecting the skills installed under the
known roots without writing code.

Commands:
    list: Display all discovered skills
    show: Display one skill in full
    search: Display skills matching a search query
    export: Write the catalog as JSON
    validate: Report skills, frontmatter and assets that failed to load

Example:
    $ skill-catalog list --location claude
    $ skill-catalog show pdf
    $ skill-catalog search "name:pdf NOT draft"
    $ skill-catalog export --output catalog.json --no-content
    $ skill-catalog validate --audit-log ~/.cache/skill-catalog/audit.jsonl
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from skill_catalog.discovery.catalog import SkillCatalog
from skill_catalog.exceptions import SkillCatalogError
from skill_catalog.models import FailureKind, Location, Skill
from skill_catalog.observability.audit import JSONLAuditSink
from skill_catalog.rendering.json_renderer import CatalogJSONRenderer
from skill_catalog.search.filters import SearchFilters, filter_skills

LOCATION_CHOICES = [location.value for location in Location]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--home",
        type=Path,
        help="Home directory to resolve skill roots from (default: current user's)",
    )
    common.add_argument(
        "--audit-log",
        type=Path,
        help="Append scan events as JSON lines to this file (optional)",
    )

    parser = argparse.ArgumentParser(
        prog="skill-catalog",
        description="Discover local skills and inspect the resulting catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # List command
    list_parser = subparsers.add_parser(
        "list",
        parents=[common],
        help="List all discovered skills",
        description="Display all skills found under the known skill roots",
    )
    list_parser.add_argument(
        "--location",
        choices=LOCATION_CHOICES,
        action="append",
        help="Only show skills from this location (can be specified multiple times)",
    )
    list_parser.add_argument(
        "--tag",
        action="append",
        default=[],
        help="Only show skills carrying this metadata tag (can be specified multiple times)",
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        parents=[common],
        help="Show one skill",
        description="Display the full record of a skill",
    )
    show_parser.add_argument("name", help="Name of the skill")
    show_parser.add_argument(
        "--location",
        choices=LOCATION_CHOICES,
        help="Location to pick the skill from when the name exists in both",
    )

    # Search command
    search_parser = subparsers.add_parser(
        "search",
        parents=[common],
        help="Search skills",
        description="Display skills matching a query (supports field:value, AND, OR, NOT)",
    )
    search_parser.add_argument("query", help="Search query")

    # Export command
    export_parser = subparsers.add_parser(
        "export",
        parents=[common],
        help="Export the catalog as JSON",
        description="Write the full skill catalog as a JSON array",
    )
    export_parser.add_argument(
        "--output",
        type=Path,
        help="File to write to (default: stdout)",
    )
    export_parser.add_argument(
        "--no-content",
        action="store_false",
        dest="include_content",
        help="Omit descriptor and script content",
    )

    # Validate command
    subparsers.add_parser(
        "validate",
        parents=[common],
        help="Report load failures",
        description="Scan all roots and report anything that failed to load",
    )

    return parser


def build_catalog(args: argparse.Namespace) -> SkillCatalog:
    """Create a SkillCatalog from the common command-line options."""
    audit_sink = JSONLAuditSink(args.audit_log) if args.audit_log else None
    return SkillCatalog(home=args.home, audit_sink=audit_sink)


def print_skill_summary(skill: Skill) -> None:
    print(f"  {skill.name} [{skill.location.value}]")
    if skill.description:
        print(f"    Description: {skill.description}")
    print(f"    Path: {skill.path}")
    if skill.references:
        print(f"    References: {len(skill.references)}")
    if skill.scripts:
        print(f"    Scripts: {len(skill.scripts)}")
    print()


def cmd_list(args: argparse.Namespace) -> int:
    """Execute the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        skills = build_catalog(args).scan()

        filters = SearchFilters(
            locations=[Location(value) for value in args.location or []],
            tags=args.tag,
        )
        skills = filter_skills(skills, filters=filters)

        if not skills:
            print("No skills found.")
            return 0

        print(f"Found {len(skills)} skill(s):\n")
        for skill in skills:
            print_skill_summary(skill)

        return 0

    except SkillCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_show(args: argparse.Namespace) -> int:
    """Execute the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the skill was not found)
    """
    try:
        skills = build_catalog(args).scan()

        matches = [
            skill for skill in skills
            if skill.name == args.name
            and (args.location is None or skill.location.value == args.location)
        ]

        if not matches:
            print(f"Error: Skill not found: {args.name}", file=sys.stderr)
            print("\nAvailable skills:", file=sys.stderr)
            for skill in skills:
                print(f"  - {skill.name} [{skill.location.value}]", file=sys.stderr)
            return 1

        for skill in matches:
            print(f"{skill.name} [{skill.location.value}]")
            print(f"Path: {skill.path}")
            if skill.description:
                print(f"Description: {skill.description}")
            if skill.metadata is not None:
                print(f"Metadata: {skill.metadata}")

            if skill.references:
                print("\nReferences:")
                for ref in skill.references:
                    print(f"  - {ref.path} ({ref.ref_type.value})")

            if skill.scripts:
                print("\nScripts:")
                for script in skill.scripts:
                    print(f"  - {script.name} ({script.language})")

            print()
            print(skill.content_clean)

        return 0

    except SkillCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_search(args: argparse.Namespace) -> int:
    """Execute the search command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        skills = build_catalog(args).scan()
        matches = filter_skills(skills, query=args.query)

        if not matches:
            print(f"No skills match '{args.query}'.")
            return 0

        print(f"{len(matches)} of {len(skills)} skill(s) match:\n")
        for skill in matches:
            print_skill_summary(skill)

        return 0

    except SkillCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_export(args: argparse.Namespace) -> int:
    """Execute the export command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        skills = build_catalog(args).scan()
        output = CatalogJSONRenderer().render(skills, include_content=args.include_content)

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output + "\n", encoding="utf-8")
            print(f"Wrote {len(skills)} skill(s) to {args.output}")
        else:
            print(output)

        return 0

    except SkillCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Roots that do not exist are reported but not counted as errors.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if everything loaded, 1 otherwise)
    """
    try:
        report = build_catalog(args).scan_report()

        missing = []
        errors = []
        for failure in report.failures:
            if failure.kind == FailureKind.ROOT_UNREADABLE and not Path(failure.path).exists():
                missing.append(failure.path)
                continue
            label = failure.skill or failure.path
            errors.append(f"  ✗ {label}: {failure.kind.value} - {failure.message}")

        print(f"Loaded {len(report.skills)} skill(s) from {len(report.roots)} root(s).")
        for path in missing:
            print(f"  - {path}: not present")
        print()

        if errors:
            print("Validation errors:")
            for error in errors:
                print(error)
            return 1

        print("All skills loaded successfully.")
        return 0

    except SkillCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the skill-catalog command is executed.
    It parses command-line arguments and dispatches to the appropriate
    command handler.
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.command == "list":
        exit_code = cmd_list(args)
    elif args.command == "show":
        exit_code = cmd_show(args)
    elif args.command == "search":
        exit_code = cmd_search(args)
    elif args.command == "export":
        exit_code = cmd_export(args)
    elif args.command == "validate":
        exit_code = cmd_validate(args)
    else:
        parser.print_help()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
