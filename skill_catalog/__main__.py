"""Entry point for running skill-catalog as a module.

This allows the package to be executed as:
    python -m skill_catalog

It delegates to the CLI main function.
"""

from skill_catalog.cli.main import main

if __name__ == "__main__":
    main()
