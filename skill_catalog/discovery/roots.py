"""Well-known skill root directories."""

from pathlib import Path

from skill_catalog.models import Location

ROOT_PATHS: dict[Location, tuple[str, ...]] = {
    Location.CLAUDE: (".claude", "skills"),
    Location.OPENCODE: (".config", "opencode", "skills"),
}


class RootResolver:
    """Computes the skill roots to scan, relative to a home directory."""

    def __init__(self, home: Path | None = None):
        """Initialize the resolver.

        Args:
            home: Home directory override. If None, the current user's home
                  directory is looked up when roots are resolved.
        """
        self._home = Path(home) if home is not None else None

    def home(self) -> Path | None:
        """Return the home directory, or None if it cannot be determined."""
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return None

    def resolve(self) -> list[tuple[Location, Path]]:
        """Return (location, root path) pairs in Location order.

        Existence of the roots is not checked here. If the home directory
        is unknown, no roots are returned.
        """
        home = self.home()
        if home is None:
            return []
        return [(location, home.joinpath(*ROOT_PATHS[location])) for location in Location]
