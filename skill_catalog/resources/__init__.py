"""Resource module for skill assets."""

from skill_catalog.resources.assets import AssetLoader, script_language

__all__ = ["AssetLoader", "script_language"]
