"""Rendering module for catalog output formats."""

from skill_catalog.rendering.json_renderer import CatalogJSONRenderer

__all__ = ["CatalogJSONRenderer"]
