"""Command-line interface for the skill catalog."""
