"""Error handling helpers for CLI commands."""
