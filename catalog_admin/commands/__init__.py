"""Command implementations for the catalog admin CLI."""
