"""Command implementations for the coach CLI."""
