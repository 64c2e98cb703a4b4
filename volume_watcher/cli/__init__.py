"""Command-line helpers shared by the entry point."""
