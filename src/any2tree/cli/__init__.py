"""Command-line interface for any2tree."""
