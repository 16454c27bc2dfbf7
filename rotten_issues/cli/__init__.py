"""Command line interface for rotten-issues."""
