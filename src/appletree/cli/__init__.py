"""Command-line interface for appletree."""
