"""Command-line interface for ieeeio."""
