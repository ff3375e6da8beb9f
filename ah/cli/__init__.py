"""CLI entry point and fatal error reporting."""
