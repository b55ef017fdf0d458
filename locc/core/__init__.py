"""Process-level setup shared by the CLI."""
