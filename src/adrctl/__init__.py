"""adrctl — Architecture Decision Record control CLI."""

__version__ = "0.1.0"
