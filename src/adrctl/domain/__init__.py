"""Domain layer — status vocabulary, parsing and rewriting of ADR documents.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
