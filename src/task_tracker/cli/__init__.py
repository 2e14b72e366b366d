"""Entrypoint, composition root and slash commands."""
