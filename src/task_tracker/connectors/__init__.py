"""Presentation connectors (interactive console)."""
