"""Adapters for the real terminal (display surface and key input)."""
