"""Core configuration, path and theme helpers."""
