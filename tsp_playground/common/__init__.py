"""Shared constants, configuration and logging helpers."""
