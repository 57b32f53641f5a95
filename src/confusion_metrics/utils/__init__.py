"""Shared logging and settings helpers."""
