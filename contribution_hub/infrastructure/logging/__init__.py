"""Logging helpers for the contribution hub."""
