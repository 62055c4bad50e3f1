"""Contribution Hub: membership contribution tracking portal."""

__all__: list[str] = []
