"""Streamlit portal adapter."""

__all__: list[str] = []
