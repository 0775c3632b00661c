# src/tdo/__init__.py

"""Markdown checklist todo manager."""

__version__ = "0.3.0"
