"""Notion task viewer: a Flask relay plus a filtering viewer."""

__version__ = "0.1.0"
