"""Contrib add-ons for FastAPI applications: string localization and membership contracts."""

__version__ = "0.1.0"
