"""Therapy session scheduling dashboard: REST API and headless client."""

__version__ = "0.1.0"
