"""Publish a GitHub release from package.json and a changelog."""

__version__ = "0.1.0"
