"""Command-line client for the GitHub REST API."""

__version__ = "0.1.0"
