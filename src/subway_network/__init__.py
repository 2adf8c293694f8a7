"""Subway network: section topology and shortest paths across lines."""

__version__ = "0.1.0"
