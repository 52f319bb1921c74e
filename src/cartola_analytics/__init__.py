"""Cartola FC team analytics."""

__version__ = "0.1.0"
