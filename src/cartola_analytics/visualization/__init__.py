"""Plotly chart rendering."""
