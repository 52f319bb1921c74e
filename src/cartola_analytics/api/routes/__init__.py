"""API route handlers."""

from cartola_analytics.api.routes import dashboard, drilldown, teams, viz

__all__ = [
    "dashboard",
    "drilldown",
    "teams",
    "viz",
]
