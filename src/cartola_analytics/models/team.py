"""
Team search models.
"""

from pydantic import BaseModel


class TeamSearchResult(BaseModel):
    """A fantasy team returned by the Cartola team search."""

    id: int | None = None
    slug: str
    name: str
    cartoleiro: str | None = None
    badge_url: str | None = None
