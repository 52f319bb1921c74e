"""
Exception hierarchy shared by the services, clients and API layer.
"""


class CartolaAnalyticsError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidRequestError(CartolaAnalyticsError):
    """A required identifier or parameter is missing or malformed."""


class TeamNotFoundError(CartolaAnalyticsError):
    """The team has not been imported yet."""

    def __init__(self, team_id: int):
        self.team_id = team_id
        super().__init__(f"Team not found (import first): {team_id}")


class DataSourceError(CartolaAnalyticsError):
    """A store or upstream service failed to answer."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
