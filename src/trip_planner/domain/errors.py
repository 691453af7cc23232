"""Domain errors."""


class ApiError(Exception):
    """The upstream transit API could not be used (unreachable, rejected, or no key)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize with a message and the HTTP status code, if any."""
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            return f"{message} ({self.status_code})"
        return message


class NoTripsFoundError(Exception):
    """Every trip query came back empty or failed."""
