"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why the last refresh of a view failed, with the HTTP status if there was one."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str
    message: str | None = None
