"""Protocol for periodic refresh pollers."""

from typing import Protocol


class PollerProtocol(Protocol):
    """Protocol for a timer that refreshes one view's snapshot."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller. In-flight fetches are not aborted."""
        ...
