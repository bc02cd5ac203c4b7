"""
Cooperative cancellation token.
"""

import asyncio

from bookshelf.core.errors import OperationCancelledError


class CancellationToken:
    """
    Flag threaded through every suspension point of a pump run.

    Collaborators check it before doing work and abort with
    OperationCancelledError once it is set. Cancelling is idempotent.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError()

    async def wait(self) -> None:
        """Resolve once the token is cancelled."""
        await self._event.wait()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"
