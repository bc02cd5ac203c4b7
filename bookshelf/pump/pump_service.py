"""
Pump draining an async source into a sink with retry and backoff.
"""

from typing import Generic, TypeVar

from bookshelf.core.errors import OperationCancelledError
from bookshelf.observability.logger import get_logger
from bookshelf.observability.metrics import MetricsCollector, default_collector

from .cancellation import CancellationToken
from .contracts import AsyncDelay, AsyncReader, AsyncWriter, BackoffPolicy, Clock

T = TypeVar("T")

logger = get_logger(__name__)


class PumpService(Generic[T]):
    """
    Reads items one at a time and writes each to the sink, retrying failures.

    Per item the flow is: write; on failure consult the backoff policy,
    read the clock, wait, and write the same item again, up to
    ``max_retries`` retries. Once retries are exhausted the write error
    propagates and the run stops. Source failures and cancellation are
    never retried. Items already written stay written.
    """

    def __init__(
        self,
        reader: AsyncReader[T],
        writer: AsyncWriter[T],
        clock: Clock,
        delay: AsyncDelay,
        backoff: BackoffPolicy,
        max_retries: int = 3,
        name: str = "pump",
        metrics: MetricsCollector | None = None,
    ):
        """
        Args:
            reader: Item source
            writer: Item sink
            clock: Time source read once per retry
            delay: Suspension primitive used for backoff waits
            backoff: Maps attempt number to delay in seconds
            max_retries: Retries allowed per item after the first attempt
            name: Label used in logs and metrics
            metrics: Metrics collector (defaults to the module collector)

        Raises:
            ValueError: If a collaborator is None or max_retries is negative
        """
        for arg_name, value in (
            ("reader", reader),
            ("writer", writer),
            ("clock", clock),
            ("delay", delay),
            ("backoff", backoff),
        ):
            if value is None:
                raise ValueError(f"{arg_name} must not be None")

        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")

        self._reader = reader
        self._writer = writer
        self._clock = clock
        self._delay = delay
        self._backoff = backoff
        self.max_retries = max_retries
        self.name = name
        self._metrics = metrics or default_collector

    async def run(self, token: CancellationToken | None = None) -> int:
        """
        Drain the source into the sink.

        Args:
            token: Cancellation token checked at every suspension point

        Returns:
            Number of items written

        Raises:
            OperationCancelledError: If the token is cancelled
            Exception: The source error, or the last write error once
                retries are exhausted
        """
        token = token or CancellationToken()
        count = 0
        logger.info("Pump run started", extra={"pump": self.name, "max_retries": self.max_retries})

        try:
            async for item in self._reader.read(token):
                await self._write_with_retry(item, token)
                count += 1
                self._metrics.record_item_written(self.name)
        except OperationCancelledError:
            logger.warning("Pump run cancelled", extra={"pump": self.name, "written": count})
            self._metrics.record_run(self.name, "cancelled")
            raise
        except Exception as e:
            logger.error(
                "Pump run failed",
                extra={"pump": self.name, "written": count, "error_type": type(e).__name__},
            )
            self._metrics.record_run(self.name, "failure")
            raise

        logger.info("Pump run finished", extra={"pump": self.name, "written": count})
        self._metrics.record_run(self.name, "success")
        return count

    async def _write_with_retry(self, item: T, token: CancellationToken) -> None:
        attempt = 0
        while True:
            token.raise_if_cancelled()
            try:
                await self._writer.write(item, token)
                return
            except OperationCancelledError:
                raise
            except Exception as e:
                # cancellation outranks any retry decision
                token.raise_if_cancelled()

                attempt += 1
                if attempt > self.max_retries:
                    logger.error(
                        "Write retries exhausted",
                        extra={"pump": self.name, "attempts": attempt, "error": str(e)},
                    )
                    raise

                seconds = self._backoff.get_delay(attempt)
                self._clock.now()
                logger.warning(
                    "Write failed, retrying",
                    extra={"pump": self.name, "attempt": attempt, "delay_seconds": seconds, "error": str(e)},
                )
                self._metrics.record_write_retry(self.name)

                if seconds > 0:
                    await self._delay.delay(seconds, token)
