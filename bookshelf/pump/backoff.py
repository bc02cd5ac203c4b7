"""
Backoff policies for sink write retries.

All delays are in seconds.
"""

from .contracts import BackoffPolicy


class ExponentialBackoffPolicy(BackoffPolicy):
    """Delay doubles per attempt: ``min(base_delay * 2**(attempt - 1), max_delay)``."""

    def __init__(self, base_delay: float = 0.05, max_delay: float = 2.0):
        if base_delay < 0 or max_delay < 0:
            raise ValueError("base_delay and max_delay must be non-negative")

        self.base_delay = base_delay
        self.max_delay = max_delay

    def get_delay(self, attempt: int) -> float:
        if attempt <= 0:
            return 0.0

        # cap the exponent so huge attempt numbers cannot overflow the float
        exponent = min(attempt - 1, 1023)
        return min(self.base_delay * 2.0 ** exponent, self.max_delay)

    def __repr__(self) -> str:
        return f"ExponentialBackoffPolicy(base_delay={self.base_delay}, max_delay={self.max_delay})"


class LinearBackoffPolicy(BackoffPolicy):
    """Delay grows by a fixed step: ``min(step * attempt, max_delay)``."""

    def __init__(self, step: float = 0.05, max_delay: float = 1.0):
        if step < 0 or max_delay < 0:
            raise ValueError("step and max_delay must be non-negative")

        self.step = step
        self.max_delay = max_delay

    def get_delay(self, attempt: int) -> float:
        if attempt <= 0:
            return 0.0

        return min(self.step * attempt, self.max_delay)

    def __repr__(self) -> str:
        return f"LinearBackoffPolicy(step={self.step}, max_delay={self.max_delay})"


BACKOFF_REGISTRY = {
    "exponential": ExponentialBackoffPolicy,
    "linear": LinearBackoffPolicy,
}


def create_backoff_policy(kind: str, base_delay: float, max_delay: float) -> BackoffPolicy:
    """
    Build a backoff policy by name.

    Args:
        kind: "exponential" or "linear"
        base_delay: Base delay (exponential) or step (linear)
        max_delay: Upper bound for any delay

    Raises:
        ValueError: If kind is unknown
    """
    policy_class = BACKOFF_REGISTRY.get(kind.lower())
    if policy_class is None:
        raise ValueError(f"Unknown backoff policy: {kind}")

    return policy_class(base_delay, max_delay)
