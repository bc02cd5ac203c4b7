"""
Logging and metrics for the catalog and pump.
"""

from .logger import get_logger, log_operation, setup_logger
from .metrics import MetricsCollector

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "MetricsCollector",
]
