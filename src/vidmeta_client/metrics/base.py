"""
Abstract base class for metrics collection.

Backends plug in behind this interface; the no-op implementation is the
default everywhere a collector is optional.
"""

from abc import ABC, abstractmethod


class MetricsCollector(ABC):
    """
    Abstract base class for metrics collection.

    Implementations must be safe to call from concurrent tasks.
    """

    @abstractmethod
    def increment(
        self, metric: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        """
        Increment a counter metric.

        Args:
            metric: Metric name (e.g., 'vidmeta.mirror.attempts')
            value: Amount to increment (default: 1)
            labels: Optional labels/tags (e.g., {'result': 'success'})
        """
        pass

    @abstractmethod
    def histogram(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        """
        Record a histogram/timing metric.

        Args:
            metric: Metric name (e.g., 'vidmeta.search.duration.milliseconds')
            value: Value to record
            labels: Optional labels/tags
        """
        pass

    @abstractmethod
    def gauge(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        """
        Adjust a gauge metric.

        Args:
            metric: Metric name
            value: Positive to increment, negative to decrement
            labels: Optional labels/tags
        """
        pass

    def timing(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        """Record a duration in milliseconds (wrapper for histogram)."""
        self.histogram(metric, value, labels)


class NoOpMetrics(MetricsCollector):
    """No-operation metrics collector."""

    def increment(
        self, metric: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def histogram(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def gauge(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


__all__ = ["MetricsCollector", "NoOpMetrics"]
