"""
Prometheus metrics collector implementation.

Integrates with prometheus_client for exporting metrics to Prometheus.
"""

from typing import Any

from prometheus_client import REGISTRY, Counter, Gauge, Histogram

from .base import MetricsCollector


class PrometheusMetrics(MetricsCollector):
    """
    Prometheus metrics collector.

    Counters, histograms and gauges are created lazily on first use and
    cached by sanitized name. Label names are fixed by the first call.

    Example:
        >>> from prometheus_client import CollectorRegistry
        >>> metrics = PrometheusMetrics(registry=CollectorRegistry())
        >>> metrics.increment('vidmeta.mirror.failure', labels={'error_type': 'RemoteQueryFailure'})
    """

    def __init__(self, registry: Any | None = None) -> None:
        """
        Initialize Prometheus metrics collector.

        Args:
            registry: Optional prometheus_client CollectorRegistry.
                     If None, uses the default REGISTRY.
        """
        self._registry = registry or REGISTRY

        self._counters: dict[str, Any] = {}
        self._histograms: dict[str, Any] = {}
        self._gauges: dict[str, Any] = {}

    def _sanitize_metric_name(self, metric: str) -> str:
        """Convert dots and dashes to underscores for Prometheus naming."""
        return metric.replace(".", "_").replace("-", "_")

    def increment(
        self, metric: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        metric_name = self._sanitize_metric_name(metric)
        labels = labels or {}

        if metric_name not in self._counters:
            self._counters[metric_name] = Counter(
                metric_name,
                f"Counter for {metric}",
                list(labels.keys()),
                registry=self._registry,
            )

        if labels:
            self._counters[metric_name].labels(**labels).inc(value)
        else:
            self._counters[metric_name].inc(value)

    def histogram(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        metric_name = self._sanitize_metric_name(metric)
        labels = labels or {}

        if metric_name not in self._histograms:
            self._histograms[metric_name] = Histogram(
                metric_name,
                f"Histogram for {metric}",
                list(labels.keys()),
                registry=self._registry,
            )

        if labels:
            self._histograms[metric_name].labels(**labels).observe(value)
        else:
            self._histograms[metric_name].observe(value)

    def gauge(
        self, metric: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        """
        Adjust a gauge value.

        Positive values increment, negative values decrement, zero is a no-op.
        """
        metric_name = self._sanitize_metric_name(metric)
        labels = labels or {}

        if metric_name not in self._gauges:
            self._gauges[metric_name] = Gauge(
                metric_name,
                f"Gauge for {metric}",
                list(labels.keys()),
                registry=self._registry,
            )

        target = self._gauges[metric_name].labels(**labels) if labels else self._gauges[metric_name]
        if value > 0:
            target.inc(value)
        elif value < 0:
            target.dec(abs(value))


__all__ = ["PrometheusMetrics"]
