"""
Metrics collection module for vidmeta client.

Provides pluggable metrics interfaces for monitoring search and mirror
resolution, with a zero-overhead default.

Example:
    >>> from vidmeta_client.metrics import NoOpMetrics, PrometheusMetrics
    >>>
    >>> metrics = NoOpMetrics()
    >>> metrics.increment('vidmeta.mirror.attempts')  # No-op
    >>>
    >>> metrics = PrometheusMetrics()
    >>> metrics.increment('vidmeta.mirror.failure', labels={'error_type': 'RemoteQueryFailure'})
    >>> metrics.histogram('vidmeta.search.duration.milliseconds', 812.5)
"""

from .base import MetricsCollector, NoOpMetrics
from .constants import MetricLabels, VidmetaMetrics
from .prometheus import PrometheusMetrics

__all__ = [
    "MetricsCollector",
    "NoOpMetrics",
    "PrometheusMetrics",
    "VidmetaMetrics",
    "MetricLabels",
]
