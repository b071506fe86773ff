"""Metric name constants for vidmeta client operations."""


class VidmetaMetrics:
    """Metric name constants."""

    # Bulk search
    SEARCH_REQUESTS_TOTAL = "vidmeta.search.requests.total"
    SEARCH_REQUESTS_FAILURE = "vidmeta.search.requests.failure"
    SEARCH_DURATION_MS = "vidmeta.search.duration.milliseconds"
    SEARCH_LINES_SKIPPED = "vidmeta.search.lines.skipped"

    # Suggestions
    SUGGEST_REQUESTS_TOTAL = "vidmeta.suggest.requests.total"
    SUGGEST_REQUESTS_FAILURE = "vidmeta.suggest.requests.failure"

    # Mirror directory
    DIRECTORY_FETCH_SUCCESS = "vidmeta.directory.fetch.success"
    DIRECTORY_FETCH_FAILURE = "vidmeta.directory.fetch.failure"
    STATIC_FALLBACK_TRIGGERED = "vidmeta.directory.static_fallback.triggered"

    # Mirror resolution
    MIRROR_ATTEMPTS = "vidmeta.mirror.attempts"
    MIRROR_SUCCESS = "vidmeta.mirror.success"
    MIRROR_FAILURE = "vidmeta.mirror.failure"
    RESOLUTION_EXHAUSTED = "vidmeta.resolution.exhausted"
    RESOLUTION_DURATION_MS = "vidmeta.resolution.duration.milliseconds"


class MetricLabels:
    """Standard label names for metrics."""

    ERROR_TYPE = "error_type"  # Exception class name


__all__ = ["VidmetaMetrics", "MetricLabels"]
