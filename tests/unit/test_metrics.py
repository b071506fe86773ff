"""Unit tests for metrics module."""

import pytest
from prometheus_client import CollectorRegistry

from vidmeta_client.metrics import (
    MetricLabels,
    MetricsCollector,
    NoOpMetrics,
    PrometheusMetrics,
    VidmetaMetrics,
)
from vidmeta_client.mirrors import RankedCandidateResolver


class TestMetricsCollector:
    """Test MetricsCollector abstract base class."""

    def test_is_abstract(self):
        """MetricsCollector cannot be instantiated."""
        with pytest.raises(TypeError):
            MetricsCollector()  # type: ignore


class TestNoOpMetrics:
    """Test NoOpMetrics implementation."""

    def test_noop_calls(self):
        """Every method accepts its arguments and does nothing."""
        metrics = NoOpMetrics()

        metrics.increment("test.metric")
        metrics.increment("test.metric", value=5, labels={"key": "value"})
        metrics.histogram("test.metric", 123.45)
        metrics.gauge("test.metric", -5.0)
        metrics.timing("test.metric", 1.0, labels={"key": "value"})

    def test_is_instance_of_metrics_collector(self):
        assert isinstance(NoOpMetrics(), MetricsCollector)


class TestPrometheusMetrics:
    """Test PrometheusMetrics against an isolated registry."""

    def setup_method(self):
        self.registry = CollectorRegistry()
        self.metrics = PrometheusMetrics(registry=self.registry)

    def test_increment(self):
        self.metrics.increment("test.counter")
        self.metrics.increment("test.counter", value=5)

        assert self.registry.get_sample_value("test_counter_total") == 6

    def test_increment_with_labels(self):
        self.metrics.increment(
            VidmetaMetrics.MIRROR_FAILURE, labels={MetricLabels.ERROR_TYPE: "RemoteQueryFailure"}
        )

        assert self.registry.get_sample_value(
            "vidmeta_mirror_failure_total", {"error_type": "RemoteQueryFailure"}
        ) == 1

    def test_histogram_and_timing(self):
        self.metrics.histogram("test.histogram", 100.0)
        self.metrics.timing("test.histogram", 50.0)

        assert self.registry.get_sample_value("test_histogram_count") == 2
        assert self.registry.get_sample_value("test_histogram_sum") == 150.0

    def test_gauge(self):
        """Positive values increment, negative decrement, zero is a no-op."""
        self.metrics.gauge("test.gauge", 10.0)
        self.metrics.gauge("test.gauge", -4.0)
        self.metrics.gauge("test.gauge", 0.0)

        assert self.registry.get_sample_value("test_gauge") == 6.0

    def test_metric_is_created_once(self):
        self.metrics.increment("test.once")
        self.metrics.increment("test.once")

        assert len(self.metrics._counters) == 1

    def test_sanitize_metric_name(self):
        assert self.metrics._sanitize_metric_name("a.b.c") == "a_b_c"
        assert self.metrics._sanitize_metric_name("a-b.c") == "a_b_c"


@pytest.mark.asyncio
class TestResolverMetrics:
    """Test the counters emitted during mirror resolution."""

    async def test_attempt_success_and_failure_counters(self):
        registry = CollectorRegistry()
        resolver = RankedCandidateResolver(metrics=PrometheusMetrics(registry=registry))

        async def probe(candidate):
            if candidate == "bad":
                raise ConnectionError("down")
            return candidate

        await resolver.resolve(["bad", "good"], probe)

        assert registry.get_sample_value("vidmeta_mirror_attempts_total") == 2
        assert registry.get_sample_value("vidmeta_mirror_success_total") == 1
        assert registry.get_sample_value(
            "vidmeta_mirror_failure_total", {"error_type": "ConnectionError"}
        ) == 1

    async def test_exhaustion_counter(self):
        registry = CollectorRegistry()
        resolver = RankedCandidateResolver(metrics=PrometheusMetrics(registry=registry))

        async def probe(candidate):
            raise RuntimeError(candidate)

        await resolver.resolve(["a"], probe)

        assert registry.get_sample_value("vidmeta_resolution_exhausted_total") == 1


class TestVidmetaMetrics:
    """Test metric name constants."""

    def test_search_metrics(self):
        assert VidmetaMetrics.SEARCH_REQUESTS_TOTAL == "vidmeta.search.requests.total"
        assert VidmetaMetrics.SEARCH_DURATION_MS == "vidmeta.search.duration.milliseconds"

    def test_mirror_metrics(self):
        assert VidmetaMetrics.MIRROR_ATTEMPTS == "vidmeta.mirror.attempts"
        assert (
            VidmetaMetrics.STATIC_FALLBACK_TRIGGERED
            == "vidmeta.directory.static_fallback.triggered"
        )

    def test_labels(self):
        assert MetricLabels.ERROR_TYPE == "error_type"
