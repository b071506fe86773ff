"""
Ranked Candidate Resolver

Tries candidates one at a time until a probe succeeds. Used for mirror
fallback, but independent of mirrors: a candidate is any value and a probe
is any coroutine function that either returns a result or raises.
"""

import random
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..events import VidmetaEvents
from ..exceptions import NoCandidateSucceeded
from ..log_config import get_context_logger
from ..metrics import MetricLabels, MetricsCollector, NoOpMetrics, VidmetaMetrics


T = TypeVar("T")
R = TypeVar("R")


@dataclass
class ResolutionAttempt:
    """
    A failed probe.

    Attributes:
        candidate: The candidate that was probed
        error: Error message
        error_type: Exception class name
    """

    candidate: Any
    error: str
    error_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "candidate": str(self.candidate),
            "error": self.error,
            "error_type": self.error_type,
        }


@dataclass
class ResolutionResult(Generic[R]):
    """
    Result of a ranked resolution.

    Attributes:
        success: Whether some candidate answered
        value: The winning probe's return value
        candidate: The candidate that answered
        attempts: Failed probes, in the order they were tried
        metadata: Timing and counts

    Examples:
        Successful resolution after one failure:
        >>> result = ResolutionResult(
        ...     success=True,
        ...     value=[...],
        ...     candidate="https://m2",
        ...     attempts=[ResolutionAttempt("https://m1", "HTTP 503", "RemoteQueryFailure")],
        ... )
    """

    success: bool = False
    value: R | None = None
    candidate: Any = None
    attempts: list[ResolutionAttempt] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


class RankedCandidateResolver(Generic[T, R]):
    """
    Sequential first-success resolver.

    Candidates are optionally shuffled, then probed strictly in order; the
    next candidate is only probed after the previous one failed. One pass,
    no retries. An empty candidate list resolves to an unsuccessful result
    with no attempts.

    Examples:
        >>> resolver = RankedCandidateResolver(shuffle=True)
        >>> result = await resolver.resolve(["https://m1", "https://m2"], probe)
        >>> value = await resolver.resolve_or_raise(["https://m1"], probe)
    """

    def __init__(
        self,
        shuffle: bool = False,
        rng: random.Random | None = None,
        metrics: MetricsCollector | None = None,
        name: str = "ranked_resolver",
    ):
        """
        Initialize the resolver.

        Args:
            shuffle: Uniformly shuffle candidates before probing
            rng: Random source for shuffling (module-level random if None)
            metrics: Metrics collector for per-attempt counters
            name: Logger name
        """
        self.logger = get_context_logger(name)
        self.shuffle = shuffle
        self.rng = rng or random.Random()
        self.metrics = metrics or NoOpMetrics()

    def order(self, candidates: Sequence[T]) -> list[T]:
        """Return the candidates in the order they will be probed."""
        ordered = list(candidates)
        if self.shuffle:
            self.rng.shuffle(ordered)
        return ordered

    async def resolve(
        self,
        candidates: Sequence[T],
        probe: Callable[[T], Awaitable[R]],
    ) -> ResolutionResult[R]:
        """
        Probe candidates until one succeeds.

        Args:
            candidates: Candidates to try
            probe: Coroutine function; returning means success, raising means skip

        Returns:
            ResolutionResult: The first success, or every failure
        """
        ordered = self.order(candidates)
        self.logger.debug(VidmetaEvents.RESOLUTION_STARTED, candidate_count=len(ordered))
        start_time = time.perf_counter()

        attempts: list[ResolutionAttempt] = []
        for candidate in ordered:
            self.metrics.increment(VidmetaMetrics.MIRROR_ATTEMPTS)
            self.logger.debug(
                VidmetaEvents.MIRROR_ATTEMPT,
                candidate=str(candidate),
                attempt=len(attempts) + 1,
            )
            try:
                value = await probe(candidate)
            except Exception as e:
                attempts.append(
                    ResolutionAttempt(candidate, str(e), type(e).__name__)
                )
                self.metrics.increment(
                    VidmetaMetrics.MIRROR_FAILURE,
                    labels={MetricLabels.ERROR_TYPE: type(e).__name__},
                )
                self.logger.warning(
                    VidmetaEvents.MIRROR_ATTEMPT_FAILED,
                    candidate=str(candidate),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            self.metrics.increment(VidmetaMetrics.MIRROR_SUCCESS)
            self.metrics.timing(VidmetaMetrics.RESOLUTION_DURATION_MS, elapsed_ms)
            self.logger.info(
                VidmetaEvents.RESOLUTION_SUCCESS,
                candidate=str(candidate),
                failed_before=len(attempts),
            )
            return ResolutionResult(
                success=True,
                value=value,
                candidate=candidate,
                attempts=attempts,
                metadata={"elapsed_ms": elapsed_ms, "candidate_count": len(ordered)},
            )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self.metrics.increment(VidmetaMetrics.RESOLUTION_EXHAUSTED)
        self.logger.error(
            VidmetaEvents.RESOLUTION_EXHAUSTED,
            candidate_count=len(ordered),
            errors=[a.to_dict() for a in attempts],
        )
        return ResolutionResult(
            success=False,
            attempts=attempts,
            metadata={"elapsed_ms": elapsed_ms, "candidate_count": len(ordered)},
        )

    async def resolve_or_raise(
        self,
        candidates: Sequence[T],
        probe: Callable[[T], Awaitable[R]],
        error_cls: type[NoCandidateSucceeded] = NoCandidateSucceeded,
        message: str = "No candidate succeeded",
    ) -> R:
        """
        Probe candidates and return the winning value.

        Raises:
            NoCandidateSucceeded: (or ``error_cls``) if every candidate failed
        """
        result = await self.resolve(candidates, probe)
        if not result.success:
            raise error_cls(message, attempts=[a.to_dict() for a in result.attempts])
        return result.value


__all__ = [
    "ResolutionAttempt",
    "ResolutionResult",
    "RankedCandidateResolver",
]
