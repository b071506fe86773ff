"""
Federated trending resolver.

Main coordinator for trending queries, which the search tool cannot serve:
DISCOVER (directory, or static list) → SHUFFLE → PROBE sequentially.
Exactly one mirror's answer is returned per call.
"""

import random

import httpx

from ..events import VidmetaEvents
from ..exceptions import MirrorDirectoryError, NoMirrorAvailable, RemoteQueryFailure
from ..log_config import SearchRequestContext, get_context_logger
from ..metrics import MetricLabels, MetricsCollector, NoOpMetrics, VidmetaMetrics
from ..parser import RecordParser
from ..routes.helpers import join_base_url
from ..settings import MirrorSettings
from ..types import VideoRecord
from .directory import MirrorDirectory
from .resolver import RankedCandidateResolver


class TrendingResolver:
    """
    Trending-content lookup across federated mirrors.

    Attributes:
        http_client: Shared HTTP client (its timeout bounds every probe)
        directory: Mirror directory used to discover candidates
        resolver: Shuffling sequential resolver

    Examples:
        >>> trending = TrendingResolver(http_client)
        >>> records = await trending.get_trending_music("US")
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: MirrorSettings | None = None,
        directory: MirrorDirectory | None = None,
        parser: RecordParser | None = None,
        rng: random.Random | None = None,
        metrics: MetricsCollector | None = None,
    ):
        self.logger = get_context_logger("vidmeta_trending")
        self.http_client = http_client
        self.settings = settings or MirrorSettings()
        self.metrics = metrics or NoOpMetrics()
        self.directory = directory or MirrorDirectory(self.settings, metrics=self.metrics)
        self.parser = parser or RecordParser()
        self.resolver: RankedCandidateResolver[str, list[VideoRecord]] = RankedCandidateResolver(
            shuffle=True,
            rng=rng,
            metrics=self.metrics,
            name="vidmeta_mirror_resolver",
        )

    async def candidate_mirrors(self) -> list[str]:
        """Healthy mirrors from the directory, or the full static list if that fails."""
        try:
            return await self.directory.list_healthy_mirrors(self.http_client)
        except MirrorDirectoryError as e:
            static = self.directory.static_mirrors
            self.metrics.increment(
                VidmetaMetrics.STATIC_FALLBACK_TRIGGERED,
                labels={MetricLabels.ERROR_TYPE: type(e).__name__},
            )
            self.logger.warning(
                VidmetaEvents.STATIC_FALLBACK_USED,
                reason=str(e),
                static_count=len(static),
            )
            return static

    async def get_trending_music(self, region: str) -> list[VideoRecord]:
        """
        Fetch trending music for a region (ISO 3166 country code).

        Returns:
            Records from the first mirror that answered; may be empty

        Raises:
            NoMirrorAvailable: If every candidate failed, or there were none
        """
        with SearchRequestContext(region=region):
            candidates = await self.candidate_mirrors()

            async def probe(mirror: str) -> list[VideoRecord]:
                return await self.fetch_trending(mirror, region)

            return await self.resolver.resolve_or_raise(
                candidates,
                probe,
                error_cls=NoMirrorAvailable,
                message="Unable to fetch trending music from any mirror",
            )

    async def fetch_trending(self, mirror: str, region: str) -> list[VideoRecord]:
        """
        Query a single mirror.

        Raises:
            RemoteQueryFailure: On transport error, non-200 status or parse failure
        """
        url = join_base_url(mirror, self.settings.trending_path)
        params = {"type": self.settings.trending_type, "region": region}
        try:
            response = await self.http_client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteQueryFailure(f"Transport error: {e}", url=url) from e

        if response.status_code != 200:
            raise RemoteQueryFailure(
                f"HTTP {response.status_code}", url=url, status_code=response.status_code
            )

        records = self.parser.parse_records(response.text)
        if records is None:
            raise RemoteQueryFailure("Unparsable trending response", url=url)
        return records


__all__ = ["TrendingResolver"]
