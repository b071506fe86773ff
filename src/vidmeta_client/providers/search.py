"""Paginated metadata search on top of a bulk search provider."""

import time

from ..events import VidmetaEvents
from ..exceptions import ExternalToolFailure
from ..log_config import get_context_logger
from ..metrics import MetricsCollector, NoOpMetrics, VidmetaMetrics
from ..parser import RecordParser
from ..types import VideoRecord
from .base import BulkSearchProvider


class MetadataSearchProvider:
    """
    Page-oriented search over a provider that has no native pagination.

    Page ``p`` is produced by requesting ``p * page_size`` results and
    dropping the first ``(p - 1) * page_size``. Running out of results is
    not an error: a page past the end is empty.

    Examples:
        >>> search = MetadataSearchProvider(YtDlpSearchProvider())
        >>> records = await search.search("lofi", page=2)
    """

    def __init__(
        self,
        provider: BulkSearchProvider,
        page_size: int = 20,
        parser: RecordParser | None = None,
        metrics: MetricsCollector | None = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.logger = get_context_logger("vidmeta_search")
        self.provider = provider
        self.page_size = page_size
        self.parser = parser or RecordParser()
        self.metrics = metrics or NoOpMetrics()

    async def search(self, query: str, page: int = 1) -> list[VideoRecord]:
        """
        Return one page of results for ``query``.

        Args:
            query: Free-text search query
            page: 1-based page number

        Returns:
            Up to ``page_size`` records, in the provider's order

        Raises:
            ValueError: If page is less than 1
            ExternalToolFailure: If the provider could not run
        """
        if page < 1:
            raise ValueError("page must be at least 1")

        total_results = page * self.page_size
        self.logger.info(
            VidmetaEvents.SEARCH_STARTED, page=page, total_results=total_results
        )
        self.metrics.increment(VidmetaMetrics.SEARCH_REQUESTS_TOTAL)
        start_time = time.perf_counter()

        try:
            batch = await self.provider.fetch_raw(query, total_results)
        except ExternalToolFailure as e:
            self.metrics.increment(VidmetaMetrics.SEARCH_REQUESTS_FAILURE)
            self.logger.error(VidmetaEvents.SEARCH_FAILED, page=page, error=str(e))
            raise

        records = self.parser.parse_subprocess_output(batch)
        if batch.skipped:
            self.metrics.increment(VidmetaMetrics.SEARCH_LINES_SKIPPED, batch.skipped)

        start_idx = (page - 1) * self.page_size
        page_records = records[start_idx:start_idx + self.page_size]

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self.metrics.timing(VidmetaMetrics.SEARCH_DURATION_MS, elapsed_ms)
        self.logger.info(
            VidmetaEvents.SEARCH_SUCCESS,
            page=page,
            parsed=len(records),
            returned=len(page_records),
            elapsed_ms=round(elapsed_ms, 1),
        )
        return page_records


__all__ = ["MetadataSearchProvider"]
