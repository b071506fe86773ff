"""Autocomplete suggestions from a third-party endpoint."""

import httpx

from ..events import VidmetaEvents
from ..exceptions import RemoteQueryFailure
from ..log_config import get_context_logger
from ..metrics import MetricsCollector, NoOpMetrics, VidmetaMetrics
from ..parser import RecordParser
from ..settings import SuggestSettings
from ..types import VideoRecord


class SuggestionProvider:
    """
    Single-shot autocomplete query.

    The prefix is sent as an encoded query parameter. Any transport error,
    non-200 status or unparsable body fails the call; there is no retry.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: SuggestSettings | None = None,
        parser: RecordParser | None = None,
        metrics: MetricsCollector | None = None,
    ):
        self.logger = get_context_logger("vidmeta_suggest")
        self.http_client = http_client
        self.settings = settings or SuggestSettings()
        self.parser = parser or RecordParser()
        self.metrics = metrics or NoOpMetrics()

    async def suggest(self, prefix: str) -> list[VideoRecord]:
        """
        Fetch suggestions for ``prefix``.

        Raises:
            RemoteQueryFailure: On transport error, non-200 status or parse failure
        """
        url = self.settings.url
        params = {"client": self.settings.client, "ds": self.settings.ds, "q": prefix}
        self.metrics.increment(VidmetaMetrics.SUGGEST_REQUESTS_TOTAL)
        self.logger.debug(VidmetaEvents.SUGGEST_STARTED, prefix_length=len(prefix))

        try:
            response = await self.http_client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._record_failure("transport", error=str(e))
            raise RemoteQueryFailure(f"Suggestion request failed: {e}", url=url) from e

        if response.status_code != 200:
            self._record_failure("http_status", status_code=response.status_code)
            raise RemoteQueryFailure(
                "Suggestion endpoint returned an error",
                url=url,
                status_code=response.status_code,
            )

        records = self.parser.parse_records(response.text)
        if records is None:
            self._record_failure("parse")
            raise RemoteQueryFailure("Unparsable suggestion response", url=url)

        self.logger.info(VidmetaEvents.SUGGEST_SUCCESS, count=len(records))
        return records

    def _record_failure(self, reason: str, **fields) -> None:
        self.metrics.increment(VidmetaMetrics.SUGGEST_REQUESTS_FAILURE)
        self.logger.warning(VidmetaEvents.SUGGEST_FAILED, reason=reason, **fields)


__all__ = ["SuggestionProvider"]
