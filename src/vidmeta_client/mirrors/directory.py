"""
Mirror Directory

Fetches the list of known Invidious instances from the directory endpoint
and keeps only API-capable instances above the health threshold. The
static list is exposed here but never substituted implicitly; callers
decide when to fall back to it.
"""

import json
from typing import Any

import httpx

from ..events import VidmetaEvents
from ..exceptions import MirrorDirectoryError
from ..log_config import get_context_logger
from ..metrics import MetricsCollector, NoOpMetrics, VidmetaMetrics
from ..settings import DEFAULT_STATIC_INSTANCES, MirrorSettings
from ..types import MirrorInstance


STATIC_MIRROR_LIST: tuple[str, ...] = DEFAULT_STATIC_INSTANCES


class MirrorDirectory:
    """
    Client for the mirror directory endpoint.

    Each directory entry is a ``[name, details]`` pair. An entry is kept
    only if ``details["api"]`` is true and
    ``details["monitor"]["30dRatio"]["ratio"]``, parsed as a float, is
    strictly above the health threshold. Anything malformed is dropped.

    Examples:
        >>> directory = MirrorDirectory()
        >>> directory.parse_instance(
        ...     ["a", {"api": True, "uri": "https://m1",
        ...            "monitor": {"30dRatio": {"ratio": "99.2"}}}]
        ... )
        MirrorInstance(uri='https://m1', health_ratio=99.2)
    """

    def __init__(
        self,
        settings: MirrorSettings | None = None,
        metrics: MetricsCollector | None = None,
    ):
        self.logger = get_context_logger("vidmeta_mirror_directory")
        self.settings = settings or MirrorSettings()
        self.metrics = metrics or NoOpMetrics()

    @property
    def health_threshold(self) -> float:
        return self.settings.health_threshold

    @property
    def static_mirrors(self) -> list[str]:
        """The hardcoded fallback list, in configured order."""
        return list(self.settings.static_instances)

    async def list_healthy_mirrors(self, http_client: httpx.AsyncClient) -> list[str]:
        """
        Fetch base URLs of healthy mirrors.

        Returns:
            Non-empty list of base URLs, in directory order

        Raises:
            MirrorDirectoryError: On transport/status/parse failure or if no
                instance passes the filter
        """
        return [instance.uri for instance in await self.list_instances(http_client)]

    async def list_instances(self, http_client: httpx.AsyncClient) -> list[MirrorInstance]:
        """
        Fetch healthy mirrors with their health ratio.

        Raises:
            MirrorDirectoryError: Same conditions as list_healthy_mirrors
        """
        url = self.settings.directory_url
        try:
            response = await http_client.get(
                url, params={"sort_by": self.settings.directory_sort}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._record_failure("transport", error=str(e))
            raise MirrorDirectoryError(f"Directory request failed: {e}", url=url) from e

        if response.status_code != 200:
            self._record_failure("http_status", status_code=response.status_code)
            raise MirrorDirectoryError(
                "Directory returned an error", url=url, status_code=response.status_code
            )

        instances = self.parse_instance_list(response.text)
        if not instances:
            self._record_failure("empty")
            raise MirrorDirectoryError("No healthy instance in directory", url=url)

        self.metrics.increment(VidmetaMetrics.DIRECTORY_FETCH_SUCCESS)
        self.logger.info(VidmetaEvents.DIRECTORY_FETCHED, instance_count=len(instances))
        return instances

    def parse_instance_list(self, raw: str | bytes) -> list[MirrorInstance] | None:
        """
        Decode a directory document and filter it.

        Returns:
            Healthy instances, or None if the document is malformed or no
            instance qualifies
        """
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            return None
        if not isinstance(value, list):
            return None

        instances = [
            instance
            for instance in (self.parse_instance(entry) for entry in value)
            if instance is not None
        ]
        return instances or None

    def parse_instance(self, entry: Any) -> MirrorInstance | None:
        """Decode one ``[name, details]`` entry; None unless healthy and API-capable."""
        if not isinstance(entry, (list, tuple)) or len(entry) < 2:
            return None
        details = entry[1]
        if not isinstance(details, dict) or details.get("api") is not True:
            return None

        uri = details.get("uri")
        if not isinstance(uri, str) or not uri:
            return None

        try:
            ratio = details["monitor"]["30dRatio"]["ratio"]
        except (KeyError, TypeError):
            return None
        if not isinstance(ratio, str):
            return None
        try:
            health = float(ratio)
        except ValueError:
            return None

        # NaN compares false, so it is excluded here too
        if not health > self.health_threshold:
            return None
        return MirrorInstance(uri=uri, health_ratio=health)

    def _record_failure(self, reason: str, **fields) -> None:
        self.metrics.increment(VidmetaMetrics.DIRECTORY_FETCH_FAILURE)
        self.logger.warning(VidmetaEvents.DIRECTORY_FAILED, reason=reason, **fields)


__all__ = ["STATIC_MIRROR_LIST", "MirrorDirectory"]
