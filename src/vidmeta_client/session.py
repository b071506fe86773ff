"""Session facade binding a query and an HTTP client to the providers."""

import random

import httpx

from .events import VidmetaEvents
from .exceptions import MissingQuery
from .http_client_manager import create_http_client
from .log_config import SearchRequestContext, get_context_logger
from .metrics import MetricsCollector, NoOpMetrics
from .mirrors import MirrorDirectory, TrendingResolver
from .parser import RecordParser
from .providers import (
    BulkSearchProvider,
    MetadataSearchProvider,
    SuggestionProvider,
    YtDlpSearchProvider,
)
from .settings import Settings, get_settings
from .types import VideoRecord


SUBPROCESS_SOURCE_LABEL = "yt-dlp"


class Session:
    """
    Facade for searching, suggesting and fetching trending videos.

    A session is immutable once built. Create one with:
    - ``await Session.create(query)`` - runs page 1 and binds the query
    - ``Session.default()`` - unbound session for suggestions/trending only

    Examples:
        >>> session, first_page = await Session.create("lofi")
        >>> second_page = await session.get_search_query(2)
        >>> trending = await session.get_trending_music("US")
        >>> await session.aclose()

        As a context manager:
        >>> async with Session.default() as session:
        ...     suggestions = await session.get_suggestions("never gonna")
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        query: str | None = None,
        source_label: str | None = None,
        *,
        settings: Settings | None = None,
        search_provider: BulkSearchProvider | None = None,
        metrics: MetricsCollector | None = None,
        rng: random.Random | None = None,
        owns_client: bool = False,
    ):
        """
        Build a session from explicit dependencies.

        Args:
            client: HTTP client shared by suggestion and trending calls
            query: Search query bound for pagination
            source_label: Backend that served creation
            settings: Settings (global cached settings if None)
            search_provider: Bulk search backend (yt-dlp if None)
            metrics: Metrics collector (no-op if None)
            rng: Random source for mirror shuffling
            owns_client: Close ``client`` in aclose()
        """
        self.logger = get_context_logger("vidmeta_session")
        self._client = client
        self._query = query
        self._source_label = source_label
        self._owns_client = owns_client
        self.settings = settings or get_settings()
        self.metrics = metrics or NoOpMetrics()

        parser = RecordParser()
        self.searcher = MetadataSearchProvider(
            search_provider or YtDlpSearchProvider.from_settings(self.settings.search),
            page_size=self.settings.search.page_size,
            parser=parser,
            metrics=self.metrics,
        )
        self.suggester = SuggestionProvider(
            client, self.settings.suggest, parser=parser, metrics=self.metrics
        )
        self.trending = TrendingResolver(
            client,
            self.settings.mirrors,
            directory=MirrorDirectory(self.settings.mirrors, metrics=self.metrics),
            parser=parser,
            rng=rng,
            metrics=self.metrics,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def query(self) -> str | None:
        return self._query

    @property
    def source_label(self) -> str | None:
        return self._source_label

    @classmethod
    async def create(
        cls,
        query: str,
        *,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
        search_provider: BulkSearchProvider | None = None,
        metrics: MetricsCollector | None = None,
        rng: random.Random | None = None,
    ) -> tuple["Session", list[VideoRecord]]:
        """
        Search for ``query`` and bind it to a new session.

        The first page is fetched before any HTTP client is built, so a
        failing search tool leaves nothing to clean up.

        Args:
            query: Search query
            client: HTTP client to reuse (a new one is created and owned if None)

        Returns:
            (session, first page of records)

        Raises:
            ExternalToolFailure: If the first search fails
        """
        settings = settings or get_settings()
        provider = search_provider or YtDlpSearchProvider.from_settings(settings.search)

        with SearchRequestContext(query=query):
            first_page = await MetadataSearchProvider(
                provider,
                page_size=settings.search.page_size,
                metrics=metrics,
            ).search(query, 1)

        owns_client = client is None
        session = cls(
            client or create_http_client(settings),
            query=query,
            source_label=SUBPROCESS_SOURCE_LABEL,
            settings=settings,
            search_provider=provider,
            metrics=metrics,
            rng=rng,
            owns_client=owns_client,
        )
        session.logger.info(
            VidmetaEvents.SESSION_CREATED,
            source_label=SUBPROCESS_SOURCE_LABEL,
            first_page_count=len(first_page),
        )
        return session, first_page

    @classmethod
    def default(
        cls,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> "Session":
        """Session with no bound query and no source label."""
        settings = settings or get_settings()
        return cls(
            client or create_http_client(settings),
            settings=settings,
            owns_client=client is None,
        )

    async def get_search_query(self, page: int) -> list[VideoRecord]:
        """
        Fetch another page of the bound query.

        Raises:
            MissingQuery: If the session has no query
            ExternalToolFailure: If the search tool fails
        """
        if self._query is None:
            raise MissingQuery("No query string bound to this session")
        with SearchRequestContext(query=self._query):
            return await self.searcher.search(self._query, page)

    async def get_suggestions(self, prefix: str) -> list[VideoRecord]:
        """
        Autocomplete-style suggestions for ``prefix``.

        Raises:
            RemoteQueryFailure: If the endpoint fails or answers garbage
        """
        return await self.suggester.suggest(prefix)

    async def get_trending_music(self, region: str) -> list[VideoRecord]:
        """
        Trending music for ``region`` from the first mirror that answers.

        Raises:
            NoMirrorAvailable: If no mirror answered
        """
        return await self.trending.get_trending_music(region)

    async def aclose(self) -> None:
        """Close the HTTP client if this session created it."""
        if self._owns_client:
            await self._client.aclose()
            self.logger.debug(VidmetaEvents.SESSION_CLOSED)

    async def __aenter__(self) -> "Session":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


__all__ = ["Session", "SUBPROCESS_SOURCE_LABEL"]
