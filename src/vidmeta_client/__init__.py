"""
vidmeta Client Package

Video metadata discovery without the platform's official API.

This package provides:
- Session: Facade binding a query and an HTTP client
- MetadataSearchProvider: Paginated search through the yt-dlp tool
- SuggestionProvider: Autocomplete suggestions
- TrendingResolver: Trending music from federated Invidious mirrors,
  with health-filtered discovery and a static fallback list
- RecordParser: Normalization of both JSON shapes into VideoRecord

Usage:
    from vidmeta_client import Session

    session, first_page = await Session.create("lofi")
    page_two = await session.get_search_query(2)
    trending = await session.get_trending_music("US")
    await session.aclose()
"""

from .exceptions import (
    ExternalToolFailure,
    MirrorDirectoryError,
    MissingQuery,
    NoCandidateSucceeded,
    NoMirrorAvailable,
    RemoteQueryFailure,
    VidmetaConfigError,
    VidmetaException,
)
from .mirrors import (
    STATIC_MIRROR_LIST,
    MirrorDirectory,
    RankedCandidateResolver,
    ResolutionResult,
    TrendingResolver,
)
from .parser import RecordParser, parse_records, parse_subprocess_line
from .providers import (
    BulkSearchProvider,
    MetadataSearchProvider,
    MockSearchProvider,
    RawRecordBatch,
    SuggestionProvider,
    YtDlpSearchProvider,
)
from .session import Session
from .settings import Settings, get_settings, reload_settings
from .types import MirrorInstance, VideoRecord

__version__ = "1.0.0"

__all__ = [
    # Facade
    "Session",
    # Data types
    "VideoRecord",
    "MirrorInstance",
    # Parsing
    "RecordParser",
    "parse_records",
    "parse_subprocess_line",
    # Providers
    "BulkSearchProvider",
    "RawRecordBatch",
    "MockSearchProvider",
    "YtDlpSearchProvider",
    "MetadataSearchProvider",
    "SuggestionProvider",
    # Mirrors
    "STATIC_MIRROR_LIST",
    "MirrorDirectory",
    "RankedCandidateResolver",
    "ResolutionResult",
    "TrendingResolver",
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    # Errors
    "VidmetaException",
    "ExternalToolFailure",
    "RemoteQueryFailure",
    "MirrorDirectoryError",
    "NoCandidateSucceeded",
    "NoMirrorAvailable",
    "MissingQuery",
    "VidmetaConfigError",
    # Package metadata
    "__version__",
]

