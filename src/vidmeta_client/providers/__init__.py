"""
Search and suggestion providers.

Main Components:
    - BulkSearchProvider: Protocol for backends returning raw search records
    - YtDlpSearchProvider: Backend running the yt-dlp executable
    - MockSearchProvider: Canned backend for tests and offline use
    - MetadataSearchProvider: Pagination and parsing over a backend
    - SuggestionProvider: Autocomplete endpoint client
"""

from .base import BaseSearchProvider, BulkSearchProvider, MockSearchProvider, RawRecordBatch
from .search import MetadataSearchProvider
from .suggest import SuggestionProvider
from .ytdlp import YtDlpSearchProvider

__all__ = [
    "BulkSearchProvider",
    "BaseSearchProvider",
    "MockSearchProvider",
    "RawRecordBatch",
    "YtDlpSearchProvider",
    "MetadataSearchProvider",
    "SuggestionProvider",
]
