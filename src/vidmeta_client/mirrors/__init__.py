"""
Federated Mirror Package

Discovery and fallback resolution across community-run Invidious mirrors.

Main Components:
    - MirrorDirectory: Fetch and health-filter the instance directory
    - RankedCandidateResolver: Generic shuffle-then-scan first-success resolver
    - TrendingResolver: Trending queries (DISCOVER → SHUFFLE → PROBE)

Usage:
    >>> from vidmeta_client.mirrors import TrendingResolver
    >>> trending = TrendingResolver(http_client)
    >>> records = await trending.get_trending_music("DE")
"""

from .directory import STATIC_MIRROR_LIST, MirrorDirectory
from .resolver import RankedCandidateResolver, ResolutionAttempt, ResolutionResult
from .trending import TrendingResolver

__all__ = [
    "STATIC_MIRROR_LIST",
    "MirrorDirectory",
    "RankedCandidateResolver",
    "ResolutionAttempt",
    "ResolutionResult",
    "TrendingResolver",
]
