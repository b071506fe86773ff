"""Type definitions for vidmeta client."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VideoRecord:
    """A single video as reported by the search tool or a mirror.

    Attributes:
        title: Video title
        length_seconds: Duration in seconds, 0 when unknown
        video_id: Opaque platform identifier
    """

    title: str
    length_seconds: int
    video_id: str


@dataclass(frozen=True)
class MirrorInstance:
    """A mirror listed by the directory endpoint.

    Attributes:
        uri: Base URL of the instance
        health_ratio: 30-day uptime percentage reported by the directory
    """

    uri: str
    health_ratio: float


__all__ = ["VideoRecord", "MirrorInstance"]
