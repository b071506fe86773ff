"""vidmeta event type constants."""

from enum import Enum


class VidmetaEvents(str, Enum):
    """Event type constants for structured logging."""

    # Search events
    SEARCH_STARTED = "vidmeta.search.started"
    SEARCH_SUCCESS = "vidmeta.search.success"
    SEARCH_FAILED = "vidmeta.search.failed"

    # External tool events
    TOOL_INVOKED = "vidmeta.tool.invoked"
    TOOL_FAILED = "vidmeta.tool.failed"

    # Suggestion events
    SUGGEST_STARTED = "vidmeta.suggest.started"
    SUGGEST_SUCCESS = "vidmeta.suggest.success"
    SUGGEST_FAILED = "vidmeta.suggest.failed"

    # Mirror directory events
    DIRECTORY_FETCHED = "vidmeta.directory.fetched"
    DIRECTORY_FAILED = "vidmeta.directory.failed"
    STATIC_FALLBACK_USED = "vidmeta.directory.static_fallback"

    # Mirror resolution events
    RESOLUTION_STARTED = "vidmeta.resolution.started"
    MIRROR_ATTEMPT = "vidmeta.mirror.attempt"
    MIRROR_ATTEMPT_FAILED = "vidmeta.mirror.attempt_failed"
    RESOLUTION_SUCCESS = "vidmeta.resolution.success"
    RESOLUTION_EXHAUSTED = "vidmeta.resolution.exhausted"

    # Parser events
    PARSE_FAILED = "vidmeta.parse.failed"
    RECORD_DROPPED = "vidmeta.parse.record_dropped"

    # Session events
    SESSION_CREATED = "vidmeta.session.created"
    SESSION_CLOSED = "vidmeta.session.closed"


__all__ = ["VidmetaEvents"]
