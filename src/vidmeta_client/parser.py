"""Parsers turning search tool output and mirror API JSON into VideoRecords."""

import json
from collections.abc import Iterable
from typing import Any

from .events import VidmetaEvents
from .log_config import get_context_logger
from .types import VideoRecord


def _is_unsigned_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a length
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class RecordParser:
    """Parser for the two JSON shapes a video can arrive in.

    Mirror API items carry ``title``, ``videoId`` and a mandatory
    ``lengthSeconds``. Search tool lines carry ``title``, ``id`` and an
    optional ``duration`` that defaults to 0.
    """

    def __init__(self):
        self.logger = get_context_logger("vidmeta_parser")

    def parse_records(self, raw: str | bytes) -> list[VideoRecord] | None:
        """Parse a mirror-shaped JSON array into records.

        Args:
            raw: Response body

        Returns:
            Records for every well-formed item, possibly empty, or None if
            the body is not valid JSON or its top level is not an array.
        """
        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            self.logger.debug(VidmetaEvents.PARSE_FAILED, error=str(e))
            return None

        if not isinstance(value, list):
            self.logger.debug(
                VidmetaEvents.PARSE_FAILED,
                error="top-level value is not an array",
                value_type=type(value).__name__,
            )
            return None

        records = []
        for item in value:
            record = self.parse_mirror_item(item)
            if record is None:
                self.logger.debug(VidmetaEvents.RECORD_DROPPED, shape="mirror")
                continue
            records.append(record)
        return records

    def parse_mirror_item(self, value: Any) -> VideoRecord | None:
        """Parse a single mirror API item; None if any required field is unusable."""
        if not isinstance(value, dict):
            return None
        title = value.get("title")
        video_id = value.get("videoId")
        length_seconds = value.get("lengthSeconds")
        if not isinstance(title, str) or not isinstance(video_id, str):
            return None
        if not _is_unsigned_int(length_seconds):
            return None
        return VideoRecord(title=title, length_seconds=length_seconds, video_id=video_id)

    def parse_subprocess_line(self, value: Any) -> VideoRecord | None:
        """Parse one search tool entry.

        Args:
            value: A decoded JSON object, or the raw line text

        Returns:
            VideoRecord, or None when the line is malformed or lacks
            ``title``/``id``
        """
        if isinstance(value, (str, bytes)):
            try:
                value = json.loads(value)
            except ValueError:
                return None
        if not isinstance(value, dict):
            return None

        title = value.get("title")
        video_id = value.get("id")
        if not isinstance(title, str) or not isinstance(video_id, str):
            return None

        return VideoRecord(
            title=title,
            length_seconds=self._coerce_duration(value.get("duration")),
            video_id=video_id,
        )

    def parse_subprocess_output(self, lines: Iterable[Any]) -> list[VideoRecord]:
        """Parse every line of search tool output, skipping blank and bad lines."""
        records = []
        for line in lines:
            if isinstance(line, (str, bytes)) and not line.strip():
                continue
            record = self.parse_subprocess_line(line)
            if record is None:
                self.logger.debug(VidmetaEvents.RECORD_DROPPED, shape="subprocess")
                continue
            records.append(record)
        return records

    @staticmethod
    def _coerce_duration(duration: Any) -> int:
        # yt-dlp reports floats for some extractors and null for live streams
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            return 0
        if duration != duration or duration < 0 or duration == float("inf"):
            return 0
        return int(duration)


_default_parser = RecordParser()


def parse_records(raw: str | bytes) -> list[VideoRecord] | None:
    """Parse a mirror-shaped JSON array with the default parser."""
    return _default_parser.parse_records(raw)


def parse_subprocess_line(value: Any) -> VideoRecord | None:
    """Parse one search tool entry with the default parser."""
    return _default_parser.parse_subprocess_line(value)


__all__ = [
    "RecordParser",
    "parse_records",
    "parse_subprocess_line",
]
