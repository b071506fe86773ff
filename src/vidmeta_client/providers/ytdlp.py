"""
yt-dlp subprocess search provider.

Runs the ``yt-dlp`` executable in flat-playlist mode and hands its
line-delimited JSON output back as a RawRecordBatch. The process is
blocking, so it runs on a worker thread and never on the event loop.
"""

import asyncio
import subprocess
import tempfile
from collections.abc import Sequence

from ..events import VidmetaEvents
from ..exceptions import ExternalToolFailure
from ..settings import SearchSettings
from .base import BaseSearchProvider, RawRecordBatch


class YtDlpSearchProvider(BaseSearchProvider):
    """
    Bulk search backed by the yt-dlp command line tool.

    Attributes:
        binary: Executable name or path
        engine: Search pseudo-URL prefix (``ytsearch`` -> ``ytsearch40:query``)
        timeout: Process timeout in seconds
        extra_args: Additional arguments placed before the search target

    Examples:
        >>> provider = YtDlpSearchProvider()
        >>> provider.build_command("lofi", 20)[-1]
        'ytsearch20:lofi'
    """

    BASE_ARGS = ("--flat-playlist", "--dump-json", "--skip-download", "--no-warnings")

    def __init__(
        self,
        binary: str = "yt-dlp",
        engine: str = "ytsearch",
        timeout: float = 60.0,
        extra_args: Sequence[str] | None = None,
    ):
        super().__init__()
        self.binary = binary
        self.engine = engine
        self.timeout = timeout
        self.extra_args = list(extra_args or [])

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> "YtDlpSearchProvider":
        """Create a provider from the ``search`` settings section."""
        return cls(
            binary=settings.binary,
            engine=settings.engine,
            timeout=settings.timeout,
            extra_args=settings.extra_args,
        )

    def build_command(self, query: str, count: int) -> list[str]:
        """Build the argv for a flat search of ``count`` results."""
        return [
            self.binary,
            *self.BASE_ARGS,
            *self.extra_args,
            f"{self.engine}{count}:{query}",
        ]

    async def fetch_raw(self, query: str, count: int) -> RawRecordBatch:
        """
        Run the search and return its output lines.

        Args:
            query: Free-text search query
            count: Number of results to request

        Returns:
            RawRecordBatch over the tool's stdout

        Raises:
            ExternalToolFailure: If the tool is missing, times out or exits non-zero
        """
        command = self.build_command(query, count)
        self.logger.debug(VidmetaEvents.TOOL_INVOKED, command=command[0], count=count)

        stdout = await asyncio.to_thread(self._run, command)
        return RawRecordBatch.from_output(stdout)

    def _run(self, command: list[str]) -> bytes:
        # Output stays undecoded; RawRecordBatch decodes it line by line
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                timeout=self.timeout,
                cwd=tempfile.gettempdir(),
                check=False,
            )
        except FileNotFoundError as e:
            self.logger.warning(VidmetaEvents.TOOL_FAILED, reason="not_found", binary=self.binary)
            raise ExternalToolFailure(
                "Search tool executable not found", command=self.binary
            ) from e
        except subprocess.TimeoutExpired as e:
            self.logger.warning(VidmetaEvents.TOOL_FAILED, reason="timeout", timeout=self.timeout)
            raise ExternalToolFailure(
                f"Search tool timed out after {self.timeout}s", command=self.binary
            ) from e
        except OSError as e:
            self.logger.warning(VidmetaEvents.TOOL_FAILED, reason="os_error", error=str(e))
            raise ExternalToolFailure(
                f"Search tool could not be started: {e}", command=self.binary
            ) from e

        if proc.returncode != 0:
            self.logger.warning(
                VidmetaEvents.TOOL_FAILED,
                reason="exit_status",
                returncode=proc.returncode,
            )
            raise ExternalToolFailure(
                "Search tool exited abnormally",
                command=self.binary,
                returncode=proc.returncode,
                stderr=proc.stderr.decode("utf-8", errors="replace"),
            )

        return proc.stdout

    def get_identifier(self) -> str:
        return self.binary


__all__ = ["YtDlpSearchProvider"]
