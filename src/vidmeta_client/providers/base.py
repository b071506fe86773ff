"""
Bulk Search Provider Protocol and Implementations

Defines the abstract provider interface for bulk video search, so the
external search tool can be swapped for a mock or another backend.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any, Protocol

from ..log_config import get_context_logger


class RawRecordBatch:
    """
    Raw records produced by a single bulk search call.

    Wraps the provider's line-delimited output and decodes it lazily.
    Iteration is restartable: every ``iter()`` walks the same lines again.
    Lines may be ``str`` or raw ``bytes`` and are decoded one at a time.
    Blank lines are ignored; lines that are not UTF-8 or not valid JSON are
    skipped and counted.

    Examples:
        >>> batch = RawRecordBatch(['{"id": "a"}', "garbage", ""])
        >>> list(batch)
        [{'id': 'a'}]
        >>> batch.skipped
        1
    """

    def __init__(self, lines: Sequence[str | bytes]):
        self._lines = tuple(lines)
        self.skipped = 0

    @classmethod
    def from_output(cls, output: str | bytes) -> "RawRecordBatch":
        """Build a batch from raw stdout, text or undecoded bytes."""
        return cls(output.splitlines())

    def __iter__(self) -> Iterator[Any]:
        skipped = 0
        for line in self._lines:
            if not line.strip():
                continue
            try:
                if isinstance(line, bytes):
                    line = line.decode("utf-8")
                yield json.loads(line)
            except ValueError:  # includes UnicodeDecodeError
                skipped += 1
        self.skipped = skipped

    def __len__(self) -> int:
        """Number of non-blank lines (decodable or not)."""
        return sum(1 for line in self._lines if line.strip())


class BulkSearchProvider(Protocol):
    """
    Protocol for bulk search sources.

    A provider runs one search and returns the raw JSON records it found.

    Examples:
        >>> class MyProvider:
        ...     async def fetch_raw(self, query, count):
        ...         return RawRecordBatch(['{"id": "x", "title": "t"}'])
    """

    async def fetch_raw(self, query: str, count: int) -> RawRecordBatch:
        """
        Search for up to ``count`` results.

        Raises:
            ExternalToolFailure: If the search could not be performed
        """
        ...


class BaseSearchProvider(ABC):
    """
    Base class for bulk search providers.

    Provides common logging infrastructure.
    """

    def __init__(self):
        """Initialize base provider."""
        self.logger = get_context_logger(f"vidmeta_provider.{self.__class__.__name__}")

    @abstractmethod
    async def fetch_raw(self, query: str, count: int) -> RawRecordBatch:
        """Search for up to ``count`` results."""
        pass

    def get_identifier(self) -> str:
        """Get identifier for this provider (for logging/debugging)."""
        return f"{self.__class__.__name__}"


class MockSearchProvider(BaseSearchProvider):
    """
    Mock search provider for testing.

    Returns predefined output lines regardless of the requested count.

    Attributes:
        lines: Output lines to return
        delay: Simulated delay in seconds
        calls: (query, count) pairs received so far
    """

    def __init__(self, lines: Sequence[str | dict[str, Any]], delay: float = 0.0):
        super().__init__()
        self.lines = [
            line if isinstance(line, str) else json.dumps(line) for line in lines
        ]
        self.delay = delay
        self.calls: list[tuple[str, int]] = []

    async def fetch_raw(self, query: str, count: int) -> RawRecordBatch:
        self.calls.append((query, count))
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        self.logger.debug("Returning mock search output", query=query, count=count)
        return RawRecordBatch(self.lines)

    def get_identifier(self) -> str:
        return "mock://search"


__all__ = [
    "RawRecordBatch",
    "BulkSearchProvider",
    "BaseSearchProvider",
    "MockSearchProvider",
]
