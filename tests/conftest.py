"""Pytest configuration and shared fixtures for vidmeta client tests."""

import random
from typing import Any

import pytest

from vidmeta_client.settings import Settings

from helpers import directory_entry, mirror_item


# ==================== Fixtures ====================


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of environment and config files."""
    return Settings()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for shuffling."""
    return random.Random(1234)


@pytest.fixture
def trending_body() -> list[dict[str, Any]]:
    """Typical trending response with one malformed item."""
    return [
        mirror_item("Song A", "aaaaaaaaaaa", 215),
        mirror_item("Song B", "bbbbbbbbbbb", 187),
        {"title": "Broken", "videoId": "ccccccccccc"},
    ]


@pytest.fixture
def directory_body() -> list[list]:
    """Directory listing mixing healthy, unhealthy and non-API instances."""
    return [
        directory_entry("healthy.one", "https://healthy.one", "99.5"),
        directory_entry("flaky.two", "https://flaky.two", "80.1"),
        directory_entry("noapi.three", "https://noapi.three", "99.9", api=False),
        directory_entry("healthy.four", "https://healthy.four", "95.01"),
        directory_entry("edge.five", "https://edge.five", "95.0"),
    ]
