"""Builders for mock HTTP clients and sample payloads shared by tests."""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx


def make_response(status_code: int = 200, body: Any = None) -> MagicMock:
    """Build a mock httpx.Response with ``text`` set from body."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    if body is None:
        response.text = ""
    elif isinstance(body, str):
        response.text = body
    else:
        response.text = json.dumps(body)
    return response


def make_routing_client(routes: dict[str, Any]) -> AsyncMock:
    """
    Build a mock AsyncClient whose ``get`` answers by URL prefix.

    Route values may be a response, an exception instance (raised), or a
    callable taking (url, params) and returning either.
    Unrouted URLs raise httpx.ConnectError.
    """

    async def _get(url, params=None, **kwargs):
        for prefix, outcome in routes.items():
            if url.startswith(prefix):
                if callable(outcome) and not isinstance(outcome, MagicMock):
                    outcome = outcome(url, params)
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise httpx.ConnectError(f"no route for {url}")

    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(side_effect=_get)
    return client


def directory_entry(name: str, uri: str, ratio: Any = "99.0", api: Any = True) -> list:
    """Build one directory ``[name, details]`` entry."""
    return [
        name,
        {
            "api": api,
            "uri": uri,
            "monitor": {"30dRatio": {"ratio": ratio}},
        },
    ]


def mirror_item(title: str, video_id: str, length: Any = 200) -> dict[str, Any]:
    """Build one mirror API video object."""
    return {"title": title, "videoId": video_id, "lengthSeconds": length}


def ytdlp_line(title: str, video_id: str, duration: Any = 180) -> str:
    """Build one yt-dlp --dump-json line."""
    payload = {"_type": "url", "ie_key": "Youtube", "title": title, "id": video_id}
    if duration is not None:
        payload["duration"] = duration
    return json.dumps(payload)
