"""HTTP client construction."""

from typing import Any

import httpx

from .settings import Settings, get_settings


def _load_http_config(settings: Settings | None = None) -> dict[str, Any]:
    """Load HTTP client configuration from settings."""

    http_cfg = (settings or get_settings()).http
    return {
        "timeout": http_cfg.timeout,
        "max_connections": http_cfg.max_connections,
        "max_keepalive_connections": http_cfg.max_keepalive_connections,
        "keepalive_expiry": http_cfg.keepalive_expiry,
        "verify": http_cfg.verify_ssl,
        "follow_redirects": http_cfg.follow_redirects,
        "user_agent": http_cfg.user_agent,
    }


def create_http_client(
    settings: Settings | None = None,
    *,
    timeout: float | None = None,
    ssl_verify: bool | None = None,
) -> httpx.AsyncClient:
    """Build an AsyncClient with the fixed client-level timeout.

    The returned client is safe to share between concurrent calls; the
    caller owns it and must close it.
    """

    cfg = _load_http_config(settings)
    if timeout is not None:
        cfg["timeout"] = timeout
    if ssl_verify is not None:
        cfg["verify"] = ssl_verify

    headers = {"User-Agent": cfg["user_agent"]} if cfg["user_agent"] else None
    return httpx.AsyncClient(
        timeout=cfg["timeout"],
        limits=httpx.Limits(
            max_keepalive_connections=cfg["max_keepalive_connections"],
            max_connections=cfg["max_connections"],
            keepalive_expiry=cfg["keepalive_expiry"],
        ),
        verify=cfg["verify"],
        follow_redirects=cfg["follow_redirects"],
        headers=headers,
    )


__all__ = ["create_http_client"]
