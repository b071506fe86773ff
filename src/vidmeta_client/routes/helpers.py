"""Route helper utilities."""


def join_base_url(base_url: str, path: str) -> str:
    """Join a mirror base URL and an API path without doubling slashes.

    Args:
        base_url: Base URL, with or without trailing slash
        path: Absolute API path (e.g. "/api/v1/trending")

    Returns:
        Joined URL
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


__all__ = ["join_base_url"]
