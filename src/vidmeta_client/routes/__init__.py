"""URL building helpers."""

from .helpers import join_base_url

__all__ = ["join_base_url"]
