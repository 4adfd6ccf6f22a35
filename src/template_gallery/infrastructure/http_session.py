"""HTTP session utilities for template-gallery."""

import aiohttp

from template_gallery.types import GlobalConfig


def build_timeout(timeout_seconds: int) -> aiohttp.ClientTimeout:
    """Compose a ClientTimeout from the configured base seconds."""
    return aiohttp.ClientTimeout(
        total=timeout_seconds * 3,
        sock_read=timeout_seconds * 2,
        sock_connect=timeout_seconds,
    )


def create_http_session(global_config: GlobalConfig) -> aiohttp.ClientSession:
    """Create configured HTTP session.

    Must be called from a running event loop; the caller closes it.

    Args:
        global_config: Global configuration dictionary

    Returns:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = int(global_config["network"]["timeout_seconds"])
    return aiohttp.ClientSession(
        timeout=build_timeout(timeout_seconds),
        connector=aiohttp.TCPConnector(limit=10, limit_per_host=4),
    )
