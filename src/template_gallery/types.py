"""Typed configuration dictionaries for template-gallery."""

from pathlib import Path
from typing import TypedDict


class NetworkConfig(TypedDict):
    """Network configuration section."""

    retry_attempts: int
    timeout_seconds: int


class NuGetConfig(TypedDict):
    """Remote catalog configuration section."""

    search_url: str
    page_size: int
    max_results: int
    include_prerelease: bool


class DirectoryConfig(TypedDict):
    """Directory paths configuration section."""

    builtin: Path
    installed: Path
    logs: Path


class GlobalConfig(TypedDict):
    """Global application configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    network: NetworkConfig
    nuget: NuGetConfig
    directory: DirectoryConfig
