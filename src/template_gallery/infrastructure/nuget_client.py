"""NuGet search API client for the remote template catalog.

Template packages are published to nuget.org with the ``Template`` package
type; the search endpoint is paged with ``skip``/``take``.
"""

import asyncio
from typing import Any

import aiohttp
import orjson

from template_gallery.constants import NUGET_TEMPLATE_PACKAGE_TYPE
from template_gallery.domain.package import CatalogRecord
from template_gallery.exceptions import CatalogFetchError
from template_gallery.infrastructure.http_session import build_timeout
from template_gallery.logger import get_logger
from template_gallery.types import NetworkConfig, NuGetConfig

logger = get_logger(__name__)


class NuGetClient:
    """Fetches template packages from the NuGet search service."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        nuget_config: NuGetConfig,
        network_config: NetworkConfig,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session for making requests
            nuget_config: Search endpoint and paging settings
            network_config: Retry and timeout settings

        """
        self.session = session
        self.search_url = nuget_config["search_url"]
        self.page_size = max(1, int(nuget_config["page_size"]))
        self.max_results = max(0, int(nuget_config["max_results"]))
        self.include_prerelease = bool(nuget_config["include_prerelease"])
        self.retry_attempts = max(1, int(network_config["retry_attempts"]))
        self.timeout = build_timeout(int(network_config["timeout_seconds"]))

    def _build_params(self, skip: int, take: int) -> dict[str, str]:
        return {
            "q": "",
            "packageType": NUGET_TEMPLATE_PACKAGE_TYPE,
            "prerelease": str(self.include_prerelease).lower(),
            "semVerLevel": "2.0.0",
            "skip": str(skip),
            "take": str(take),
        }

    async def _fetch_page(self, skip: int, take: int) -> dict[str, Any]:
        """Fetch one search page with retries.

        Transient network errors are retried with exponential backoff.

        Raises:
            CatalogFetchError: If all attempts fail

        """
        params = self._build_params(skip, take)

        for attempt in range(1, self.retry_attempts + 1):
            try:
                async with self.session.get(
                    self.search_url, params=params, timeout=self.timeout
                ) as response:
                    response.raise_for_status()
                    return await response.json(loads=orjson.loads)

            except (aiohttp.ClientError, TimeoutError) as e:
                logger.warning(
                    "Attempt %d/%d for %s failed: %s",
                    attempt,
                    self.retry_attempts,
                    self.search_url,
                    e,
                )
                if attempt == self.retry_attempts:
                    raise CatalogFetchError(
                        f"{e} after {attempt} attempt(s)",
                        target=self.search_url,
                    ) from e
                await asyncio.sleep(2**attempt)
            except orjson.JSONDecodeError as e:
                raise CatalogFetchError(
                    f"response is not valid JSON: {e}",
                    target=self.search_url,
                ) from e

        # range() is never empty because retry_attempts >= 1
        raise CatalogFetchError("no attempts made", target=self.search_url)

    async def get_template_packages(self) -> list[CatalogRecord]:
        """Fetch every template package listed by the search service.

        Pages are requested until the reported total or ``max_results`` is
        reached, or a page comes back empty.

        Returns:
            Catalog records in search ranking order

        Raises:
            CatalogFetchError: If a request fails or a page is malformed

        """
        records: list[CatalogRecord] = []
        skip = 0

        while skip < self.max_results:
            take = min(self.page_size, self.max_results - skip)
            page = await self._fetch_page(skip, take)

            try:
                items = page["data"]
                total_hits = int(page.get("totalHits", 0))
                records.extend(
                    CatalogRecord.from_search_result(item) for item in items
                )
            except (KeyError, TypeError, ValueError) as e:
                raise CatalogFetchError(
                    f"unexpected search response: {e}",
                    target=self.search_url,
                ) from e

            skip += take
            if not items or skip >= total_hits:
                break

        logger.debug("Fetched %d template packages from catalog", len(records))
        return records
