# src/scrapers/tarkka_scraper.py

"""Fetcher for the Fortum Tarkka hourly price graph page."""

import logging

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.scrapers.tarkka_parser import extract_prices


class TarkkaScraper:
    """Fetches the Tarkka graph page with a single plain GET.

    No retries and no custom headers: the page is public and the tool
    is re-run by its scheduler anyway. Transport errors propagate to
    the caller.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger("tarkka.tarkka")
        self.settings = Settings()
        self.url: str = self.settings.SOURCE_URL
        self._request_timeout: float | None = (
            self.settings.REQUEST_TIMEOUT
        )

    async def fetch_body(self) -> str:
        """GET the graph page and return its full body as text."""
        self.logger.info("[tarkka] GET %s", self.url)
        async with curl_requests.AsyncSession() as session:
            resp = await session.get(
                self.url,
                timeout=self._request_timeout,
            )
        if resp.status_code != 200:
            self.logger.warning(
                "[tarkka] HTTP %d from %s, parsing body anyway",
                resp.status_code,
                self.url,
            )
        body: str = resp.text
        self.logger.debug(
            "[tarkka] Received %d chars", len(body)
        )
        return body

    async def fetch_prices(self) -> list[float]:
        """Fetch the page and extract today's hourly prices."""
        return extract_prices(await self.fetch_body())
