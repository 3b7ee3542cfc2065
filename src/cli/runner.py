# src/cli/runner.py

"""Check → fetch → parse → write sequence for one invocation."""

import logging

from rich.console import Console
from rich.markup import escape

from src.models.price_snapshot import PriceSnapshot
from src.models.run_context import RunContext
from src.scrapers.tarkka_parser import ParseError
from src.scrapers.tarkka_scraper import TarkkaScraper
from src.storage.snapshot_cache import NotAFileError, SnapshotCache

logger = logging.getLogger("tarkka.cli")

# Status messages go to stderr; stdout only carries usage text
_err = Console(stderr=True)


async def run_fetch(context: RunContext) -> int:
    """Refresh the cache file for today and return an exit code.

    Exit codes: 0 when the cache was already current or was refreshed,
    1 on a non-file cache path or any fetch, parse or write failure.
    """
    cache = SnapshotCache(context.result_path)

    try:
        valid = cache.has_valid_snapshot(context.today_ms)
    except NotAFileError as exc:
        logger.error("%s", exc)
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    if valid:
        message = (
            f"Found valid data for today in '{context.result_path}', "
            "nothing to do."
        )
        logger.info(message)
        _err.print(f"[dim]{escape(message)}[/dim]")
        return 0

    scraper = TarkkaScraper()
    try:
        prices = await scraper.fetch_prices()
    except ParseError as exc:
        logger.error("Could not parse %s: %s", scraper.url, exc)
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return 1
    except Exception as exc:
        logger.error(
            "Fetch from %s failed: %s", scraper.url, exc, exc_info=True
        )
        _err.print(f"[red]Fetch failed: {escape(str(exc))}[/red]")
        return 1

    if not prices:
        logger.warning(
            "No hourly prices found in response from %s", scraper.url
        )

    snapshot = PriceSnapshot(time=context.today_ms, data=prices)
    try:
        path = cache.save(snapshot)
    except OSError as exc:
        logger.error(
            "Unable to save '%s': %s",
            context.result_path,
            exc,
            exc_info=True,
        )
        message = f"Unable to save '{context.result_path}': {exc}"
        _err.print(f"[red]{escape(message)}[/red]")
        return 1

    _err.print(f"[green]Saved '{escape(str(path))}'[/green]")
    return 0
