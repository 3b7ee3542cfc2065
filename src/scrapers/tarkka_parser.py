# src/scrapers/tarkka_parser.py

"""Hourly price extraction from the Tarkka graph page.

The page does not serve JSON. Prices live in a JavaScript call that
hands the plotting library an array of series objects written as
object literals, for example::

    $.plot($("#graafi"), [
    { data: [[0,4.63]], highlightColor: '#529900', bars: {...}}, ...], options);

The opening ``[`` sits on the line before the series. The line that
starts with ``{ data:`` is coerced into JSON by four fixed textual
steps and each series contributes one price: the second value of the
first pair in its ``data`` array.

Values are assumed to contain no literal quote characters, which the
page format never produces.
"""

import json
import logging
import re
from typing import Any

from src.config.settings import Settings

logger = logging.getLogger("tarkka.parser")

_LINE_SPLIT = re.compile(r"[\r\n]+")
_TRAILER = re.compile(r", options\s*\);")
_BARE_KEY = re.compile(r"([a-zA-Z0-9]+):")


class ParseError(Exception):
    """The response body could not be turned into hourly prices."""


class EmptyResponseError(ParseError):
    """The response body was empty."""


# ── Transform steps ──────────────────────────────────────


def _prepend_array_open(line: str) -> str:
    """Restore the ``[`` that the page puts on the previous line."""
    return "[" + line


def _strip_trailer(text: str) -> str:
    """Drop the ``, options);`` call tail and close the array."""
    text = _TRAILER.sub("", text, count=1).rstrip()
    if not text.endswith("]"):
        text += "]"
    return text


def _quote_keys(text: str) -> str:
    """Turn bare object-literal keys into JSON string keys."""
    return _BARE_KEY.sub(r'"\1":', text)


def _normalise_quotes(text: str) -> str:
    """Single-quoted strings become double-quoted."""
    return text.replace("'", '"')


def coerce_series_line(line: str) -> str:
    """Apply the four transform steps to a ``{ data:`` line, in order."""
    text = _prepend_array_open(line)
    text = _strip_trailer(text)
    text = _quote_keys(text)
    return _normalise_quotes(text)


# ── Public API ───────────────────────────────────────────


def find_series_line(body: str) -> str | None:
    """Return the first stripped line starting with the series prefix."""
    for raw in _LINE_SPLIT.split(body):
        line = raw.strip()
        if line.startswith(Settings.DATA_LINE_PREFIX):
            return line
    return None


def extract_prices(body: str) -> list[float]:
    """Extract the ordered hourly prices from a graph page body.

    Returns an empty list when no series line is present.

    Raises:
        EmptyResponseError: *body* is empty.
        ParseError: the series line could not be decoded.
    """
    if body == "":
        raise EmptyResponseError("No data received")

    line = find_series_line(body)
    if line is None:
        logger.warning(
            "No line starting with '%s' in %d-char body",
            Settings.DATA_LINE_PREFIX,
            len(body),
        )
        return []

    try:
        series: list[dict[str, Any]] = json.loads(
            coerce_series_line(line)
        )
        prices = [float(item["data"][0][1]) for item in series]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        raise ParseError(f"Parse failure: {exc}") from exc

    logger.debug("Extracted %d hourly prices", len(prices))
    return prices
