# tests/test_tarkka_parser.py

"""Tests for hourly price extraction from the Tarkka graph page."""

import json
import unittest
from pathlib import Path

from src.scrapers.tarkka_parser import (
    EmptyResponseError,
    ParseError,
    coerce_series_line,
    extract_prices,
    find_series_line,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestExtractPrices(unittest.TestCase):
    """extract_prices behaviour on synthetic and fixture bodies."""

    def _fixture_body(self) -> str:
        """Load the captured graph page."""
        return (FIXTURES_DIR / "tarkka_graafi.html").read_text(
            encoding="utf-8"
        )

    def test_fixture_yields_24_prices_in_hour_order(self) -> None:
        """A full page produces one price per hour, in order."""
        prices = extract_prices(self._fixture_body())
        self.assertEqual(len(prices), 24)
        self.assertEqual(prices[0], 3.12)
        self.assertEqual(prices[7], 4.63)
        self.assertEqual(prices[18], 6.02)
        self.assertEqual(prices[23], 3.41)

    def test_prices_are_floats(self) -> None:
        """Integer-looking prices still come back as floats."""
        body = "[\n{ data: [[0,4]], highlightColor: '#529900'}], options);"
        prices = extract_prices(body)
        self.assertEqual(prices, [4.0])
        self.assertIsInstance(prices[0], float)

    def test_single_series_without_closing_bracket(self) -> None:
        """A fragment that lost its closing ']' still parses."""
        body = "[\n{ data: [[0,1.23]], highlightColor: '#fff'}, options);"
        self.assertEqual(extract_prices(body), [1.23])

    def test_takes_second_value_of_first_pair(self) -> None:
        """Only data[0][1] of each series is used."""
        body = (
            "[\n{ data: [[0,1.23],[1,2.34]], highlightColor: 'x'}, "
            "{ data: [[1,2.5]], highlightColor: 'y'}], options);"
        )
        self.assertEqual(extract_prices(body), [1.23, 2.5])

    def test_empty_body_raises(self) -> None:
        """An empty body is reported as such."""
        with self.assertRaises(EmptyResponseError) as ctx:
            extract_prices("")
        self.assertIn("No data received", str(ctx.exception))

    def test_empty_response_is_a_parse_error(self) -> None:
        """Callers catching ParseError also catch empty bodies."""
        self.assertTrue(issubclass(EmptyResponseError, ParseError))

    def test_no_series_line_returns_empty(self) -> None:
        """A page without a '{ data:' line yields no prices."""
        body = "<html>\n<body>Huoltokatko</body>\n</html>\n"
        self.assertEqual(extract_prices(body), [])

    def test_prefix_must_start_the_line(self) -> None:
        """'{ data:' in the middle of a line does not count."""
        body = "var x = { data: [[0,1.0]] };\n"
        self.assertEqual(extract_prices(body), [])

    def test_only_first_series_line_is_used(self) -> None:
        """Later matching lines are ignored."""
        body = (
            "[\n"
            "{ data: [[0,1.0]], highlightColor: 'a'}], options);\n"
            "{ data: [[0,9.0]], highlightColor: 'b'}], options);\n"
        )
        self.assertEqual(extract_prices(body), [1.0])

    def test_crlf_and_indentation(self) -> None:
        """CRLF line breaks and leading whitespace are tolerated."""
        body = (
            "<script>\r\n\r\n    [\r\n"
            "\t  { data: [[0,2.0]], highlightColor: 'c'}], options);\r\n"
        )
        self.assertEqual(extract_prices(body), [2.0])

    def test_malformed_series_raises_parse_failure(self) -> None:
        """Undecodable JSON is wrapped as a parse failure."""
        body = "{ data: [[0,1.0]], highlightColor: 'c' bars}], options);"
        with self.assertRaises(ParseError) as ctx:
            extract_prices(body)
        self.assertTrue(str(ctx.exception).startswith("Parse failure: "))

    def test_missing_data_pair_raises_parse_failure(self) -> None:
        """A series with an empty data array is a parse failure."""
        body = "{ data: [], highlightColor: 'c'}], options);"
        with self.assertRaises(ParseError) as ctx:
            extract_prices(body)
        self.assertTrue(str(ctx.exception).startswith("Parse failure: "))

    def test_null_price_raises_parse_failure(self) -> None:
        """A series whose price is null is rejected, not stored as None."""
        body = "{ data: [[0,null]], highlightColor: 'c'}], options);"
        with self.assertRaises(ParseError) as ctx:
            extract_prices(body)
        self.assertTrue(str(ctx.exception).startswith("Parse failure: "))


class TestTransformSteps(unittest.TestCase):
    """Line location and JSON coercion."""

    def test_find_series_line_strips_whitespace(self) -> None:
        """The returned line is trimmed."""
        body = "a\n   { data: [[0,1]]}], options);   \nb"
        self.assertEqual(
            find_series_line(body), "{ data: [[0,1]]}], options);"
        )

    def test_find_series_line_none(self) -> None:
        """No match gives None."""
        self.assertIsNone(find_series_line("nothing here"))

    def test_coerce_series_line_produces_json(self) -> None:
        """Keys are quoted, quotes normalised, trailer removed."""
        line = (
            "{ data: [[18,4.63]], highlightColor: '#529900', "
            "bars: { show: true, barWidth: 0.7 } }], options);"
        )
        decoded = json.loads(coerce_series_line(line))
        self.assertEqual(
            decoded,
            [
                {
                    "data": [[18, 4.63]],
                    "highlightColor": "#529900",
                    "bars": {"show": True, "barWidth": 0.7},
                }
            ],
        )

    def test_trailer_with_space_before_paren(self) -> None:
        """Whitespace before the closing parenthesis is allowed."""
        line = "{ data: [[0,1.5]]}], options );"
        self.assertEqual(
            json.loads(coerce_series_line(line)), [{"data": [[0, 1.5]]}]
        )


if __name__ == "__main__":
    unittest.main()
