# ABOUTME: Tests for tolerant integer and range parsing of scraped values
# ABOUTME: Covers defaulting on blank, missing and malformed input

import pytest

from bulbapedia_crawler.extraction.parsers import parse_int_or_default, parse_range_or_default


class TestParseIntOrDefault:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("45", 45),
            ("  45  ", 45),
            ("1,280", 1280),
            ("-3", -3),
            ("  unknown ", -1),
            ("45%", -1),
            ("", -1),
            ("   ", -1),
            (None, -1),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_int_or_default(text, -1) == expected

    def test_default_is_returned_unchanged(self):
        assert parse_int_or_default("n/a", 0) == 0


class TestParseRangeOrDefault:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("20 - 25", (20, 25)),
            ("20-25", (20, 25)),
            ("5,140 - 5,396", (5140, 5396)),
            ("20 – 25", (20, 25)),
            ("10", (10, 10)),
            (None, (0, 0)),
            ("", (0, 0)),
            ("  ", (0, 0)),
            ("unknown", (0, 0)),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_range_or_default(text, 0) == expected

    def test_each_end_defaults_independently(self):
        assert parse_range_or_default("abc - 25", 0) == (0, 25)
        assert parse_range_or_default("20 - ?", 0) == (20, 0)

    def test_reversed_range_is_ordered(self):
        assert parse_range_or_default("25 - 20", 0) == (20, 25)
