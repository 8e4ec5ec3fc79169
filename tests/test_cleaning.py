"""
Tests for Filter & Clean.

Row drops (non-web, empty text, bad dates, duplicates), numeric
coercion, and the search text every detector depends on.
"""

import numpy as np
import pandas as pd
import pytest

from digikat.cleaning import (
    MissingColumnsError,
    clean_articles,
    deduplicate,
    parse_dates,
    validate_columns,
)
from digikat.detector import SEARCH_TEXT_COLUMN

NEUTRAL_TEXT = "Danas je sunčano vrijeme u gradu."


def raw_row(**overrides):
    row = {
        "DATE": "2022-05-01",
        "TITLE": "Vijesti",
        "FULL_TEXT": NEUTRAL_TEXT,
        "FROM": "index.hr",
        "SOURCE_TYPE": "web",
    }
    row.update(overrides)
    return row


def raw_frame(*rows):
    return pd.DataFrame(list(rows))


class TestValidation:

    def test_missing_columns_raise(self):
        df = pd.DataFrame({"DATE": ["2022-01-01"], "TITLE": ["x"]})
        with pytest.raises(MissingColumnsError) as exc_info:
            clean_articles(df)
        assert exc_info.value.missing == ["FULL_TEXT", "FROM", "SOURCE_TYPE"]
        assert "FULL_TEXT" in str(exc_info.value)

    def test_missing_columns_is_value_error(self):
        with pytest.raises(ValueError):
            validate_columns(pd.DataFrame({"TITLE": []}))

    def test_complete_columns_pass(self):
        validate_columns(raw_frame(raw_row()))


class TestRowFilters:

    def test_social_rows_excluded(self):
        df = raw_frame(
            raw_row(TITLE="a"),
            raw_row(TITLE="b", SOURCE_TYPE="social"),
            raw_row(TITLE="c", SOURCE_TYPE="forum"),
        )
        cleaned, report = clean_articles(df)
        assert list(cleaned["TITLE"]) == ["a"]
        assert report.dropped_non_web == 2

    def test_empty_and_blank_text_dropped(self):
        df = raw_frame(
            raw_row(TITLE="a"),
            raw_row(TITLE="b", FULL_TEXT="   "),
            raw_row(TITLE="c", FULL_TEXT=None),
            raw_row(TITLE="d", FULL_TEXT=""),
        )
        cleaned, report = clean_articles(df)
        assert list(cleaned["TITLE"]) == ["a"]
        assert report.dropped_empty_text == 3

    def test_unparseable_dates_dropped(self):
        df = raw_frame(
            raw_row(TITLE="a"),
            raw_row(TITLE="b", DATE="not a date"),
            raw_row(TITLE="c", DATE=None),
        )
        cleaned, report = clean_articles(df)
        assert list(cleaned["TITLE"]) == ["a"]
        assert report.dropped_invalid_date == 2

    def test_dates_normalized_to_day(self):
        df = raw_frame(raw_row(DATE="2022-05-01 17:45:00"))
        cleaned, _ = clean_articles(df)
        assert cleaned.loc[0, "DATE"] == pd.Timestamp("2022-05-01")

    def test_utc_offset_keeps_calendar_day(self):
        df = raw_frame(raw_row(DATE="2022-05-01T00:30:00+02:00"))
        cleaned, report = clean_articles(df)
        assert report.dropped_invalid_date == 0
        assert cleaned.loc[0, "DATE"] == pd.Timestamp("2022-05-01")
        assert cleaned["DATE"].dt.tz is None

    def test_mixed_utc_offsets(self):
        df = raw_frame(
            raw_row(TITLE="a", DATE="2022-01-15T23:10:00+01:00"),
            raw_row(TITLE="b", DATE="2022-07-15T00:20:00+02:00"),
            raw_row(TITLE="c", DATE="2022-07-16T10:00:00+00:00"),
            raw_row(TITLE="d", DATE="2022-07-17 08:00:00"),
            raw_row(TITLE="e", DATE="not a date"),
        )
        cleaned, report = clean_articles(df)
        assert list(cleaned["TITLE"]) == ["a", "b", "c", "d"]
        assert report.dropped_invalid_date == 1
        assert list(cleaned["DATE"]) == [
            pd.Timestamp("2022-01-15"),
            pd.Timestamp("2022-07-15"),
            pd.Timestamp("2022-07-16"),
            pd.Timestamp("2022-07-17"),
        ]
        assert list(cleaned["quarter"]) == [1, 3, 3, 3]

    def test_parse_dates_mixed_offsets(self):
        parsed = parse_dates(pd.Series(["2022-05-01T10:00:00+02:00", "2022-05-02T10:00:00+00:00"]))
        assert pd.api.types.is_datetime64_any_dtype(parsed)
        assert list(parsed) == [pd.Timestamp("2022-05-01"), pd.Timestamp("2022-05-02")]

    def test_report_totals(self):
        df = raw_frame(
            raw_row(TITLE="a"),
            raw_row(TITLE="b", SOURCE_TYPE="social"),
            raw_row(TITLE="c", FULL_TEXT=" "),
        )
        _, report = clean_articles(df)
        assert report.raw_rows == 3
        assert report.final_rows == 1


class TestDeduplication:

    def test_by_url_keeps_first(self):
        df = raw_frame(
            raw_row(TITLE="first", URL="https://index.hr/a"),
            raw_row(TITLE="second", URL="https://index.hr/a"),
            raw_row(TITLE="third", URL="https://index.hr/b"),
        )
        cleaned, report = clean_articles(df)
        assert list(cleaned["TITLE"]) == ["first", "third"]
        assert report.dedup_key == ["URL"]
        assert report.dropped_duplicates == 1

    def test_by_title_date_from_without_url(self):
        df = raw_frame(
            raw_row(TITLE="same", FULL_TEXT="prvi tekst"),
            raw_row(TITLE="same", FULL_TEXT="drugi tekst"),
            raw_row(TITLE="same", FROM="telegram.hr"),
            raw_row(TITLE="same", DATE="2022-05-02"),
        )
        cleaned, report = clean_articles(df)
        assert len(cleaned) == 3
        assert cleaned.loc[0, "FULL_TEXT"] == "prvi tekst"
        assert report.dedup_key == ["TITLE", "DATE", "FROM"]

    def test_idempotent(self):
        df = raw_frame(
            raw_row(TITLE="a", URL="u1"),
            raw_row(TITLE="b", URL="u1"),
            raw_row(TITLE="c", URL="u2"),
        )
        once = deduplicate(df)
        twice = deduplicate(once)
        pd.testing.assert_frame_equal(once, twice)

    def test_idempotent_without_url(self):
        df = raw_frame(
            raw_row(TITLE="a", FULL_TEXT="prvi"),
            raw_row(TITLE="a", FULL_TEXT="drugi"),
            raw_row(TITLE="a", FROM="telegram.hr"),
            raw_row(TITLE="b"),
        )
        once = deduplicate(df)
        assert list(once["FULL_TEXT"]) == ["prvi", NEUTRAL_TEXT, NEUTRAL_TEXT]
        pd.testing.assert_frame_equal(once, deduplicate(once))

    def test_idempotent_after_clean(self):
        df = raw_frame(
            raw_row(TITLE="a", DATE="2022-05-01T09:00:00+02:00"),
            raw_row(TITLE="a", DATE="2022-05-01 18:00:00"),
            raw_row(TITLE="a", DATE="2022-05-02"),
        )
        cleaned, report = clean_articles(df)
        assert report.dedup_key == ["TITLE", "DATE", "FROM"]
        assert report.dropped_duplicates == 1
        pd.testing.assert_frame_equal(cleaned, deduplicate(cleaned))


class TestNumericCoercion:

    def test_engagement_missing_and_invalid_become_zero(self):
        df = raw_frame(
            raw_row(TITLE="a", INTERACTIONS="12", SHARE_COUNT=None),
            raw_row(TITLE="b", INTERACTIONS="abc", SHARE_COUNT=3),
            raw_row(TITLE="c", INTERACTIONS=-5, SHARE_COUNT=np.nan),
        )
        cleaned, report = clean_articles(df)
        assert list(cleaned["INTERACTIONS"]) == [12, 0, 0]
        assert list(cleaned["SHARE_COUNT"]) == [0, 3, 0]
        assert report.numeric_values_coerced == 4
        assert len(cleaned) == 3

    def test_comma_decimal_separator(self):
        df = raw_frame(
            raw_row(TITLE="a", VIRALITY="0,75", ENGAGEMENT_RATE="1,5"),
            raw_row(TITLE="b", VIRALITY="2", ENGAGEMENT_RATE="0,25"),
        )
        cleaned, _ = clean_articles(df)
        assert list(cleaned["VIRALITY"]) == [0.75, 2.0]
        assert list(cleaned["ENGAGEMENT_RATE"]) == [1.5, 0.25]

    def test_numeric_comma_columns_untouched(self):
        df = raw_frame(raw_row(VIRALITY=0.5))
        cleaned, _ = clean_articles(df)
        assert cleaned.loc[0, "VIRALITY"] == 0.5


class TestDerivedText:

    def test_search_text_lowercased_title_and_body(self):
        df = raw_frame(raw_row(TITLE="ZAVJERA u Saboru", FULL_TEXT="Fake News Danas"))
        cleaned, _ = clean_articles(df)
        assert cleaned.loc[0, SEARCH_TEXT_COLUMN] == "zavjera u saboru fake news danas"

    def test_search_text_with_missing_title(self):
        df = raw_frame(raw_row(TITLE=None, FULL_TEXT="Tekst"))
        cleaned, _ = clean_articles(df)
        assert cleaned.loc[0, SEARCH_TEXT_COLUMN] == " tekst"

    def test_word_count(self):
        df = raw_frame(raw_row(FULL_TEXT="  jedan dva\ttri\n četiri "))
        cleaned, _ = clean_articles(df)
        assert cleaned.loc[0, "word_count"] == 4

    def test_temporal_columns(self):
        cleaned, _ = clean_articles(raw_frame(raw_row(DATE="2022-05-01")))
        row = cleaned.iloc[0]
        assert row["year"] == 2022
        assert row["month"] == 5
        assert row["year_month"] == pd.Timestamp("2022-05-01")
        assert row["week"] == 17
        assert row["quarter"] == 2
        assert row["year_quarter"] == "2022 Q2"
        assert row["day_of_week"] == "Sunday"
