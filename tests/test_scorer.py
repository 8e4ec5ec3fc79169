"""
Tests for the Narrative Proximity Index and narrative phases.
"""

from datetime import date

import pandas as pd
import pytest

from digikat.detector import frame_column
from digikat.lexicon import FRAME_NAMES, NPI_WEIGHTS, PHASE_LABELS
from digikat.scorer import build_indices, narrative_phase, normalize_npi, npi_raw


class TestNpiRaw:

    def test_weights_are_fixed(self):
        assert NPI_WEIGHTS == {
            "CONSPIRACY": 2.0,
            "FOREIGN_THREAT": 1.5,
            "INSTITUTIONAL_DISTRUST": 1.5,
            "MEDIA_CRITIQUE": 1.0,
        }

    def test_all_npi_frames(self):
        present = {f: True for f in FRAME_NAMES}
        assert npi_raw(present) == 6.0

    def test_no_frames(self):
        assert npi_raw({f: False for f in FRAME_NAMES}) == 0.0

    def test_other_frames_do_not_count(self):
        assert npi_raw({"MORAL_DECAY": True, "TRADITIONAL_VALUES": True}) == 0.0

    def test_conspiracy_plus_media_critique(self):
        assert npi_raw({"CONSPIRACY": True, "MEDIA_CRITIQUE": True}) == 3.0


class TestNormalizeNpi:

    def test_min_maps_to_zero_max_to_hundred(self):
        out = normalize_npi(pd.Series([0.0, 3.0, 6.0]))
        assert out.tolist() == [0.0, 50.0, 100.0]

    def test_rounded_to_one_decimal(self):
        out = normalize_npi(pd.Series([0.0, 1.0, 6.0]))
        assert out.tolist() == [0.0, 16.7, 100.0]

    def test_constant_batch_maps_to_zero(self):
        out = normalize_npi(pd.Series([2.0, 2.0, 2.0]))
        assert out.tolist() == [0.0, 0.0, 0.0]

    def test_denominator_floor_of_one(self):
        out = normalize_npi(pd.Series([1.5, 2.0]))
        assert out.tolist() == [0.0, 50.0]

    def test_values_in_range(self):
        out = normalize_npi(pd.Series([0.0, 1.0, 1.5, 2.5, 3.5, 6.0]))
        assert out.between(0, 100).all()

    def test_batch_relative(self):
        small = normalize_npi(pd.Series([0.0, 3.0]))
        large = normalize_npi(pd.Series([0.0, 3.0, 6.0]))
        assert small.iloc[1] == 100.0
        assert large.iloc[1] == 50.0

    def test_empty(self):
        assert normalize_npi(pd.Series([], dtype=float)).empty


class TestNarrativePhase:

    @pytest.mark.parametrize("day,expected", [
        (date(2020, 3, 1), "COVID Peak (early 2021)"),
        (date(2021, 6, 30), "COVID Peak (early 2021)"),
        (date(2021, 7, 1), "Post-Vaccine Debate"),
        (date(2022, 2, 23), "Post-Vaccine Debate"),
        (date(2022, 2, 24), "Ukraine and Energy Crisis"),
        (date(2022, 5, 1), "Ukraine and Energy Crisis"),
        (date(2022, 10, 1), "Euro Adoption"),
        (date(2023, 1, 14), "Euro Adoption"),
        (date(2023, 1, 15), "Culture Wars Period"),
        (date(2023, 12, 31), "Culture Wars Period"),
        (date(2024, 1, 1), "Election Run-up 2024"),
        (date(2030, 6, 1), "Election Run-up 2024"),
    ])
    def test_boundaries(self, day, expected):
        assert narrative_phase(day) == expected

    def test_timestamp_and_string(self):
        assert narrative_phase(pd.Timestamp("2022-05-01")) == "Ukraine and Energy Crisis"
        assert narrative_phase("2021-07-01") == "Post-Vaccine Debate"

    @pytest.mark.parametrize("day", [None, pd.NaT, float("nan"), "garbage"])
    def test_unassignable_is_other(self, day):
        assert narrative_phase(day) == "Other"


class TestBuildIndices:

    def make_frame(self, flag_rows, dates):
        data = {frame_column(f): [row.get(f, False) for row in flag_rows] for f in FRAME_NAMES}
        data["DATE"] = pd.to_datetime(dates)
        return pd.DataFrame(data)

    def test_columns(self):
        df = self.make_frame(
            [
                {"CONSPIRACY": True, "MEDIA_CRITIQUE": True},
                {},
                {"CONSPIRACY": True, "FOREIGN_THREAT": True,
                 "INSTITUTIONAL_DISTRUST": True, "MEDIA_CRITIQUE": True},
            ],
            ["2022-05-01", "2021-01-10", "2024-03-01"],
        )
        out = build_indices(df)
        assert out["npi_raw"].tolist() == [3.0, 0.0, 6.0]
        assert out["npi_normalized"].tolist() == [50.0, 0.0, 100.0]
        assert out["narrative_phase"].tolist() == [
            "Ukraine and Energy Crisis", "COVID Peak (early 2021)", "Election Run-up 2024",
        ]

    def test_phase_is_ordered_categorical(self):
        df = self.make_frame([{}], ["2022-05-01"])
        out = build_indices(df)
        phase = out["narrative_phase"]
        assert phase.cat.ordered
        assert list(phase.cat.categories) == list(PHASE_LABELS)
