import pandas as pd

from nmc_polity_merge.integration.conflicts import (
    codes_only_in,
    conflict_report,
    duplicate_keys,
    overlap,
    overlap_years,
)


def test_codes_only_in_is_sorted_difference(regime, capabilities):
    only = codes_only_in(regime, capabilities)
    assert only == [99, 324, 325, 342, 348, 364, 365, 525, 769, 818]
    assert codes_only_in(capabilities, regime) == [1, 300, 770]


def test_codes_only_in_identical_relations_is_empty(regime):
    assert codes_only_in(regime, regime.copy()) == []


def test_overlap_restricts_to_shared_years(regime):
    rows = overlap(345, 347, regime)
    assert set(rows["year"]) == {1991}
    assert sorted(rows["ccode"]) == [345, 347]


def test_overlap_zero_is_empty_frame(regime):
    rows = overlap(769, 770, regime)
    assert rows.empty
    assert list(rows.columns) == list(regime.columns)


def test_overlap_full():
    relation = pd.DataFrame({"ccode": [1, 1, 2, 2], "year": [2000, 2001, 2000, 2001]})
    assert overlap_years(1, 2, relation) == [2000, 2001]
    assert len(overlap(1, 2, relation)) == 4


def test_overlap_does_not_touch_input(regime):
    before = regime.copy()
    overlap(99, 100, regime)
    pd.testing.assert_frame_equal(regime, before)


def test_duplicate_keys_lists_every_occurrence():
    relation = pd.DataFrame({"ccode": [5, 5, 6], "year": [1900, 1900, 1900]})
    dupes = duplicate_keys(relation)
    assert dupes.to_dict("records") == [
        {"ccode": 5, "year": 1900},
        {"ccode": 5, "year": 1900},
    ]


def test_conflict_report(regime, capabilities):
    report = conflict_report(regime, capabilities)
    assert list(report.columns) == ["ccode", "country", "first_year", "last_year", "n_years"]
    row = report.loc[report["ccode"] == 99].iloc[0]
    assert row["country"] == "Gran Colombia"
    assert (row["first_year"], row["last_year"], row["n_years"]) == (1830, 1832, 3)
