"""
Tests for latest-year selection and group aggregation.
"""

import math

import pandas as pd
import pytest

from gendergap.reducers import aggregate_groups, latest_by_country


# ===== FIXTURES =====


@pytest.fixture
def country_years():
    """Small wide table with one incomplete country."""
    return pd.DataFrame(
        [
            {"Country Name": "A", "Year": 2001, "f": 5, "m": 6},
            {"Country Name": "A", "Year": 2005, "f": 8, "m": 9},
            {"Country Name": "B", "Year": 2000, "f": 1, "m": None},
        ]
    )


@pytest.fixture
def enrollment_rows():
    """Long table: education level x gender with a gap for tertiary males."""
    return pd.DataFrame(
        [
            {"EducationLevel": "Primary", "Gender": "Female", "EnrollmentRate": 10},
            {"EducationLevel": "Primary", "Gender": "Female", "EnrollmentRate": 20},
            {"EducationLevel": "Primary", "Gender": "Female", "EnrollmentRate": 30},
            {"EducationLevel": "Primary", "Gender": "Male", "EnrollmentRate": 40},
            {"EducationLevel": "Tertiary", "Gender": "Female", "EnrollmentRate": 50},
            {"EducationLevel": "Tertiary", "Gender": "Male", "EnrollmentRate": ""},
            {"EducationLevel": "Secondary", "Gender": "Female", "EnrollmentRate": "n/a"},
            {"EducationLevel": "Secondary", "Gender": "Male", "EnrollmentRate": None},
        ]
    )


# ===== LATEST-YEAR TESTS =====


def test_latest_by_country_end_to_end(country_years):
    """Country A keeps its 2005 row; B is dropped for missing m."""
    result = latest_by_country(country_years, ["f", "m"])

    assert result.to_dict("records") == [
        {"Country Name": "A", "Year": 2005, "f": 8, "m": 9}
    ]


def test_latest_by_country_picks_max_year_per_country():
    df = pd.DataFrame(
        {
            "Country Name": ["X", "Y", "X", "Y", "X"],
            "Year": [2010, 2012, 2015, 2011, 2013],
            "v": [1, 2, 3, 4, 5],
        }
    )
    result = latest_by_country(df, ["v"])

    assert list(result["Country Name"]) == ["X", "Y"]
    assert list(result["Year"]) == [2015, 2012]
    assert list(result["v"]) == [3, 2]


def test_latest_by_country_skips_incomplete_latest_year():
    """A newer row with a missing value does not shadow an older complete one."""
    df = pd.DataFrame(
        {
            "Country Name": ["X", "X"],
            "Year": [2010, 2020],
            "v": ["7.5", ""],
        }
    )
    result = latest_by_country(df, ["v"])

    assert len(result) == 1
    assert result.loc[0, "Year"] == 2010
    assert result.loc[0, "v"] == 7.5


def test_latest_by_country_tie_break_first_encountered():
    df = pd.DataFrame(
        {
            "Country Name": ["X", "X", "X"],
            "Year": [2015, 2015, 2001],
            "v": [1.0, 2.0, 3.0],
        }
    )
    result = latest_by_country(df, ["v"])

    assert result["v"].tolist() == [1.0]


def test_latest_by_country_all_invalid_returns_empty():
    df = pd.DataFrame(
        {"Country Name": ["X", "Y"], "Year": [2000, "abc"], "v": [None, 3]}
    )
    result = latest_by_country(df, ["v"])

    assert result.empty


def test_latest_by_country_unknown_field_means_no_data(country_years):
    assert latest_by_country(country_years, ["not_a_column"]).empty


def test_latest_by_country_does_not_mutate_input(country_years):
    before = country_years.copy()
    latest_by_country(country_years, ["f", "m"])

    pd.testing.assert_frame_equal(country_years, before)


# ===== AGGREGATION TESTS =====


def test_single_field_mean():
    df = pd.DataFrame({"g": ["a", "a", "a"], "v": [10, 20, 30]})
    result = aggregate_groups(df, ["g"], "v")

    assert result.to_dict("records") == [{"g": "a", "v": 20.0}]


def test_single_field_drops_empty_group_by_default():
    df = pd.DataFrame({"g": ["a", "b", "b"], "v": [1, "x", None]})
    result = aggregate_groups(df, ["g"], "v")

    assert result["g"].tolist() == ["a"]


def test_single_field_zero_policy_keeps_empty_group():
    df = pd.DataFrame({"g": ["a", "b"], "v": [4, None]})
    result = aggregate_groups(df, ["g"], "v", empty_group_policy="zero")

    assert result.to_dict("records") == [{"g": "a", "v": 4.0}, {"g": "b", "v": 0.0}]


def test_two_fields_pivot_with_missing_policy(enrollment_rows):
    result = aggregate_groups(
        enrollment_rows,
        ["EducationLevel", "Gender"],
        "EnrollmentRate",
        categories=["Female", "Male"],
    )

    assert list(result.columns) == ["EducationLevel", "Female", "Male"]
    # Secondary has no valid value at all and is dropped
    assert result["EducationLevel"].tolist() == ["Primary", "Tertiary"]

    primary = result.iloc[0]
    assert primary["Female"] == 20.0
    assert primary["Male"] == 40.0

    tertiary = result.iloc[1]
    assert tertiary["Female"] == 50.0
    assert math.isnan(tertiary["Male"])


def test_two_fields_pivot_with_zero_policy(enrollment_rows):
    result = aggregate_groups(
        enrollment_rows,
        ["EducationLevel", "Gender"],
        "EnrollmentRate",
        categories=["Female", "Male"],
        empty_group_policy="zero",
    )

    assert result["EducationLevel"].tolist() == ["Primary", "Tertiary", "Secondary"]
    assert result.set_index("EducationLevel").loc["Tertiary", "Male"] == 0.0
    assert result.set_index("EducationLevel").loc["Secondary"].tolist() == [0.0, 0.0]


def test_two_fields_unrequested_category_is_dropped(enrollment_rows):
    result = aggregate_groups(
        enrollment_rows,
        ["EducationLevel", "Gender"],
        "EnrollmentRate",
        categories=["Female"],
    )

    assert list(result.columns) == ["EducationLevel", "Female"]


def test_two_fields_default_categories_follow_first_appearance(enrollment_rows):
    result = aggregate_groups(
        enrollment_rows, ["EducationLevel", "Gender"], "EnrollmentRate"
    )

    assert list(result.columns) == ["EducationLevel", "Female", "Male"]


def test_median_statistic():
    df = pd.DataFrame({"g": ["a"] * 4, "v": [1, 2, 3, 100]})
    result = aggregate_groups(df, ["g"], "v", statistic="median")

    assert result.loc[0, "v"] == 2.5


def test_empty_input_returns_empty_frame():
    df = pd.DataFrame({"g": [], "h": [], "v": []})
    result = aggregate_groups(df, ["g", "h"], "v", categories=["Female", "Male"])

    assert result.empty
    assert list(result.columns) == ["g", "Female", "Male"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"group_fields": []},
        {"group_fields": ["a", "b", "c"]},
        {"group_fields": ["a"], "statistic": "mode"},
        {"group_fields": ["a"], "empty_group_policy": "drop"},
    ],
)
def test_invalid_arguments_raise(kwargs):
    df = pd.DataFrame({"a": ["x"], "b": ["y"], "c": ["z"], "v": [1]})
    with pytest.raises(ValueError):
        aggregate_groups(df, value_field="v", **kwargs)
