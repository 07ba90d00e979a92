from __future__ import annotations

import pytest

from stats_browser.core.statistics import (
    INSUFFICIENT_MESSAGE,
    Insufficient,
    StatsSummary,
    mean,
    mode,
    summarize,
)


def test_summarize_reference_sample():
    summary = summarize([2, 4, 4, 4, 5, 5, 7, 9])

    assert isinstance(summary, StatsSummary)
    assert summary.mean == 5.0
    assert summary.median == 4.5
    assert summary.mode == 4
    assert summary.range == 7
    assert summary.standard_deviation == pytest.approx(2.1381, abs=1e-4)


def test_summarize_single_value_is_insufficient():
    result = summarize([5])

    assert isinstance(result, Insufficient)
    assert result.count == 1
    assert result.message == INSUFFICIENT_MESSAGE


def test_summarize_empty_is_insufficient():
    assert isinstance(summarize([]), Insufficient)


def test_summarize_all_equal_has_zero_deviation():
    summary = summarize([1, 1, 1, 1])

    assert summary.standard_deviation == 0
    assert summary.range == 0
    assert summary.mean == summary.median == summary.mode == 1


@pytest.mark.parametrize("sample", [[0.1] * 3, [2.675] * 5, [-1e-7] * 2])
def test_summarize_equal_fractional_values_has_exact_mean_and_zero_deviation(sample):
    summary = summarize(sample)

    assert summary.standard_deviation == 0
    assert summary.range == 0
    assert summary.mean == sample[0]


def test_mean_stays_within_sample_bounds():
    sample = [0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.10000000000000002]

    assert min(sample) <= mean(sample) <= max(sample)


def test_summarize_odd_length_median_is_middle_of_sorted():
    summary = summarize([9, 1, 5])
    assert summary.median == 5


def test_summarize_does_not_mutate_input():
    sample = [3.0, -1.0, 2.0, 2.0]
    before = list(sample)

    summarize(sample)

    assert sample == before


def test_mode_tie_goes_to_first_value_reaching_max_count():
    # 5 reaches count 2 before 1 does
    assert mode([5, 5, 1, 1]) == 5
    # 1 reaches count 2 first even though 5 appears first
    assert mode([5, 1, 1, 5]) == 1
    # no repeats: first value wins
    assert mode([7, 3, 9]) == 7


def test_two_values_minimum_sample():
    summary = summarize([1, 3])

    assert summary.mean == 2
    assert summary.median == 2
    assert summary.standard_deviation == pytest.approx(2 ** 0.5)


@pytest.mark.parametrize(
    "sample",
    [
        [0.5, -2.25, 10, 3, 3, 7.75],
        [-5, -5, -1, -20],
        [1e6, 1e6 + 1, 1e6 + 3],
    ],
)
def test_summary_properties_hold(sample):
    summary = summarize(sample)

    assert summary.standard_deviation > 0
    assert min(sample) <= summary.median <= max(sample)
    assert summary.mode in sample
    assert summary.range == pytest.approx(max(sample) - min(sample))


def test_summary_to_from_dict_roundtrip():
    summary = summarize([2, 4, 4, 4, 5, 5, 7, 9])

    assert StatsSummary.from_dict(summary.to_dict()) == summary
