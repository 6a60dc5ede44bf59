import random

import pytest

from procmine.splitting import random_activity_split, random_activity_split_max_bins

SEPSIS_ACTIVITIES = {
    "Admission IC",
    "ER Sepsis Triage",
    "IV Antibiotics",
    "Release A",
    "Release B",
    "Admission NC",
    "CRP",
    "IV Liquid",
    "Release C",
    "Release D",
    "ER Registration",
    "ER Triage",
    "LacticAcid",
    "Leucocytes",
    "Release E",
    "Return ER",
}


def _is_disjoint_cover(subsets, activities):
    union = set().union(*subsets)
    return union == set(activities) and sum(len(s) for s in subsets) == len(activities)


def test_random_activity_split_four_sets():
    split_sets = random_activity_split(SEPSIS_ACTIVITIES, 4)
    assert len(split_sets) == 4
    assert all(split_sets)
    assert sum(len(s) for s in split_sets) == len(SEPSIS_ACTIVITIES)
    assert _is_disjoint_cover(split_sets, SEPSIS_ACTIVITIES)


@pytest.mark.parametrize("num", [1, 2, 3, 7, 16])
def test_random_activity_split_is_partition(num):
    split_sets = random_activity_split(SEPSIS_ACTIVITIES, num)
    assert len(split_sets) == num
    assert all(split_sets)
    assert _is_disjoint_cover(split_sets, SEPSIS_ACTIVITIES)


def test_random_activity_split_more_sets_than_activities_leaves_empty_sets():
    split_sets = random_activity_split({"a", "b"}, 4)
    assert len(split_sets) == 4
    assert sorted(len(s) for s in split_sets) == [0, 0, 1, 1]
    assert _is_disjoint_cover(split_sets, {"a", "b"})


def test_random_activity_split_single_set_holds_all():
    assert random_activity_split({"a", "b", "c"}, 1) == [{"a", "b", "c"}]


def test_random_activity_split_zero_splits_raises():
    with pytest.raises(ValueError):
        random_activity_split({"a"}, 0)


def test_random_activity_split_reproducible_with_seed():
    random.seed(1234)
    first = random_activity_split(SEPSIS_ACTIVITIES, 3)
    random.seed(1234)
    second = random_activity_split(SEPSIS_ACTIVITIES, 3)
    assert first == second


def test_random_activity_split_does_not_modify_input():
    activities = set(SEPSIS_ACTIVITIES)
    random_activity_split(activities, 5)
    assert activities == SEPSIS_ACTIVITIES


@pytest.mark.parametrize("max_bins", [0, 1])
def test_max_bins_below_two_returns_everything_in_one_set(max_bins):
    result = random_activity_split_max_bins({"a", "b", "c"}, max_bins)
    assert result == [{"a", "b", "c"}]


def test_max_bins_above_activity_count_gives_singletons():
    result = random_activity_split_max_bins({"a", "b", "c"}, 4)
    assert sorted(sorted(s) for s in result) == [["a"], ["b"], ["c"]]


@pytest.mark.parametrize("seed", range(10))
def test_max_bins_number_of_sets_in_range(seed):
    random.seed(seed)
    result = random_activity_split_max_bins(SEPSIS_ACTIVITIES, 4)
    assert 2 <= len(result) < 4
    assert all(result)
    assert _is_disjoint_cover(result, SEPSIS_ACTIVITIES)


def test_max_bins_equal_to_activity_count():
    result = random_activity_split_max_bins(SEPSIS_ACTIVITIES, 16)
    assert 2 <= len(result) < 16
    assert _is_disjoint_cover(result, SEPSIS_ACTIVITIES)


def test_max_bins_of_two_raises():
    with pytest.raises(ValueError):
        random_activity_split_max_bins({"a", "b", "c"}, 2)