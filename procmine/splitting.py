"""Random distribution of activities over disjoint, non-empty subsets."""

from __future__ import annotations

import random
from typing import AbstractSet


def random_activity_split(
    activity_set: AbstractSet[str], num_of_splits: int
) -> list[set[str]]:
    """Distribute ``activity_set`` randomly over ``num_of_splits`` disjoint subsets.

    The activities are shuffled and the first ``num_of_splits`` of them are
    placed one per subset, so no subset is empty as long as there are at
    least as many activities as subsets. The rest go to subsets chosen
    uniformly at random.
    """
    if num_of_splits < 1:
        raise ValueError(f"Number of splits must be at least 1, got {num_of_splits}")

    subsets: list[set[str]] = [set() for _ in range(num_of_splits)]
    # Sorting first makes the result depend only on the random state.
    activities = sorted(activity_set)
    random.shuffle(activities)

    for pos, activity in enumerate(activities):
        if pos < num_of_splits:
            subsets[pos].add(activity)
        else:
            subsets[random.randrange(num_of_splits)].add(activity)
    return subsets


def random_activity_split_max_bins(
    activity_set: AbstractSet[str], max_num_of_splits: int
) -> list[set[str]]:
    """Split ``activity_set`` into a random number of non-empty subsets.

    With ``max_num_of_splits`` below 2 all activities stay in one set. If it
    exceeds the number of activities, every activity gets its own set.
    Otherwise a number of subsets is drawn from ``[2, max_num_of_splits)``.
    """
    if max_num_of_splits < 2:
        return [set(activity_set)]
    if max_num_of_splits > len(activity_set):
        return [{activity} for activity in activity_set]
    if max_num_of_splits == 2:
        raise ValueError("No number of splits lies in the empty range [2, 2)")

    num_splits = random.randrange(2, max_num_of_splits)
    return random_activity_split(activity_set, num_splits)