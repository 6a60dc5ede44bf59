"""Building of place candidates from a directly-follows relation."""

from __future__ import annotations

import logging
from typing import Collection, Iterable

from procmine.activity_projection import ActivityProjectionDFG

logger = logging.getLogger(__name__)

Candidate = tuple[tuple[int, ...], tuple[int, ...]]


def _no_df_between(df_rel: set[tuple[int, int]], a: Iterable[int], b: Collection[int]) -> bool:
    return not any((x, y) in df_rel for x in a for y in b)


def _all_dfs_between(df_rel: set[tuple[int, int]], a: Iterable[int], b: Collection[int]) -> bool:
    return all((x, y) in df_rel for x in a for y in b)


def satisfies_cnd_condition(
    df_rel: set[tuple[int, int]], a: Iterable[int], b: Iterable[int]
) -> bool:
    """Check whether a place candidate ``(a, b)`` satisfies the DF-relation criteria."""
    a_set = set(a)
    b_set = set(b)
    a_without_b = a_set - b_set
    b_without_a = b_set - a_set
    return (
        _no_df_between(df_rel, a_set, a_without_b)
        and _no_df_between(df_rel, b_without_a, b_set)
        and _all_dfs_between(df_rel, a_set, b_set)
        and not _all_dfs_between(df_rel, b_without_a, a_without_b)
    )


def build_candidates(dfg: ActivityProjectionDFG) -> set[Candidate]:
    """Build place candidates as pairs of sorted input and output activity tuples."""
    df_relations = {pair for pair, weight in dfg.edges.items() if weight > 0}
    logger.debug("DF #%d", len(df_relations))

    n = len(dfg.nodes)
    cnds: set[Candidate] = set()
    final_cnds: set[Candidate] = set()
    for a in range(n):
        for b in range(n):
            cnd = ((a,), (b,))
            cnds.add(cnd)
            if (
                (a, b) in df_relations
                and (b, a) not in df_relations
                and (a, a) not in df_relations
                and (b, b) not in df_relations
            ):
                final_cnds.add(cnd)

    new_cnds = set(cnds)
    while new_cnds:
        added: set[Candidate] = set()
        for a1, b1 in new_cnds:
            for a2, b2 in cnds:
                if not _all_dfs_between(df_relations, a1, b2) or not _all_dfs_between(
                    df_relations, a2, b1
                ):
                    continue
                a = a1 + a2
                b = b1 + b2
                if _all_dfs_between(df_relations, b, a):
                    continue
                a_sorted = tuple(sorted(set(a)))
                b_sorted = tuple(sorted(set(b)))
                if (
                    a_sorted != b_sorted
                    and (a_sorted, b_sorted) not in cnds
                    and satisfies_cnd_condition(df_relations, a_sorted, b_sorted)
                ):
                    added.add((a_sorted, b_sorted))
        final_cnds |= added
        cnds |= added
        new_cnds = added
    return final_cnds