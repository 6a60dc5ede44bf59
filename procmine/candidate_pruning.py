"""Pruning of Alpha+++ place candidates by balance, fitness and replay."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Iterable, Sequence

from procmine.activity_projection import (
    END_ACTIVITY,
    START_ACTIVITY,
    EventLogActivityProjection,
)

logger = logging.getLogger(__name__)

Candidate = tuple[tuple[int, ...], tuple[int, ...]]


def _compute_balance(a: Iterable[int], b: Iterable[int], act_count: Sequence[int]) -> float:
    ai = sum(act_count[act] for act in a)
    bi = sum(act_count[act] for act in b)
    max_freq = max(ai, bi)
    if max_freq == 0:
        return math.nan
    return abs(ai - bi) / max_freq


def _compute_local_fitness(
    a: tuple[int, ...],
    b: tuple[int, ...],
    log: EventLogActivityProjection,
    strict: bool,
) -> tuple[float, float]:
    relevant = set(a) | set(b)
    a_set = set(a)
    b_set = set(b)
    variants: Counter[tuple[int, ...]] = Counter()
    for trace, weight in log.traces:
        filtered = tuple(act for act in trace if act in relevant)
        if filtered:
            variants[filtered] += weight

    for activity in (START_ACTIVITY, END_ACTIVITY):
        if activity not in log.act_to_index:
            raise ValueError(f"Artificial activity {activity!r} missing from log")

    traces_containing = [0] * len(log.activities)
    fitting_containing = [0] * len(log.activities)

    def replay(variant: tuple[int, ...], freq: int) -> int:
        unique_acts = sorted(set(variant))
        for act in unique_acts:
            traces_containing[act] += freq
        tokens = 0
        for act in variant:
            if strict and act in a_set and act in b_set:
                if tokens <= 0:
                    return 0
            else:
                if act in a_set:
                    tokens += 1
                if act in b_set:
                    tokens -= 1
                if tokens < 0:
                    return 0
        if tokens != 0:
            return 0
        for act in unique_acts:
            fitting_containing[act] += freq
        return freq

    num_fitting = sum(replay(variant, freq) for variant, freq in variants.items())
    num_relevant = sum(variants.values())
    if num_relevant == 0:
        return 0.0, 0.0
    per_act = [
        fit / total for total, fit in zip(traces_containing, fitting_containing) if total > 0
    ]
    return num_fitting / num_relevant, min(per_act, default=0.0)


def _is_dominated(cnd: Candidate, others: Sequence[Candidate]) -> bool:
    a, b = cnd
    for a2, b2 in others:
        if (
            len(a2) >= len(a)
            and len(b2) >= len(b)
            and (a != a2 or b != b2)
            and all(e in a2 for e in a)
            and all(e in b2 for e in b)
        ):
            return True
    return False


def prune_candidates(
    cnds: Iterable[tuple[Iterable[int], Iterable[int]]],
    balance_threshold: float,
    fitness_threshold: float,
    replay_threshold: float,
    act_count: Sequence[int],
    log: EventLogActivityProjection,
) -> list[Candidate]:
    """Prune place candidates by balance, local fitness, maximality and strict replay.

    The surviving candidates are returned in sorted order.
    """
    candidates = [(tuple(a), tuple(b)) for a, b in cnds]

    balanced = [
        (a, b)
        for a, b in candidates
        if _compute_balance(a, b, act_count) <= balance_threshold
    ]
    logger.debug("After balance: %d", len(balanced))

    fitting = []
    for a, b in balanced:
        fitness, min_per_act = _compute_local_fitness(a, b, log, strict=False)
        if fitness >= fitness_threshold and min_per_act >= fitness_threshold:
            fitting.append((a, b))
    logger.debug("After fitness: %d", len(fitting))

    maximal = [cnd for cnd in fitting if not _is_dominated(cnd, fitting)]
    logger.debug("After maximal (sel): %d", len(maximal))

    return sorted(
        (a, b)
        for a, b in maximal
        if _compute_local_fitness(a, b, log, strict=True) > (replay_threshold, -1.0)
    )