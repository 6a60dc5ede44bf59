"""Log repair for Alpha+++: DFG filtering and artificial silent activities."""

from __future__ import annotations

from typing import Iterable

from procmine.activity_projection import (
    END_ACTIVITY,
    START_ACTIVITY,
    ActivityProjectionDFG,
    EventLogActivityProjection,
)

SILENT_ACT_PREFIX = "__SILENT__"
"""Prefix for silent (artificial) activities."""


def _mean(values: list[int]) -> float:
    return sum(values) / len(values)


def filter_dfg(
    dfg: ActivityProjectionDFG,
    absolute_df_thresh: int,
    relative_df_thresh: float,
) -> ActivityProjectionDFG:
    """Filter a weighted DFG by absolute and relative edge weight thresholds.

    An edge ``(a, b)`` is kept if its weight reaches ``absolute_df_thresh`` and
    it reaches ``relative_df_thresh`` times the mean weight of the edges
    leaving ``a`` or of the edges entering ``b``.
    """
    kept: dict[tuple[int, int], int] = {}
    for (a, b), weight in dfg.edges.items():
        leaving_a = [w for (x, _), w in dfg.edges.items() if x == a]
        entering_b = [w for (_, y), w in dfg.edges.items() if y == b]
        if weight >= absolute_df_thresh and (
            weight >= relative_df_thresh * _mean(leaving_a)
            or weight >= relative_df_thresh * _mean(entering_b)
        ):
            kept[(a, b)] = weight
    return ActivityProjectionDFG(nodes=list(dfg.nodes), edges=kept)


def _required_index(log: EventLogActivityProjection, activity: str) -> int:
    try:
        return log.act_to_index[activity]
    except KeyError:
        raise ValueError(f"Artificial activity {activity!r} missing from log") from None


def _insert_before(
    trace: list[int], insertions: dict[tuple[int, int], int]
) -> list[int]:
    """Insert activities between consecutive pairs according to ``insertions``."""
    result: list[int] = []
    for i, act in enumerate(trace):
        if i > 0:
            new_act = insertions.get((trace[i - 1], act))
            if new_act is not None:
                result.append(new_act)
        result.append(act)
    return result


def add_artificial_acts_for_skips(
    log: EventLogActivityProjection, df_threshold: int
) -> tuple[EventLogActivityProjection, list[str]]:
    """Add silent activities modelling skips; return the new log and new activity names."""
    ret = log.copy()
    dfg = ActivityProjectionDFG.from_event_log_projection(log)
    start_act = _required_index(log, START_ACTIVITY)
    end_act = _required_index(log, END_ACTIVITY)

    out_from_act = {
        act: {x for x in dfg.nodes if dfg.df_between(act, x) >= df_threshold}
        for act in dfg.nodes
    }

    skips: dict[int, set[int]] = {}
    for a in dfg.nodes:
        if dfg.df_between(a, a) != 0 or a == start_act:
            continue
        out_from_a = out_from_act[a]
        if not out_from_a:
            continue
        # Any (a, b) present in the DFG is considered here, not just those above the threshold.
        can_skip = {
            b
            for b in dfg.nodes
            if dfg.df_between(a, b) > 0
            and b != end_act
            and dfg.df_between(b, b) < df_threshold
            and dfg.df_between(b, a) < df_threshold
            and out_from_a >= out_from_act[b]
        }
        if can_skip:
            skips[a] = can_skip

    new_artificial_acts: dict[int, int] = {}
    new_acts: list[str] = []
    for a in skips:
        new_act = len(ret.activities)
        name = f"{SILENT_ACT_PREFIX}skip_after_{ret.activities[a]}"
        ret.activities.append(name)
        ret.act_to_index[name] = new_act
        new_artificial_acts[a] = new_act
        new_acts.append(name)

    new_traces: list[tuple[list[int], int]] = []
    for trace, weight in ret.traces:
        repaired: list[int] = []
        prev: int | None = None
        for act in trace:
            if prev is not None and prev in skips and act not in skips[prev]:
                repaired.append(new_artificial_acts[prev])
            repaired.append(act)
            prev = act
        new_traces.append((repaired, weight))
    ret.traces = new_traces
    return ret, new_acts


def get_reachable_bf(
    act: int, dfg: ActivityProjectionDFG, df_threshold: int
) -> set[tuple[int, ...]]:
    """Breadth-first search in the DFG, returning paths that end by closing a loop."""
    current_paths: set[tuple[int, ...]] = {
        (act, b) for b in dfg.df_postset_of(act, df_threshold)
    }
    finished_paths: set[tuple[int, ...]] = set()
    expanded = True
    while expanded:
        expanded = False
        next_paths: set[tuple[int, ...]] = set()
        for path in current_paths:
            extended = False
            for b in dfg.df_postset_of(path[-1], df_threshold):
                new_path = path + (b,)
                if b in path:
                    finished_paths.add(new_path)
                else:
                    next_paths.add(new_path)
                    extended = True
            if extended:
                expanded = True
        current_paths = next_paths
    return finished_paths


def add_artificial_acts_for_loops(
    log: EventLogActivityProjection, df_threshold: int
) -> tuple[EventLogActivityProjection, list[str]]:
    """Add silent activities modelling loop-backs; return the new log and new activity names."""
    if START_ACTIVITY not in log.activities or END_ACTIVITY not in log.activities:
        raise ValueError("No Artificial START/END Activities")
    ret = log.copy()
    dfg = ActivityProjectionDFG.from_event_log_projection(log)
    reachable_paths = get_reachable_bf(log.act_to_index[START_ACTIVITY], dfg, df_threshold)
    end_act = log.act_to_index[END_ACTIVITY]

    taus = {
        (path[-2], path[-1])
        for path in reachable_paths
        if path[-1] != end_act and len(path) >= 2 and path[-2] != path[-1]
    }
    insert_taus_between: dict[tuple[int, int], int] = {}
    new_acts: list[str] = []
    for pair in sorted(taus):
        a, b = pair
        art_act = len(ret.activities)
        name = f"{SILENT_ACT_PREFIX}skip_loop_{log.activities[a]}_{log.activities[b]}"
        ret.activities.append(name)
        ret.act_to_index[name] = art_act
        insert_taus_between[pair] = art_act
        new_acts.append(name)

    ret.traces = [
        (_insert_before(trace, insert_taus_between), weight) for trace, weight in ret.traces
    ]
    return ret, new_acts


def _as_pairs(edges: Iterable[tuple[tuple[int, int], int]]) -> dict[tuple[int, int], int]:
    return dict(edges)