"""Projection of event logs onto activity labels and its weighted DFG."""

from __future__ import annotations

import copy as _copy
import warnings
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

START_ACTIVITY = "__START"
"""Artificial activity marking the start of every trace."""

END_ACTIVITY = "__END"
"""Artificial activity marking the end of every trace."""

_NO_ACTIVITY = "No Activity"


@dataclass
class EventLogActivityProjection:
    """An event log reduced to activity indices, grouped into weighted variants.

    ``activities[i]`` is the name of activity ``i``; ``act_to_index`` is the
    reverse mapping. Each entry of ``traces`` is a pair of an activity index
    sequence and the number of traces following it.
    """

    activities: list[str] = field(default_factory=list)
    act_to_index: dict[str, int] = field(default_factory=dict)
    traces: list[tuple[list[int], int]] = field(default_factory=list)

    @classmethod
    def from_activity_sequences(
        cls, sequences: Iterable[Iterable[Optional[str]]]
    ) -> EventLogActivityProjection:
        """Build a projection from one activity-name sequence per trace.

        Activities are indexed in order of first appearance; a missing
        activity (``None``) is recorded as ``"No Activity"``.
        """
        activities: list[str] = []
        act_to_index: dict[str, int] = {}
        variants: Counter[tuple[int, ...]] = Counter()
        for sequence in sequences:
            trace: list[int] = []
            for act in sequence:
                name = act if isinstance(act, str) else _NO_ACTIVITY
                index = act_to_index.get(name)
                if index is None:
                    index = len(activities)
                    activities.append(name)
                    act_to_index[name] = index
                trace.append(index)
            variants[tuple(trace)] += 1
        return cls(
            activities=activities,
            act_to_index=act_to_index,
            traces=[(list(variant), count) for variant, count in variants.items()],
        )

    def acts_to_names(self, acts: Iterable[int]) -> list[str]:
        """Return the sorted activity names of the given indices."""
        return sorted(self.activities[act] for act in acts)

    def copy(self) -> EventLogActivityProjection:
        """Return an independent deep copy."""
        return _copy.deepcopy(self)


@dataclass
class ActivityProjectionDFG:
    """Weighted directly-follows graph over activity indices."""

    nodes: list[int] = field(default_factory=list)
    edges: dict[tuple[int, int], int] = field(default_factory=dict)

    def df_between(self, a: int, b: int) -> int:
        """Weight of the directly-follows relation from ``a`` to ``b`` (0 if absent)."""
        return self.edges.get((a, b), 0)

    def df_preset_of(self, act: int, df_threshold: int) -> set[int]:
        """Activities directly preceding ``act`` with weight at least ``df_threshold``."""
        return {a for (a, b), w in self.edges.items() if b == act and w >= df_threshold}

    def df_postset_of(self, act: int, df_threshold: int) -> Iterator[int]:
        """Activities directly following ``act`` with weight at least ``df_threshold``."""
        return (b for (a, b), w in self.edges.items() if a == act and w >= df_threshold)

    @classmethod
    def from_event_log_projection(
        cls, log: EventLogActivityProjection
    ) -> ActivityProjectionDFG:
        """Count weighted directly-follows pairs over all variants of ``log``."""
        edges: Counter[tuple[int, int]] = Counter()
        for trace, weight in log.traces:
            for pair in zip(trace, trace[1:]):
                edges[pair] += weight
        return cls(nodes=list(range(len(log.activities))), edges=dict(edges))


def add_start_end_acts_proj(log: EventLogActivityProjection) -> None:
    """Add artificial start and end activities to every trace, in place.

    If either artificial activity is already known, it is not added again
    and a warning is issued.
    """
    should_add_start = True
    start_act = log.act_to_index.get(START_ACTIVITY)
    if start_act is not None:
        warnings.warn(
            f"Start activity ({START_ACTIVITY}) already present in activity set! "
            "Will skip adding a start activity to every trace, "
            "which might not be the desired outcome."
        )
        should_add_start = False
    else:
        start_act = len(log.activities)
        log.activities.append(START_ACTIVITY)
        log.act_to_index[START_ACTIVITY] = start_act

    should_add_end = True
    end_act = log.act_to_index.get(END_ACTIVITY)
    if end_act is not None:
        warnings.warn(
            f"End activity ({END_ACTIVITY}) already present in activity set! "
            "Will skip adding an end activity to every trace, "
            "which might not be the desired outcome."
        )
        should_add_end = False
    else:
        end_act = len(log.activities)
        log.activities.append(END_ACTIVITY)
        log.act_to_index[END_ACTIVITY] = end_act

    for trace, _ in log.traces:
        if should_add_start:
            trace.insert(0, start_act)
        if should_add_end:
            trace.append(end_act)