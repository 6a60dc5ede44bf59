"""Directly-follows graphs over activity names, with frequencies."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

Activity = str
"""Activity in a directly-follows graph."""

Relation = tuple[Activity, Activity]


@dataclass
class DirectlyFollowsGraph:
    """A directly-follows graph annotated with activity and relation frequencies.

    Holds the activities with their occurrence counts, the directly-follows
    relations with their counts, and the sets of start and end activities.
    """

    activities: dict[Activity, int] = field(default_factory=dict)
    directly_follows_relations: dict[Relation, int] = field(default_factory=dict)
    start_activities: set[Activity] = field(default_factory=set)
    end_activities: set[Activity] = field(default_factory=set)

    def add_activity(self, activity: Activity, frequency: int) -> None:
        """Add an activity, adding ``frequency`` to its count if already present."""
        self.activities[activity] = self.activities.get(activity, 0) + frequency

    def add_start_activity(self, activity: Activity) -> None:
        """Mark an activity as a start activity."""
        self.start_activities.add(activity)

    def add_end_activity(self, activity: Activity) -> None:
        """Mark an activity as an end activity."""
        self.end_activities.add(activity)

    def contains_activity(self, activity: Activity) -> bool:
        """Whether the activity is part of the graph."""
        return activity in self.activities

    def is_start_activity(self, activity: Activity) -> bool:
        """Whether the activity is a start activity."""
        return activity in self.start_activities

    def is_end_activity(self, activity: Activity) -> bool:
        """Whether the activity is an end activity."""
        return activity in self.end_activities

    def remove_activity(self, activity: Activity) -> None:
        """Remove an activity together with its start/end marks and relations."""
        if self.activities.pop(activity, None) is None:
            return
        self.start_activities.discard(activity)
        self.end_activities.discard(activity)
        self.directly_follows_relations = {
            (src, dst): freq
            for (src, dst), freq in self.directly_follows_relations.items()
            if src != activity and dst != activity
        }

    def add_df_relation(self, from_act: Activity, to_act: Activity, frequency: int) -> None:
        """Add a directly-follows relation, adding ``frequency`` to its count if present."""
        key = (from_act, to_act)
        self.directly_follows_relations[key] = (
            self.directly_follows_relations.get(key, 0) + frequency
        )

    def contains_df_relation(self, relation: Relation) -> bool:
        """Whether the pair ``(from, to)`` is a directly-follows relation."""
        return tuple(relation) in self.directly_follows_relations

    def ingoing_activities(self, activity: Activity) -> set[Activity]:
        """Activities with a relation into ``activity``."""
        return {src for src, dst in self.directly_follows_relations if dst == activity}

    def outgoing_activities(self, activity: Activity) -> set[Activity]:
        """Activities reached by a relation from ``activity``."""
        return {dst for src, dst in self.directly_follows_relations if src == activity}

    def get_ingoing_df_relations(self, activity: Activity) -> set[Relation]:
        """Relations ending in ``activity``."""
        return {rel for rel in self.directly_follows_relations if rel[1] == activity}

    def get_outgoing_df_relations(self, activity: Activity) -> set[Relation]:
        """Relations starting at ``activity``."""
        return {rel for rel in self.directly_follows_relations if rel[0] == activity}

    def to_json(self) -> str:
        """Serialize to JSON; relations are written as ``[[from, to], frequency]`` pairs."""
        return json.dumps(
            {
                "activities": self.activities,
                "directly_follows_relations": [
                    [[src, dst], freq]
                    for (src, dst), freq in self.directly_follows_relations.items()
                ],
                "start_activities": sorted(self.start_activities),
                "end_activities": sorted(self.end_activities),
            }
        )

    @classmethod
    def from_json(cls, json_str: str) -> DirectlyFollowsGraph:
        """Parse a graph from the JSON form written by :meth:`to_json`."""
        data = json.loads(json_str)
        try:
            activities = {str(k): int(v) for k, v in data["activities"].items()}
            relations: dict[Relation, int] = {}
            for (src, dst), freq in data["directly_follows_relations"]:
                relations[(str(src), str(dst))] = int(freq)
            start = {str(a) for a in data["start_activities"]}
            end = {str(a) for a in data["end_activities"]}
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"Invalid directly-follows graph JSON: {exc}") from exc
        return cls(
            activities=activities,
            directly_follows_relations=relations,
            start_activities=start,
            end_activities=end,
        )