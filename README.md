# procmine

A small, dependency-free set of process mining building blocks.

## Modules

- `procmine.constants` — well-known attribute keys: `ACTIVITY_NAME`
  (`"concept:name"`), `TRACE_PREFIX` (`"case:"`), `TRACE_ID_NAME` and
  `PREFIXED_TRACE_ID_NAME` (`"case:concept:name"`).
- `procmine.activity_projection` — `EventLogActivityProjection` holds an
  event log reduced to activity indices, with each distinct trace variant
  stored once together with its frequency. Build one with
  `EventLogActivityProjection.from_activity_sequences(...)` from one sequence
  of activity names per trace (`None` becomes `"No Activity"`).
  `ActivityProjectionDFG.from_event_log_projection(...)` counts the weighted
  directly-follows pairs; `df_between`, `df_preset_of` and `df_postset_of`
  query it. `add_start_end_acts_proj(log)` adds the artificial
  `START_ACTIVITY` (`"__START"`) and `END_ACTIVITY` (`"__END"`) to every trace
  in place, issuing a warning and skipping one that is already present.
- `procmine.log_repair` — Alpha+++ log repair: `filter_dfg` drops edges below
  an absolute weight or below a relative share of the mean weight around
  them; `add_artificial_acts_for_skips` and `add_artificial_acts_for_loops`
  return a repaired copy of the log plus the names of the silent activities
  added (prefixed with `SILENT_ACT_PREFIX`, `"__SILENT__"`);
  `get_reachable_bf` is the breadth-first path search used for loops. Both
  repairs need the artificial start and end activities and raise
  `ValueError` without them.
- `procmine.candidate_building` — `build_candidates(dfg)` returns place
  candidates as pairs of sorted input and output activity-index tuples;
  `satisfies_cnd_condition` checks a single candidate against a
  directly-follows relation.
- `procmine.candidate_pruning` — `prune_candidates(...)` keeps candidates
  that pass the balance, local fitness, maximality and strict replay checks,
  returned in sorted order. The log must contain the artificial start and
  end activities.
- `procmine.dfg` — `DirectlyFollowsGraph` over activity names with activity
  and relation frequencies and start/end activity sets. It supports adding
  and removing activities, querying ingoing and outgoing activities and
  relations, and JSON round-tripping via `to_json()` /
  `DirectlyFollowsGraph.from_json(...)`, where relations are written as
  `[[from, to], frequency]` pairs.
- `procmine.splitting` — `random_activity_split` distributes a set of
  activity names randomly over a given number of disjoint subsets (non-empty
  when there are at least as many activities as subsets);
  `random_activity_split_max_bins` picks the number of subsets at random.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from procmine.activity_projection import (
    ActivityProjectionDFG,
    EventLogActivityProjection,
    add_start_end_acts_proj,
)
from procmine.candidate_building import build_candidates
from procmine.candidate_pruning import prune_candidates

log = EventLogActivityProjection.from_activity_sequences(
    [["a", "b", "c"], ["a", "c", "b"], ["a", "b", "c"]]
)
add_start_end_acts_proj(log)

dfg = ActivityProjectionDFG.from_event_log_projection(log)
candidates = build_candidates(dfg)

act_count = [0] * len(log.activities)
for trace, weight in log.traces:
    for act in trace:
        act_count[act] += weight

places = prune_candidates(candidates, 0.1, 0.8, 0.0, act_count, log)
for inputs, outputs in places:
    print(log.acts_to_names(inputs), "->", log.acts_to_names(outputs))
```

Directly-follows graphs:

```python
from procmine.dfg import DirectlyFollowsGraph

graph = DirectlyFollowsGraph()
graph.add_activity("Work", 11)
graph.add_activity("Sleep", 13)
graph.add_df_relation("Work", "Sleep", 4)
graph.add_start_activity("Work")
graph.add_end_activity("Sleep")

text = graph.to_json()
assert DirectlyFollowsGraph.from_json(text) == graph
```

## What this package does not do

- It does not read or write event log files; projections are built from
  activity-name sequences you supply.
- It provides the steps of Alpha+++ (log repair, candidate building and
  pruning) but does not assemble a Petri net from them, choose parameters
  automatically, or check conformance.
- It does not draw or render directly-follows graphs.
- There is no command-line tool.