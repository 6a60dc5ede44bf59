"""Well-known attribute keys used throughout event logs."""

ACTIVITY_NAME = "concept:name"
"""Common identifying attribute for event identities (activities)."""

TRACE_PREFIX = "case:"
"""Prefix for trace attribute keys when flattening a log to events only."""

TRACE_ID_NAME = "concept:name"
"""Common identifying attribute for trace identities (case ids)."""

PREFIXED_TRACE_ID_NAME = TRACE_PREFIX + TRACE_ID_NAME
"""Combination of TRACE_PREFIX and TRACE_ID_NAME."""