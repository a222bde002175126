"""Tunable constants for the d-ary heap."""

DEFAULT_BRANCHING_FACTOR = 2
MIN_BRANCHING_FACTOR = 2

# Slot 0 of the backing array is never used.
ROOT_INDEX = 1

# A bulk-built heap reserves (n + 2) * 11 / 10 slots.
BULK_SLACK_NUMERATOR = 11
BULK_SLACK_DENOMINATOR = 10
