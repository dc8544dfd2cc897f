"""Test history."""

from neuro_score.history.reader import (
    UNKNOWN_APPLIER,
    HistoryEntry,
    SubscoreRow,
    order_history,
    subscore_rows,
    summarize_history,
)

__all__ = [
    "UNKNOWN_APPLIER",
    "HistoryEntry",
    "SubscoreRow",
    "order_history",
    "subscore_rows",
    "summarize_history",
]
