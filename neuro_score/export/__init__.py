"""Report export."""

from neuro_score.export.canonical_text import render_history, to_canonical_text
from neuro_score.export.formatting import format_date, format_number

__all__ = ["format_date", "format_number", "render_history", "to_canonical_text"]
