"""Utility functions for kmyjournal."""

from kmyjournal.utils.text_normalizer import escape, format_name, fold_newlines
from kmyjournal.utils.fraction import evaluate_fraction, parse_fraction
from kmyjournal.utils.dates import to_journal_date

__all__ = [
    "escape",
    "format_name",
    "fold_newlines",
    "evaluate_fraction",
    "parse_fraction",
    "to_journal_date",
]
