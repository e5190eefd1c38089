"""Output layer for kmyjournal."""

from kmyjournal.output.base import JournalWriter
from kmyjournal.output.writers import FileJournalWriter, MemoryJournalWriter

__all__ = ["JournalWriter", "FileJournalWriter", "MemoryJournalWriter"]
