"""Abstract journal writer interface."""

from abc import ABC, abstractmethod


class JournalWriter(ABC):
    """Sequential sink for journal text.

    A write with ``append=False`` discards anything written before.
    """

    @abstractmethod
    def write(self, content: str, append: bool = True) -> None:
        """Write content to the journal."""
        pass
