"""Journal writer implementations."""

from pathlib import Path

from kmyjournal.output.base import JournalWriter


class FileJournalWriter(JournalWriter):
    """Writes journal text to a UTF-8 file, one open per write call.

    Nothing is buffered between calls, so output written before a failure
    stays on disk.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, content: str, append: bool = True) -> None:
        mode = "a" if append else "w"
        with self.path.open(mode, encoding="utf-8", newline="\n") as fh:
            fh.write(content)


class MemoryJournalWriter(JournalWriter):
    """Collects journal text in memory."""

    def __init__(self):
        self._parts: list[str] = []

    def write(self, content: str, append: bool = True) -> None:
        if not append:
            self._parts.clear()
        self._parts.append(content)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def lines(self) -> list[str]:
        return self.getvalue().split("\n")
