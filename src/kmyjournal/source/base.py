"""Abstract source document interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

# Path element matching any tag.
ANY = "*"

Path = Sequence[str]


@dataclass(frozen=True)
class Node:
    """A tree element addressed by an integer handle."""

    handle: int
    tag: str
    attrs: Mapping[str, str]
    children: tuple[int, ...]


class Document(ABC):
    """Read-only view of a parsed KMyMoney document.

    Nodes are addressed by integer handles. Paths are tag sequences whose
    first element matches the start node and each following element matches
    a child of the previous match; ``"*"`` matches any tag.
    """

    @property
    @abstractmethod
    def root(self) -> int:
        """Handle of the root element."""
        pass

    @abstractmethod
    def node(self, handle: int) -> Node:
        """Return the node for a handle."""
        pass

    @abstractmethod
    def find_nodes(self, start: int, path: Path) -> list[int]:
        """Return handles of all nodes matching path, in document order."""
        pass

    def find_node(self, start: int, path: Path) -> Optional[int]:
        """Return the first node matching path, or None."""
        matches = self.find_nodes(start, path)
        return matches[0] if matches else None

    def has_descendant(self, start: int, path: Path) -> bool:
        """Return True if at least one node matches path."""
        return self.find_node(start, path) is not None

    def attributes(self, handle: int) -> Mapping[str, str]:
        """Return the attributes of a node in source order."""
        return self.node(handle).attrs

    def attribute(self, handle: int, name: str) -> Optional[str]:
        """Return one attribute of a node, or None if absent."""
        return self.node(handle).attrs.get(name)

    def children(self, handle: int) -> tuple[int, ...]:
        """Return child handles of a node in source order."""
        return self.node(handle).children

    def tag(self, handle: int) -> str:
        """Return the tag name of a node."""
        return self.node(handle).tag
