"""Arena-backed document built from an lxml element tree."""

from types import MappingProxyType

from lxml import etree

from kmyjournal.source.base import ANY, Document, Node, Path


class ArenaDocument(Document):
    """Document whose nodes live in a flat list indexed by handle.

    The tree is flattened once at construction and the root is always
    handle 0. Children keep their source order.
    """

    def __init__(self, root_element):
        self._nodes: list[Node] = []
        self._flatten(root_element)

    def _flatten(self, root_element) -> None:
        slots: list[Node | None] = [None]
        pending = [(0, root_element)]
        while pending:
            handle, element = pending.pop()
            children = list(element.iterchildren(tag=etree.Element))
            child_handles = tuple(range(len(slots), len(slots) + len(children)))
            slots.extend([None] * len(children))
            slots[handle] = Node(
                handle=handle,
                tag=etree.QName(element).localname,
                attrs=MappingProxyType(dict(element.attrib)),
                children=child_handles,
            )
            pending.extend(zip(child_handles, children))
        self._nodes = slots

    @property
    def root(self) -> int:
        return 0

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, handle: int) -> Node:
        return self._nodes[handle]

    def find_nodes(self, start: int, path: Path) -> list[int]:
        if not path or not _matches(self._nodes[start].tag, path[0]):
            return []
        frontier = [start]
        for tag in path[1:]:
            frontier = [
                child
                for handle in frontier
                for child in self._nodes[handle].children
                if _matches(self._nodes[child].tag, tag)
            ]
            if not frontier:
                break
        return frontier


def _matches(tag: str, pattern: str) -> bool:
    return pattern == ANY or tag == pattern
