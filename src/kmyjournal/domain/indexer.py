"""Entity indexing: id -> node handle lookup tables."""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from kmyjournal.domain.entities import EntityKind
from kmyjournal.logging_setup import get_logger
from kmyjournal.source.base import Document

logger = get_logger(__name__)


class EntityIndex:
    """Immutable id -> handle mapping for one entity kind.

    ``handles`` keeps the source order of every indexed node, including
    duplicates; the mapping itself keeps the last node seen for an id.
    """

    def __init__(self, kind: EntityKind, mapping: Mapping[str, int], handles: tuple[int, ...]):
        self.kind = kind
        self._mapping = MappingProxyType(dict(mapping))
        self.handles = handles

    def get(self, entity_id: Optional[str]) -> Optional[int]:
        """Return the handle for an id, or None for a dangling reference."""
        if entity_id is None:
            return None
        return self._mapping.get(entity_id)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __bool__(self) -> bool:
        return bool(self._mapping)


def build_index(document: Document, kind: EntityKind) -> EntityIndex:
    """Index every entity of a kind by its ``id`` attribute.

    A missing section yields an empty index. Duplicate ids resolve
    last-wins and are logged; nodes without an id are not indexed.
    """
    handles = tuple(document.find_nodes(document.root, kind.path))
    if not handles:
        logger.debug("No %s section entries found", kind.section)

    mapping: dict[str, int] = {}
    for handle in handles:
        entity_id = document.attribute(handle, "id")
        if entity_id is None:
            logger.debug("Skipping %s node %d without id", kind.name.lower(), handle)
            continue
        if entity_id in mapping:
            logger.warning(
                "Duplicate %s id %r; keeping the last occurrence", kind.name.lower(), entity_id
            )
        mapping[entity_id] = handle
    return EntityIndex(kind, mapping, handles)


class DocumentIndex:
    """Lazily built, cached entity indexes for one document."""

    def __init__(self, document: Document):
        self.document = document
        self._indexes: dict[EntityKind, EntityIndex] = {}

    def __getitem__(self, kind: EntityKind) -> EntityIndex:
        if kind not in self._indexes:
            self._indexes[kind] = build_index(self.document, kind)
        return self._indexes[kind]

    @property
    def accounts(self) -> EntityIndex:
        return self[EntityKind.ACCOUNT]

    @property
    def payees(self) -> EntityIndex:
        return self[EntityKind.PAYEE]

    @property
    def institutions(self) -> EntityIndex:
        return self[EntityKind.INSTITUTION]

    @property
    def transactions(self) -> EntityIndex:
        return self[EntityKind.TRANSACTION]

    @property
    def reports(self) -> EntityIndex:
        return self[EntityKind.REPORT]
