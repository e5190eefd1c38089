"""Source layer: read-only access to parsed KMyMoney documents."""

from kmyjournal.source.base import ANY, Document, Node
from kmyjournal.source.arena import ArenaDocument
from kmyjournal.source.factories import open_document, parse_document

__all__ = ["ANY", "Document", "Node", "ArenaDocument", "open_document", "parse_document"]
