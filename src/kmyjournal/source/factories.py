"""Factory functions for opening KMyMoney documents."""

import gzip
import re
import zlib
from pathlib import Path

from lxml import etree

from kmyjournal.domain.errors import DocumentError, document_unreadable
from kmyjournal.logging_setup import get_logger
from kmyjournal.source.arena import ArenaDocument

logger = get_logger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"

# Character.isISOControl: U+0000..U+001F and U+007F..U+009F
_ISO_CONTROL = re.compile("[\u0000-\u001f\u007f-\u009f]")


def strip_control_characters(text: str) -> str:
    """Remove ISO control characters from raw document text."""
    return _ISO_CONTROL.sub("", text)


def parse_document(text: str) -> ArenaDocument:
    """Parse KMyMoney XML text into an arena document.

    Raises:
        DocumentError: If the text is not well-formed XML
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(strip_control_characters(text).encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        raise DocumentError(f"Invalid KMyMoney XML: {e}") from e
    return ArenaDocument(root)


def read_document_text(path: str | Path) -> str:
    """Read a document, transparently decompressing gzip files.

    Raises:
        DocumentError: If the file cannot be read or decoded
    """
    try:
        raw = Path(path).read_bytes()
        if raw.startswith(_GZIP_MAGIC):
            logger.debug("Decompressing gzip document %s", path)
            raw = gzip.decompress(raw)
        return raw.decode("utf-8")
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise DocumentError(document_unreadable(str(path), e)) from e


def open_document(path: str | Path) -> ArenaDocument:
    """Read and parse the KMyMoney document at path."""
    text = read_document_text(path)
    try:
        document = parse_document(text)
    except DocumentError as e:
        raise DocumentError(document_unreadable(str(path), e)) from e
    logger.debug("Parsed %s into %d nodes", path, len(document))
    return document
