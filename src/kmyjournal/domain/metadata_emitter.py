"""Comment blocks for KMyMoney metadata sections.

Attribute values are copied into ``;`` comment lines with newlines folded.
Institution and account attributes are fully escaped and blank ones are
dropped, since hledger reads them as tags.
"""

from typing import Optional

from kmyjournal.domain.account_emitter import attribute_comments
from kmyjournal.domain.entities import ACCOUNT_IDS, ADDRESS
from kmyjournal.domain.indexer import EntityIndex
from kmyjournal.output.base import JournalWriter
from kmyjournal.source.base import Document
from kmyjournal.utils.text_normalizer import NEWLINE_SEPARATOR, fold_newlines


class MetadataEmitter:
    """Writes FILEINFO, USER, INSTITUTION, PAYEE, COSTCENTER and TAG blocks."""

    def __init__(
        self,
        document: Document,
        writer: JournalWriter,
        newline_separator: str = NEWLINE_SEPARATOR,
    ):
        self.document = document
        self.writer = writer
        self.separator = newline_separator

    def _attribute_lines(self, handle: Optional[int]) -> str:
        if handle is None:
            return ""
        return "".join(
            f"; {name}: {fold_newlines(value, self.separator)}\n"
            for name, value in self.document.attributes(handle).items()
        )

    def _address_lines(self, handle: int) -> str:
        return self._attribute_lines(self.document.find_node(handle, ADDRESS))

    def fileinfo_block(self, fileinfo: int) -> str:
        lines = []
        for child in self.document.children(fileinfo):
            values = "".join(
                f" {fold_newlines(value, self.separator)}"
                for value in self.document.attributes(child).values()
            )
            lines.append(f"; {self.document.tag(child)}:{values}\n")
        return "; --FILEINFO--\n" + "".join(lines) + ";\n"

    def user_block(self, user: int) -> str:
        return (
            "; --USER--\n"
            + self._attribute_lines(user)
            + self._address_lines(user)
            + ";\n"
        )

    def institution_block(self, institution: int, accounts: Optional[EntityIndex] = None) -> str:
        """Render an institution; linked accounts are expanded when indexed."""
        lines = [
            attribute_comments(self.document, institution, "; ", self.separator),
            self._address_lines(institution),
        ]
        for account_ref in self.document.find_nodes(institution, ACCOUNT_IDS):
            account_id = self.document.attribute(account_ref, "id")
            lines.append(f"; accountid: {account_id or ''}\n")
            if accounts is None:
                continue
            account = accounts.get(account_id)
            if account is not None:
                lines.append(attribute_comments(self.document, account, ";\t", self.separator))
        return "; --INSTITUTIONS--\n" + "".join(lines) + ";\n"

    def payee_block(self, payee: int) -> str:
        return (
            "; --PAYEE--\n"
            + self._attribute_lines(payee)
            + self._address_lines(payee)
            + ";\n"
        )

    def costcenter_block(self, costcenter: int) -> str:
        return "; --COSTCENTER--\n" + self._attribute_lines(costcenter) + ";\n"

    def tag_block(self, tag: int) -> str:
        return "; --TAG--\n" + self._attribute_lines(tag) + ";\n"

    def emit(self, block: str) -> None:
        self.writer.write(block, append=True)
