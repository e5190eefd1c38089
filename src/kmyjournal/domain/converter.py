"""KMyMoney document to hledger journal conversion service."""

from pathlib import Path
from typing import Optional

from kmyjournal.config import ConversionSettings
from kmyjournal.domain.account_emitter import AccountEmitter
from kmyjournal.domain.account_path import AccountPathResolver
from kmyjournal.domain.entities import ConversionResult, Section
from kmyjournal.domain.errors import MalformedExpressionError
from kmyjournal.domain.indexer import DocumentIndex
from kmyjournal.domain.metadata_emitter import MetadataEmitter
from kmyjournal.domain.transaction_emitter import TransactionEmitter
from kmyjournal.logging_setup import get_logger
from kmyjournal.output.base import JournalWriter
from kmyjournal.output.writers import FileJournalWriter
from kmyjournal.source.base import Document
from kmyjournal.source.factories import open_document

logger = get_logger(__name__)


class ConversionService:
    """Service for converting KMyMoney documents into hledger journals."""

    def __init__(self, settings: Optional[ConversionSettings] = None):
        """Initialize conversion service.

        Args:
            settings: Conversion settings (defaults when None)
        """
        self.settings = settings or ConversionSettings()

    def target_path(self, source: str | Path) -> str:
        """Return the journal path for a source document."""
        return f"{source}{self.settings.journal_extension}"

    def convert_file(self, source: str | Path) -> ConversionResult:
        """Convert the document at ``source`` into ``<source>.journal``.

        Raises:
            DocumentError: If the document cannot be read or parsed
            MalformedExpressionError: If a split value is malformed; the
                journal written so far is left on disk
        """
        document = open_document(source)
        target = self.target_path(source)
        return self.convert_document(document, FileJournalWriter(target), str(source), target)

    def convert_document(
        self,
        document: Document,
        writer: JournalWriter,
        source_name: str,
        target_name: str = "",
    ) -> ConversionResult:
        """Write the journal for an already parsed document."""
        settings = self.settings
        result = ConversionResult(source=source_name, target=target_name)
        index = DocumentIndex(document)
        resolver = AccountPathResolver(document, index.accounts, settings.newline_separator)
        metadata = MetadataEmitter(document, writer, settings.newline_separator)

        writer.write(f"; Converted from KMyMoney file: {source_name}\n;\n", append=False)

        fileinfo = document.find_node(document.root, Section.FILEINFO)
        if fileinfo is not None:
            metadata.emit(metadata.fileinfo_block(fileinfo))
        else:
            self._missing(result, "FILEINFO")

        user = document.find_node(document.root, Section.USER)
        if user is not None:
            metadata.emit(metadata.user_block(user))
        else:
            self._missing(result, "USER")

        has_accounts = document.has_descendant(document.root, Section.ACCOUNTS)
        for institution in index.institutions.handles:
            metadata.emit(
                metadata.institution_block(
                    institution, index.accounts if has_accounts else None
                )
            )

        if settings.include_payees:
            for payee in index.payees.handles:
                metadata.emit(metadata.payee_block(payee))

        for costcenter in document.find_nodes(document.root, Section.COSTCENTERS):
            metadata.emit(metadata.costcenter_block(costcenter))
        for tag in document.find_nodes(document.root, Section.TAGS):
            metadata.emit(metadata.tag_block(tag))

        # End of the comment header.
        writer.write("\n", append=True)

        accounts = AccountEmitter(document, resolver, writer)
        for account in index.accounts.handles:
            accounts.emit(account)
            result.accounts += 1
        if not index.accounts.handles:
            self._missing(result, "ACCOUNTS")

        transactions = TransactionEmitter(
            document,
            resolver,
            index.payees,
            writer,
            newline_separator=settings.newline_separator,
            payee_separator=settings.payee_separator,
            min_amount_scale=settings.min_amount_scale,
            max_amount_scale=settings.max_amount_scale,
        )
        for transaction in index.transactions.handles:
            try:
                result.postings += transactions.emit(transaction)
            except MalformedExpressionError:
                logger.error(
                    "Aborting %s at transaction %r",
                    source_name,
                    document.attribute(transaction, "id"),
                )
                raise
            result.transactions += 1
        if not index.transactions.handles:
            self._missing(result, "TRANSACTIONS")

        logger.info(
            "Converted %s: %d accounts, %d transactions, %d postings",
            source_name,
            result.accounts,
            result.transactions,
            result.postings,
        )
        return result

    @staticmethod
    def _missing(result: ConversionResult, section: str) -> None:
        logger.debug("Section %s not present; skipping", section)
        result.missing_sections.append(section)
