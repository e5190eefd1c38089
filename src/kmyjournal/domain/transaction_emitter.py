"""Transaction and posting emission."""

from typing import Optional

from kmyjournal.domain.account_path import AccountPathResolver
from kmyjournal.domain.entities import SPLITS
from kmyjournal.domain.errors import MalformedExpressionError, malformed_expression
from kmyjournal.domain.indexer import EntityIndex
from kmyjournal.logging_setup import get_logger
from kmyjournal.output.base import JournalWriter
from kmyjournal.source.base import Document
from kmyjournal.utils.dates import to_journal_date
from kmyjournal.utils.fraction import DEFAULT_MAX_SCALE, DEFAULT_MIN_SCALE, evaluate_fraction
from kmyjournal.utils.text_normalizer import NEWLINE_SEPARATOR, escape

logger = get_logger(__name__)

POSTING_PREFIX = "  "
POSTING_POSTFIX = "  "
PAYEE_SEPARATOR = " | "


class TransactionEmitter:
    """Turns KMyMoney transactions into hledger transactions.

    Each transaction is preceded by a blank line. The header takes payee and
    memo from the first split only; every split then becomes one posting in
    source order.
    """

    def __init__(
        self,
        document: Document,
        resolver: AccountPathResolver,
        payees: EntityIndex,
        writer: JournalWriter,
        *,
        newline_separator: str = NEWLINE_SEPARATOR,
        payee_separator: str = PAYEE_SEPARATOR,
        min_amount_scale: int = DEFAULT_MIN_SCALE,
        max_amount_scale: int = DEFAULT_MAX_SCALE,
    ):
        self.document = document
        self.resolver = resolver
        self.payees = payees
        self.writer = writer
        self.newline_separator = newline_separator
        self.payee_separator = payee_separator
        self.min_amount_scale = min_amount_scale
        self.max_amount_scale = max_amount_scale

    def payee_name(self, payee_id: Optional[str]) -> str:
        """Return the escaped payee name; "" when absent or dangling."""
        if not payee_id:
            return ""
        payee = self.payees.get(payee_id)
        if payee is None:
            logger.debug("Payee %r not found; using a blank payee", payee_id)
            return ""
        return escape(self.document.attribute(payee, "name"), self.newline_separator) or ""

    def memo(self, split: int) -> str:
        return escape(self.document.attribute(split, "memo"), self.newline_separator) or ""

    def amount(self, split: int) -> str:
        """Evaluate the split value.

        Raises:
            MalformedExpressionError: If the value is missing or malformed
        """
        value = self.document.attribute(split, "value")
        if value is None:
            raise MalformedExpressionError(
                malformed_expression(value, "split has no value"), value
            )
        return evaluate_fraction(value, self.min_amount_scale, self.max_amount_scale)

    def header(self, transaction: int, first_split: int) -> str:
        postdate = to_journal_date(self.document.attribute(transaction, "postdate"))
        transaction_id = self.document.attribute(transaction, "id") or ""
        payee = self.payee_name(self.document.attribute(first_split, "payee"))
        return f"{postdate} ({transaction_id}) {payee}{self.payee_separator}{self.memo(first_split)}\n"

    def posting(self, split: int, commodity: str) -> str:
        account = self.resolver.resolve_id(self.document.attribute(split, "account"))
        amount = self.amount(split)
        payee = self.payee_name(self.document.attribute(split, "payee"))
        return (
            f"{POSTING_PREFIX}{account}{POSTING_POSTFIX}{commodity} {amount}"
            f" ; {payee}{self.payee_separator}{self.memo(split)}\n"
        )

    def emit(self, transaction: int) -> int:
        """Write one transaction; return the number of postings written.

        Lines are written as they are produced, so a malformed split value
        leaves the header and earlier postings in the journal.
        """
        self.writer.write("\n", append=True)
        splits = self.document.find_nodes(transaction, SPLITS)
        if not splits:
            logger.debug(
                "Transaction %r has no splits", self.document.attribute(transaction, "id")
            )
            return 0

        commodity = self.document.attribute(transaction, "commodity") or ""
        self.writer.write(self.header(transaction, splits[0]), append=True)
        for split in splits:
            self.writer.write(self.posting(split, commodity), append=True)
        return len(splits)
