"""Hierarchical account path resolution."""

from typing import Optional

from kmyjournal.domain.indexer import EntityIndex
from kmyjournal.logging_setup import get_logger
from kmyjournal.source.base import Document
from kmyjournal.utils.text_normalizer import NEWLINE_SEPARATOR, escape, format_name

logger = get_logger(__name__)


class AccountPathResolver:
    """Resolves accounts to colon-joined paths, root first.

    Declaration mode formats each segment (lowercase, top-level names mapped
    to hledger types); comment mode only escapes it. A ``parentaccount`` that
    is blank or does not resolve ends the chain. An account without a name
    contributes an empty segment.
    """

    def __init__(
        self,
        document: Document,
        accounts: EntityIndex,
        newline_separator: str = NEWLINE_SEPARATOR,
    ):
        self.document = document
        self.accounts = accounts
        self.newline_separator = newline_separator
        self._cache: dict[tuple[int, bool], str] = {}

    def resolve(self, account: int, as_comment: bool = False) -> str:
        """Return the full path of an account node."""
        key = (account, as_comment)
        if key not in self._cache:
            self._resolve_chain(account, as_comment)
        return self._cache[key]

    def resolve_id(self, account_id: Optional[str], as_comment: bool = False) -> str:
        """Return the path for an account id; "" if the id does not resolve."""
        handle = self.accounts.get(account_id)
        if handle is None:
            logger.warning("Account %r not found; using a blank account path", account_id)
            return ""
        return self.resolve(handle, as_comment)

    def parent_of(self, account: int) -> Optional[int]:
        """Return the parent account handle, or None for a root account."""
        parent_id = self.document.attribute(account, "parentaccount")
        if not parent_id:
            return None
        parent = self.accounts.get(parent_id)
        if parent is None:
            logger.debug(
                "Parent account %r of %r not found; treating as root",
                parent_id,
                self.document.attribute(account, "id"),
            )
        return parent

    def segment(self, account: int, as_comment: bool = False) -> str:
        """Return the normalized name of a single account."""
        name = self.document.attribute(account, "name")
        normalize = escape if as_comment else format_name
        return normalize(name, self.newline_separator) or ""

    def _chain(self, account: int) -> tuple[list[int], bool]:
        """Return the ancestors of an account, root first, and whether a cycle was cut."""
        chain = [account]
        seen = {account}
        parent = self.parent_of(account)
        while parent is not None:
            if parent in seen:
                logger.warning(
                    "Account %r has a cyclic parent chain; treating %r as root",
                    self.document.attribute(account, "id"),
                    self.document.attribute(chain[-1], "id"),
                )
                return chain[::-1], True
            chain.append(parent)
            seen.add(parent)
            parent = self.parent_of(parent)
        return chain[::-1], False

    def _resolve_chain(self, account: int, as_comment: bool) -> None:
        chain, cyclic = self._chain(account)
        segments = [self.segment(handle, as_comment) for handle in chain]
        if cyclic:
            # Where a cycle is cut depends on the starting account.
            self._cache[(account, as_comment)] = ":".join(segments)
            return
        for depth, handle in enumerate(chain, start=1):
            self._cache.setdefault((handle, as_comment), ":".join(segments[:depth]))
