"""Domain entities for kmyjournal.

KMyMoney entities are not copied out of the source tree; the converter works
on node handles. These types describe where each entity kind lives and what a
conversion produced.
"""

from dataclasses import dataclass, field
from enum import Enum

ROOT_TAG = "KMYMONEY-FILE"


class EntityKind(Enum):
    """Entity kinds that are indexed by id."""

    INSTITUTION = ("INSTITUTIONS", "INSTITUTION")
    PAYEE = ("PAYEES", "PAYEE")
    ACCOUNT = ("ACCOUNTS", "ACCOUNT")
    TRANSACTION = ("TRANSACTIONS", "TRANSACTION")
    REPORT = ("REPORTS", "REPORT")

    @property
    def section(self) -> str:
        return self.value[0]

    @property
    def path(self) -> tuple[str, str, str]:
        """Path from the document root to every entity of this kind."""
        return (ROOT_TAG, *self.value)


class Section:
    """Paths of the top-level sections the converter reads."""

    FILEINFO = (ROOT_TAG, "FILEINFO")
    USER = (ROOT_TAG, "USER")
    COSTCENTERS = (ROOT_TAG, "COSTCENTERS", "COSTCENTER")
    TAGS = (ROOT_TAG, "TAGS", "TAG")
    ACCOUNTS = (ROOT_TAG, "ACCOUNTS")


# Relative paths, starting at the entity node itself.
SPLITS = ("*", "SPLITS", "SPLIT")
ADDRESS = ("*", "ADDRESS")
ACCOUNT_IDS = ("*", "ACCOUNTIDS", "ACCOUNTID")


@dataclass
class ConversionResult:
    """Summary of one converted document."""

    source: str
    target: str
    accounts: int = 0
    transactions: int = 0
    postings: int = 0
    missing_sections: list[str] = field(default_factory=list)
