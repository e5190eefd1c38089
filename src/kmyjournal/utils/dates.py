"""Journal date rendering."""

import re
from typing import Optional

_KMYMONEY_DATE = re.compile(r"(....)-(..)-(..)")


def to_journal_date(kmymoney_date: Optional[str]) -> str:
    """Convert KMyMoney's yyyy-mm-dd to hledger's yyyy/mm/dd.

    The substitution is purely textual; no calendar validation is done and
    text that does not look like a date passes through unchanged.
    """
    if kmymoney_date is None or not kmymoney_date.strip():
        return ""
    return _KMYMONEY_DATE.sub(r"\1/\2/\3", kmymoney_date)
