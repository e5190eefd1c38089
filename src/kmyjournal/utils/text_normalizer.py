"""Text normalization for hledger comments, labels and account names.

Two profiles are provided:

- ``escape`` folds newlines, replaces characters that are syntactically
  significant in a journal (``:;|[]``) with spaces, trims and collapses
  whitespace. Case is preserved. Used for comments and free text.
- ``format_name`` applies ``escape``, lowercases the result and maps the five
  KMyMoney top-level account names onto hledger's account types.

Blank input (``None``, empty or whitespace only) is returned unchanged.
"""

import re
from typing import Optional

NEWLINE_SEPARATOR = " => "

# hledger account types: asset, liability, equity, revenue, expense
TOP_LEVEL_ACCOUNTS = {
    "asset": "asset",
    "liability": "liability",
    "equity": "equity",
    "income": "revenue",
    "expense": "expense",
}

_SPECIAL_CHARACTERS = re.compile(r"[:;|\[\]]")
_WHITESPACE = re.compile(r"\s+")


def is_blank(text: Optional[str]) -> bool:
    """Return True for None, empty or whitespace-only text."""
    return text is None or not text.strip()


def fold_newlines(text: Optional[str], separator: str = NEWLINE_SEPARATOR) -> str:
    """Replace every newline with ``separator``. Blank text yields ""."""
    if is_blank(text):
        return ""
    return text.replace("\n", separator)


def _replace_special_characters(text: str) -> str:
    return _SPECIAL_CHARACTERS.sub(" ", text)


def _condense_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text.strip())


def escape(text: Optional[str], separator: str = NEWLINE_SEPARATOR) -> Optional[str]:
    """Make free text safe for a journal comment, preserving case.

    Examples:
        >>> escape("a\\nb")
        'a => b'
        >>> escape("a:b;c")
        'a b c'
    """
    if is_blank(text):
        return text
    escaped = fold_newlines(text, separator)
    escaped = _replace_special_characters(escaped)
    return _condense_whitespace(escaped)


def format_name(text: Optional[str], separator: str = NEWLINE_SEPARATOR) -> Optional[str]:
    """Escape and lowercase text for use as an account segment or label.

    A result equal to one of the KMyMoney top-level account names is mapped
    to the corresponding hledger account type (``income`` -> ``revenue``).
    """
    if is_blank(text):
        return text
    formatted = escape(text, separator).lower()
    return TOP_LEVEL_ACCOUNTS.get(formatted, formatted)


def is_top_level_account(name: Optional[str]) -> bool:
    """Return True if the formatted name is a KMyMoney top-level account."""
    if is_blank(name):
        return False
    return escape(name).lower() in TOP_LEVEL_ACCOUNTS
