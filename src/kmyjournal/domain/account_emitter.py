"""Account declaration emission."""

from kmyjournal.domain.account_path import AccountPathResolver
from kmyjournal.output.base import JournalWriter
from kmyjournal.source.base import Document
from kmyjournal.utils.text_normalizer import escape, format_name, is_blank

ACCOUNT_POSTFIX = "  "

# hledger reads "type:" tags as account types, so KMyMoney's own type
# attribute is renamed.
TYPE_ATTRIBUTE_RENAMES = {"type": "kmymoney-type"}


def attribute_comments(document: Document, handle: int, prefix: str, separator: str) -> str:
    """Render escaped, non-blank attributes as ``<prefix><name>: <value>`` lines."""
    lines = []
    for name, value in document.attributes(handle).items():
        escaped = escape(value, separator)
        if is_blank(escaped):
            continue
        lines.append(f"{prefix}{TYPE_ATTRIBUTE_RENAMES.get(name, name)}: {escaped}\n")
    return "".join(lines)


class AccountEmitter:
    """Emits ``account`` directives with their attributes as comments."""

    def __init__(self, document: Document, resolver: AccountPathResolver, writer: JournalWriter):
        self.document = document
        self.resolver = resolver
        self.writer = writer

    def declaration(self, account: int) -> str:
        """Return the declaration block for one account."""
        separator = self.resolver.newline_separator
        path = self.resolver.resolve(account)
        comment_path = self.resolver.resolve(account, as_comment=True)
        block = f"account {path}{ACCOUNT_POSTFIX}; {comment_path}\n"

        attrs = self.document.attributes(account)
        if is_blank(attrs.get("parentaccount")) and "name" in attrs:
            account_type = (format_name(attrs["name"], separator) or "").capitalize()
            block += f"  ; type: {account_type}\n"
        block += attribute_comments(self.document, account, "  ; ", separator)
        return block + "\n"

    def emit(self, account: int) -> None:
        self.writer.write(self.declaration(account), append=True)
