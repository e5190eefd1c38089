"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class MalformedExpressionError(DomainError):
    """A split value is not a valid fraction expression.

    Fatal for the conversion of the current document.
    """

    def __init__(self, message: str, expression: str | None = None):
        super().__init__(message)
        self.expression = expression


class DocumentError(DomainError):
    """The source document cannot be read or parsed."""


class ConfigurationError(DomainError):
    """Invalid conversion settings."""


def malformed_expression(expression: str | None, reason: str | None = None) -> str:
    """Return message for an invalid fraction expression."""
    message = f"Malformed fraction expression {expression!r}"
    if reason:
        message = f"{message}: {reason}"
    return message


def document_unreadable(path: str, reason: object) -> str:
    """Return message for a document that cannot be read or parsed."""
    return f"Cannot read KMyMoney document '{path}': {reason}"


def invalid_setting(name: str, value: object, expected: str) -> str:
    """Return message for an invalid configuration value."""
    return f"Invalid value {value!r} for {name}: expected {expected}"
