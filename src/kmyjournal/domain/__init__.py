"""Domain layer for kmyjournal: indexing, path resolution and emission.

Services live in their own modules (``kmyjournal.domain.converter`` and
friends) and are imported from there; only error types are re-exported here
because the utility layer depends on them.
"""

from kmyjournal.domain.errors import (
    ConfigurationError,
    DocumentError,
    DomainError,
    MalformedExpressionError,
)

__all__ = [
    "ConfigurationError",
    "DocumentError",
    "DomainError",
    "MalformedExpressionError",
]
