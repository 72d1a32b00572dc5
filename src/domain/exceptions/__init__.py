from .importing import (
    DecodingError,
    NetworkConsistencyError,
    NetworkImportError,
    UnresolvedReferenceError,
)

__all__ = [
    "DecodingError",
    "NetworkConsistencyError",
    "NetworkImportError",
    "UnresolvedReferenceError",
]
