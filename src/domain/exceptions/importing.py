class NetworkImportError(Exception):
    """Base exception for a rejected feed. The import is aborted as a whole."""


class DecodingError(NetworkImportError):
    """Raised when a record field fails its domain coercion."""

    def __init__(self, table: str, line: int | None, detail: str) -> None:
        self.table = table
        self.line = line
        self.detail = detail
        where = f"{table}:{line}" if line is not None else table
        super().__init__(f"{where}: {detail}")


class UnresolvedReferenceError(NetworkImportError):
    """Raised when a record refers to an id that no defining record registered."""

    def __init__(self, table: str, kind: str, identifier: str | None) -> None:
        self.table = table
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{table}: unknown {kind} id {identifier!r}")


class NetworkConsistencyError(RuntimeError):
    """Raised when a durable network holds a dangling reference.

    The importer must never produce such a network, so this is a defect and
    deliberately not a NetworkImportError.
    """
