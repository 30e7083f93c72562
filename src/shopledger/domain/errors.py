"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested party or ledger entry does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate identifier."""


def party_not_found(party_type: str, party_id: str) -> str:
    """Return message for a missing client or vendor."""
    return f"{party_type.capitalize()} '{party_id}' not found"


def entry_not_found(entry_id: str) -> str:
    """Return message for a missing ledger entry."""
    return f"Ledger entry '{entry_id}' not found"


def duplicate_entry_id(entry_id: str) -> str:
    """Return message for a ledger entry ID that is already taken."""
    return f"Ledger entry with id '{entry_id}' already exists"


def missing_snapshot_keys(keys: list[str]) -> str:
    """Return message for an import payload lacking top-level sections."""
    return f"Invalid backup file: missing {', '.join(repr(k) for k in keys)}"


def duplicate_party_id(party_type: str, party_id: str) -> str:
    """Return message for a client or vendor ID that is already taken."""
    return f"{party_type.capitalize()} with id '{party_id}' already exists"


def duplicate_snapshot_ids(collection: str, ids: list[str]) -> str:
    """Return message for an import payload reusing record IDs."""
    return f"Invalid backup file: duplicate {collection} id {', '.join(repr(i) for i in ids)}"
