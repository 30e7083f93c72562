"""Client and vendor domain service."""

import uuid
from decimal import Decimal
from typing import Any, Optional

from shopledger.domain.entities import Party, PartyType
from shopledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_party_id,
    party_not_found,
)
from shopledger.domain.store import RecordStore
from shopledger.utils.amount_parser import lenient_amount


def new_id() -> str:
    """Generate an opaque record ID."""
    return uuid.uuid4().hex


class PartyService:
    """Service for managing clients and vendors."""

    def __init__(self, store: RecordStore):
        """Initialize party service.

        Args:
            store: Record store instance
        """
        self.store = store

    def create_party(
        self,
        party_type: PartyType,
        name: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
        opening_balance: Any = Decimal("0"),
        party_id: Optional[str] = None,
    ) -> Party:
        """Create a client or vendor.

        Args:
            party_type: Collection to add the party to
            name: Display name
            phone: Optional phone number
            address: Optional address
            notes: Optional notes
            opening_balance: Balance before any ledger entries
            party_id: Optional ID (generated if not provided)

        Returns:
            The created party

        Raises:
            ValidationError: If name is empty
            ConflictError: If an explicit party_id is already taken
        """
        party_type = PartyType(party_type)
        if party_id and self.store.find_party(party_type, party_id) is not None:
            raise ConflictError(duplicate_party_id(party_type.value, party_id))
        party = Party(
            id=party_id or new_id(),
            name=self._require_name(name),
            phone=phone,
            address=address,
            notes=notes,
            opening_balance=lenient_amount(opening_balance),
        )
        return self.store.upsert_party(party_type, party)

    def get_party(self, party_type: PartyType, party_id: str) -> Optional[Party]:
        """Get a party by ID, or None if not found."""
        return self.store.find_party(PartyType(party_type), party_id)

    def require_party(self, party_type: PartyType, party_id: str) -> Party:
        """Get a party by ID.

        Raises:
            NotFoundError: If the party does not exist
        """
        party = self.get_party(party_type, party_id)
        if party is None:
            raise NotFoundError(party_not_found(PartyType(party_type).value, party_id))
        return party

    def list_parties(self, party_type: PartyType) -> list[Party]:
        """List parties of a type in insertion order."""
        return list(self.store.list_parties(PartyType(party_type)))

    def update_party(
        self,
        party_type: PartyType,
        party_id: str,
        name: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
        opening_balance: Any = Decimal("0"),
    ) -> Party:
        """Replace every editable field of a party, keeping its ID.

        Raises:
            NotFoundError: If the party does not exist
            ValidationError: If name is empty
        """
        self.require_party(party_type, party_id)
        party = Party(
            id=party_id,
            name=self._require_name(name),
            phone=phone,
            address=address,
            notes=notes,
            opening_balance=lenient_amount(opening_balance),
        )
        return self.store.upsert_party(PartyType(party_type), party)

    def delete_party(self, party_type: PartyType, party_id: str) -> None:
        """Delete a party. Its ledger entries are kept and keep their reference.

        Raises:
            NotFoundError: If the party does not exist
        """
        if not self.store.remove_party(PartyType(party_type), party_id):
            raise NotFoundError(party_not_found(PartyType(party_type).value, party_id))

    def resolve_party(self, party_type: PartyType, identifier: str) -> Party:
        """Resolve a party by ID or exact name (case-insensitive).

        Raises:
            NotFoundError: If no party matches
            ValidationError: If the name matches more than one party
        """
        party = self.get_party(party_type, identifier)
        if party is not None:
            return party

        wanted = identifier.strip().lower()
        matches = [p for p in self.list_parties(party_type) if p.name.lower() == wanted]
        if len(matches) > 1:
            raise ValidationError(
                f"Name '{identifier}' matches {len(matches)} {PartyType(party_type).value}s; use the ID instead"
            )
        if not matches:
            raise NotFoundError(party_not_found(PartyType(party_type).value, identifier))
        return matches[0]

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise ValidationError("Party name is required")
        return name.strip()
