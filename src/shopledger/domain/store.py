"""In-memory record store for parties and ledger entries."""

from dataclasses import replace
from typing import Optional

from shopledger.domain.entities import (
    Company,
    LedgerEntry,
    Party,
    PartyType,
    as_party_type,
    Snapshot,
)
from shopledger.domain.errors import ValidationError
from shopledger.utils.logging_utils import get_logger

logger = get_logger(__name__)


class RecordStore:
    """Owner of the client, vendor and ledger collections.

    The store only checks that parties have a name and entries have a date.
    Cross-field consistency (for example an expense that names a party) is
    the caller's concern, and such records are kept exactly as given.

    Readers should work from ``snapshot()``, which returns immutable tuples,
    so a report never observes a collection mid-mutation.
    """

    def __init__(
        self,
        company: Optional[Company] = None,
        clients: Optional[list[Party]] = None,
        vendors: Optional[list[Party]] = None,
        ledger: Optional[list[LedgerEntry]] = None,
    ):
        self.company = company or Company()
        self._parties: dict[PartyType, list[Party]] = {
            PartyType.CLIENT: list(clients or []),
            PartyType.VENDOR: list(vendors or []),
        }
        self._ledger: list[LedgerEntry] = list(ledger or [])

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "RecordStore":
        """Create a store holding the records of ``snapshot``."""
        return cls(
            company=snapshot.company,
            clients=list(snapshot.clients),
            vendors=list(snapshot.vendors),
            ledger=list(snapshot.ledger),
        )

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the current records."""
        return Snapshot(
            company=self.company,
            clients=tuple(self._parties[PartyType.CLIENT]),
            vendors=tuple(self._parties[PartyType.VENDOR]),
            ledger=tuple(self._ledger),
        )

    def list_clients(self) -> tuple[Party, ...]:
        return tuple(self._parties[PartyType.CLIENT])

    def list_vendors(self) -> tuple[Party, ...]:
        return tuple(self._parties[PartyType.VENDOR])

    def list_parties(self, party_type: PartyType) -> tuple[Party, ...]:
        return tuple(self._parties[PartyType(party_type)])

    def list_entries(self) -> tuple[LedgerEntry, ...]:
        return tuple(self._ledger)

    def find_party(
        self, party_type: Optional[PartyType], party_id: Optional[str]
    ) -> Optional[Party]:
        """Find a party by type and ID.

        Returns None when either key is missing or no such party exists.
        """
        party_type = as_party_type(party_type)
        if party_type is None or not party_id:
            return None
        for party in self._parties[party_type]:
            if party.id == party_id:
                return party
        return None

    def find_entry(self, entry_id: str) -> Optional[LedgerEntry]:
        for entry in self._ledger:
            if entry.id == entry_id:
                return entry
        return None

    def upsert_party(self, party_type: PartyType, party: Party) -> Party:
        """Insert a party, or replace the one with the same ID in place.

        Raises:
            ValidationError: If the party has no name
        """
        if not party.name or not party.name.strip():
            raise ValidationError("Party name is required")

        parties = self._parties[PartyType(party_type)]
        for index, existing in enumerate(parties):
            if existing.id == party.id:
                parties[index] = party
                logger.debug("Replaced %s %s", party_type, party.id)
                return party

        parties.append(party)
        logger.debug("Added %s %s", party_type, party.id)
        return party

    def remove_party(self, party_type: PartyType, party_id: str) -> bool:
        """Remove a party. Entries that reference it are left untouched.

        Returns:
            True if a party was removed
        """
        parties = self._parties[PartyType(party_type)]
        for index, existing in enumerate(parties):
            if existing.id == party_id:
                del parties[index]
                logger.debug("Removed %s %s", party_type, party_id)
                return True
        return False

    def upsert_entry(self, entry: LedgerEntry) -> LedgerEntry:
        """Insert a ledger entry, or replace the one with the same ID in place.

        Raises:
            ValidationError: If the entry has no date
        """
        if not entry.date or not entry.date.strip():
            raise ValidationError("Entry date is required")

        for index, existing in enumerate(self._ledger):
            if existing.id == entry.id:
                self._ledger[index] = entry
                logger.debug("Replaced %s entry %s", entry.entry_type.value, entry.id)
                return entry

        self._ledger.append(entry)
        logger.debug("Added %s entry %s", entry.entry_type.value, entry.id)
        return entry

    def remove_entry(self, entry_id: str) -> bool:
        """Remove a ledger entry.

        Returns:
            True if an entry was removed
        """
        for index, existing in enumerate(self._ledger):
            if existing.id == entry_id:
                del self._ledger[index]
                logger.debug("Removed entry %s", entry_id)
                return True
        return False

    def update_company(self, **changes) -> Company:
        """Replace selected company settings."""
        self.company = replace(self.company, **changes)
        return self.company
