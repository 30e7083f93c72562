"""Tests for the client/vendor service."""

from decimal import Decimal

import pytest

from shopledger.domain.entities import PartyType
from shopledger.domain.errors import ConflictError, NotFoundError, ValidationError


def test_create_party(party_service):
    party = party_service.create_party(
        PartyType.CLIENT, name="  Ali Store ", phone="0300", opening_balance="1200.50"
    )

    assert party.name == "Ali Store"
    assert party.opening_balance == Decimal("1200.50")
    assert party.id
    assert party_service.get_party(PartyType.CLIENT, party.id) == party


def test_create_party_requires_name(party_service):
    with pytest.raises(ValidationError, match="name is required"):
        party_service.create_party(PartyType.VENDOR, name="")


def test_create_party_duplicate_id(party_service):
    party_service.create_party(PartyType.CLIENT, name="Ali", party_id="c1")

    with pytest.raises(ConflictError, match="already exists"):
        party_service.create_party(PartyType.CLIENT, name="Other", party_id="c1")

    assert party_service.get_party(PartyType.CLIENT, "c1").name == "Ali"
    # IDs are scoped to one collection
    assert party_service.create_party(PartyType.VENDOR, name="V", party_id="c1").id == "c1"


def test_create_party_lenient_opening_balance(party_service):
    party = party_service.create_party(PartyType.VENDOR, name="V", opening_balance="abc")
    assert party.opening_balance == Decimal("0")


def test_update_party_replaces_all_fields(party_service):
    party = party_service.create_party(
        PartyType.CLIENT, name="Old", phone="1", address="Town", notes="n"
    )

    updated = party_service.update_party(PartyType.CLIENT, party.id, name="New")

    assert updated.id == party.id
    assert updated.name == "New"
    assert updated.phone is None
    assert updated.address is None
    assert party_service.list_parties(PartyType.CLIENT) == [updated]


def test_update_missing_party(party_service):
    with pytest.raises(NotFoundError):
        party_service.update_party(PartyType.CLIENT, "nope", name="X")


def test_delete_party(party_service):
    party = party_service.create_party(PartyType.VENDOR, name="V")
    party_service.delete_party(PartyType.VENDOR, party.id)

    assert party_service.list_parties(PartyType.VENDOR) == []
    with pytest.raises(NotFoundError):
        party_service.delete_party(PartyType.VENDOR, party.id)


def test_resolve_party_by_id_or_name(party_service):
    party = party_service.create_party(PartyType.CLIENT, name="Khan Mart")

    assert party_service.resolve_party(PartyType.CLIENT, party.id) == party
    assert party_service.resolve_party(PartyType.CLIENT, "khan mart") == party
    with pytest.raises(NotFoundError):
        party_service.resolve_party(PartyType.VENDOR, "Khan Mart")


def test_resolve_party_ambiguous_name(party_service):
    party_service.create_party(PartyType.CLIENT, name="Same")
    party_service.create_party(PartyType.CLIENT, name="Same")

    with pytest.raises(ValidationError, match="matches 2"):
        party_service.resolve_party(PartyType.CLIENT, "Same")
