"""Tests for client create/read/update."""

import time

import pytest

from lawfirm.clients.schemas import ClientResponse, ClientUpdate
from lawfirm.errors import ConflictError, NotFoundError, ValidationError
from lawfirm.services.client_service import ClientService


class TestCreateClient:
    def test_assigns_id_and_timestamps(self, db):
        client = ClientService(db).create({
            "first_name": "Amina",
            "last_name": "Otieno",
            "email": "amina@example.com",
            "company": "Otieno Holdings",
        })
        assert client.id is not None
        assert client.created_at is not None
        assert client.updated_at == client.created_at
        assert client.phone is None
        assert client.company == "Otieno Holdings"

    def test_ids_are_unique(self, make_client):
        ids = {make_client().id for _ in range(5)}
        assert len(ids) == 5

    def test_duplicate_email_conflicts(self, db, make_client):
        make_client(email="dup@example.com")
        with pytest.raises(ConflictError) as exc:
            make_client(email="dup@example.com")
        assert exc.value.field == "email"
        assert len(ClientService(db).get_all()) == 1

    def test_invalid_email_rejected(self, make_client):
        with pytest.raises(ValidationError) as exc:
            make_client(email="not-an-email")
        assert exc.value.errors[0]["field"] == "email"

    def test_missing_required_field(self, db):
        with pytest.raises(ValidationError):
            ClientService(db).create({"first_name": "Amina", "email": "a@example.com"})

    def test_empty_name_rejected(self, make_client):
        with pytest.raises(ValidationError):
            make_client(first_name="")

    def test_blank_optional_text_stored_as_null(self, make_client):
        client = make_client(phone="", address="   ")
        assert client.phone is None
        assert client.address is None


class TestGetClient:
    def test_round_trip(self, db):
        payload = {
            "first_name": "Amina",
            "last_name": "Otieno",
            "email": "amina@example.com",
            "phone": "+254700000001",
            "address": "Kenyatta Ave, Nairobi",
            "company": None,
        }
        created = ClientService(db).create(payload)
        fetched = ClientService(db).get_by_id(created.id)
        response = ClientResponse.model_validate(fetched).model_dump()
        for field, value in payload.items():
            assert response[field] == value
        assert response["id"] == created.id

    def test_missing_client(self, db):
        with pytest.raises(NotFoundError):
            ClientService(db).get_by_id(999)

    def test_get_all_in_creation_order(self, db, make_client):
        created = [make_client().id for _ in range(3)]
        assert [c.id for c in ClientService(db).get_all()] == created

    def test_get_all_empty(self, db):
        assert ClientService(db).get_all() == []

    def test_read_does_not_touch_updated_at(self, db, client):
        before = client.updated_at
        ClientService(db).get_by_id(client.id)
        ClientService(db).get_all()
        assert ClientService(db).get_by_id(client.id).updated_at == before


class TestUpdateClient:
    def test_partial_update_leaves_other_fields(self, db, make_client):
        client = make_client(phone="+254700000001", company="Acme")
        updated = ClientService(db).update({"id": client.id, "company": "Acme Ltd"})
        assert updated.company == "Acme Ltd"
        assert updated.phone == "+254700000001"

    def test_explicit_null_clears_field(self, db, make_client):
        client = make_client(phone="+254700000001")
        updated = ClientService(db).update({"id": client.id, "phone": None})
        assert updated.phone is None

    def test_empty_string_clears_field(self, db, make_client):
        client = make_client(address="Mombasa Rd")
        updated = ClientService(db).update(ClientUpdate(id=client.id, address=""))
        assert updated.address is None

    def test_updated_at_moves_forward(self, db, client):
        before = client.updated_at
        time.sleep(0.001)
        updated = ClientService(db).update({"id": client.id, "first_name": "Zawadi"})
        assert updated.updated_at >= before
        assert updated.created_at <= updated.updated_at

    def test_email_change_checked_for_uniqueness(self, db, make_client):
        make_client(email="taken@example.com")
        other = make_client()
        with pytest.raises(ConflictError):
            ClientService(db).update({"id": other.id, "email": "taken@example.com"})

    def test_keeping_own_email_is_not_a_conflict(self, db, client):
        updated = ClientService(db).update({"id": client.id, "email": client.email})
        assert updated.email == client.email

    def test_email_is_stored_lower_case(self, make_client):
        assert make_client(email="Bob@Example.com").email == "bob@example.com"

    def test_email_uniqueness_ignores_case(self, db, make_client):
        make_client(email="bob@example.com")
        with pytest.raises(ConflictError):
            make_client(email="Bob@example.com")
        assert len(ClientService(db).get_all()) == 1

    def test_whitespace_name_cannot_replace_name(self, db, client):
        with pytest.raises(ValidationError):
            ClientService(db).update({"id": client.id, "first_name": "   "})
        assert ClientService(db).get_by_id(client.id).first_name == "Amina"

    def test_required_field_cannot_be_nulled(self, db, client):
        with pytest.raises(ValidationError):
            ClientService(db).update({"id": client.id, "last_name": None})

    def test_id_required(self, db):
        with pytest.raises(ValidationError):
            ClientService(db).update({"first_name": "Zawadi"})

    def test_unknown_id(self, db):
        with pytest.raises(NotFoundError):
            ClientService(db).update({"id": 42, "first_name": "Zawadi"})
