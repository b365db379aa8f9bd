"""Tests for the people registry endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.louvores.models import Role
from tests.factories import PersonFactory, ScheduledFunctionFactory
from tests.helpers import auth_headers, seed_member_with_access

pytestmark = pytest.mark.unit

URL = "/api/v1/pessoas"


@pytest.fixture
def admin_headers(store) -> dict[str, str]:
    person, _ = seed_member_with_access(store, Role.ADMIN, email="admin@example.com")
    return auth_headers(person.account_id, person.email)


class TestPeopleEndpoints:
    async def test_member_is_forbidden(self, client: AsyncClient, store):
        person, _ = seed_member_with_access(store, Role.MUSICIAN)

        response = await client.get(URL, headers=auth_headers(person.account_id, person.email))

        assert response.status_code == 403

    async def test_create_and_list(self, client: AsyncClient, admin_headers):
        created = await client.post(
            URL,
            json={"name": "Zé", "role": "membro", "phone": "92981394605"},
            headers=admin_headers,
        )
        listed = await client.get(URL, params={"tem_acesso": False}, headers=admin_headers)

        assert created.status_code == 201
        data = created.json()["data"]
        assert data["phone_formatted"] == "(92) 98139-4605"
        assert data["role_label"] == "Membro"
        assert data["has_access"] is False
        assert listed.json()["count"] == 1
        assert listed.json()["data"][0]["name"] == "Zé"

    async def test_overlong_phone_is_400(self, client: AsyncClient, admin_headers):
        response = await client.post(
            URL,
            json={"name": "Zé", "role": "membro", "phone": "1234567890123456789012345"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert "Telefone" in response.json()["error"]

    async def test_duplicate_email_is_409(self, client: AsyncClient, admin_headers):
        response = await client.post(
            URL, json={"name": "Outro", "role": "membro", "email": "admin@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert "pessoa_existente" in response.json()

    async def test_update(self, client: AsyncClient, store, admin_headers):
        person = PersonFactory.build(name="Antes")
        store.people[person.id] = person

        response = await client.patch(
            f"{URL}/{person.id}", json={"name": "Depois"}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Depois"

    async def test_delete_blocked_by_schedules(self, client: AsyncClient, store, admin_headers):
        person = PersonFactory.build()
        store.people[person.id] = person
        store.functions.append(
            ScheduledFunctionFactory.build(schedule_id=uuid4(), person_id=person.id)
        )

        response = await client.delete(f"{URL}/{person.id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["count_escalas"] == 1

    async def test_delete(self, client: AsyncClient, store, admin_headers):
        person = PersonFactory.build()
        store.people[person.id] = person

        response = await client.delete(f"{URL}/{person.id}", headers=admin_headers)

        assert response.status_code == 200
        assert person.id not in store.people

    async def test_get_unknown(self, client: AsyncClient, admin_headers):
        response = await client.get(f"{URL}/{uuid4()}", headers=admin_headers)
        assert response.status_code == 404
