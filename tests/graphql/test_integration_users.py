"""
Integration tests for the user GraphQL API with a real database
"""

import uuid

import pytest
from httpx import AsyncClient

from usergraph.dbmodels import Users
from usergraph.repositories import UserRepository

USER_FIELDS = "id name email"

USERS_QUERY = f"query ListUsers {{ users {{ {USER_FIELDS} }} }}"
USER_QUERY = f"query GetUser($id: String!) {{ user(id: $id) {{ {USER_FIELDS} }} }}"
CREATE_MUTATION = f"""
mutation CreateUser($name: String!, $email: String!) {{
    createUser(name: $name, email: $email) {{ {USER_FIELDS} }}
}}
"""
UPDATE_MUTATION = f"""
mutation UpdateUser($id: String!, $name: String!, $email: String!) {{
    updateUser(id: $id, name: $name, email: $email) {{ {USER_FIELDS} }}
}}
"""
DELETE_MUTATION = "mutation DeleteUser($id: String!) { deleteUser(id: $id) }"


async def execute(client: AsyncClient, query: str, **variables) -> dict:
    response = await client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200, response.text
    return response.json()


async def list_users(client: AsyncClient) -> list[dict]:
    body = await execute(client, USERS_QUERY)
    assert "errors" not in body
    return body["data"]["users"]


pytestmark = [pytest.mark.integration, pytest.mark.requires_db]


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_users_query(client: AsyncClient, user_repository: UserRepository):
    await user_repository.save(Users(name="John Doe", email="john@example.com"))
    await user_repository.save(Users(name="Jane Smith", email="jane@example.com"))

    users = await list_users(client)

    assert len(users) == 2
    assert {u["name"] for u in users} == {"John Doe", "Jane Smith"}
    for user in users:
        assert uuid.UUID(user["id"])


@pytest.mark.asyncio
async def test_user_query(client: AsyncClient, user_repository: UserRepository):
    john = await user_repository.save(Users(name="John Doe", email="john@example.com"))

    body = await execute(client, USER_QUERY, id=str(john.id))

    assert "errors" not in body
    assert body["data"]["user"] == {
        "id": str(john.id),
        "name": "John Doe",
        "email": "john@example.com",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [str(uuid.uuid4()), "invalid-uuid", ""])
async def test_user_query_unknown_or_malformed_id_returns_null(client: AsyncClient, user_id):
    body = await execute(client, USER_QUERY, id=user_id)

    assert "errors" not in body
    assert body["data"]["user"] is None


@pytest.mark.asyncio
async def test_create_user_round_trip(client: AsyncClient):
    body = await execute(client, CREATE_MUTATION, name="A", email="a@x.com")

    assert "errors" not in body
    created = body["data"]["createUser"]
    assert created["id"] is not None
    assert created["name"] == "A"
    assert created["email"] == "a@x.com"

    fetched = await execute(client, USER_QUERY, id=created["id"])
    assert fetched["data"]["user"] == created


@pytest.mark.asyncio
async def test_update_user(client: AsyncClient, user_repository: UserRepository):
    john = await user_repository.save(Users(name="John Doe", email="john@example.com"))

    body = await execute(
        client, UPDATE_MUTATION, id=str(john.id), name="John Smith", email="js@example.com"
    )

    assert "errors" not in body
    assert body["data"]["updateUser"] == {
        "id": str(john.id),
        "name": "John Smith",
        "email": "js@example.com",
    }
    stored = await user_repository.find_by_id(john.id)
    assert stored is not None
    assert (stored.name, stored.email) == ("John Smith", "js@example.com")


@pytest.mark.asyncio
async def test_update_user_malformed_id_errors_and_leaves_store_unchanged(
    client: AsyncClient, user_repository: UserRepository
):
    await user_repository.save(Users(name="John Doe", email="john@example.com"))
    before = await list_users(client)

    body = await execute(client, UPDATE_MUTATION, id="invalid-uuid", name="X", email="x@x.com")

    assert body["data"] == {"updateUser": None}
    assert [e["message"] for e in body["errors"]] == ["Invalid identifier format"]
    assert body["errors"][0]["path"] == ["updateUser"]
    assert await list_users(client) == before


@pytest.mark.asyncio
async def test_update_user_not_found_errors_and_leaves_store_unchanged(
    client: AsyncClient, user_repository: UserRepository
):
    await user_repository.save(Users(name="John Doe", email="john@example.com"))
    before = await list_users(client)

    body = await execute(
        client, UPDATE_MUTATION, id=str(uuid.uuid4()), name="X", email="x@x.com"
    )

    assert body["data"] == {"updateUser": None}
    assert [e["message"] for e in body["errors"]] == ["User not found"]
    assert await list_users(client) == before


@pytest.mark.asyncio
async def test_delete_user_true_once_then_false(
    client: AsyncClient, user_repository: UserRepository
):
    john = await user_repository.save(Users(name="John Doe", email="john@example.com"))

    first = await execute(client, DELETE_MUTATION, id=str(john.id))
    second = await execute(client, DELETE_MUTATION, id=str(john.id))
    third = await execute(client, DELETE_MUTATION, id=str(john.id))

    assert first["data"]["deleteUser"] is True
    assert second["data"]["deleteUser"] is False
    assert third["data"]["deleteUser"] is False
    assert await list_users(client) == []


@pytest.mark.asyncio
async def test_delete_user_malformed_id_returns_false(client: AsyncClient):
    body = await execute(client, DELETE_MUTATION, id="invalid-uuid")

    assert "errors" not in body
    assert body["data"]["deleteUser"] is False


@pytest.mark.asyncio
async def test_user_lifecycle_scenario(client: AsyncClient, user_repository: UserRepository):
    john = await user_repository.save(Users(name="John Doe", email="john@example.com"))

    users = await list_users(client)
    assert users == [{"id": str(john.id), "name": "John Doe", "email": "john@example.com"}]

    created = await execute(client, CREATE_MUTATION, name="Jane", email="jane@x.com")
    jane = created["data"]["createUser"]
    assert jane["id"] != str(john.id)
    assert len(await list_users(client)) == 2

    updated = await execute(client, UPDATE_MUTATION, id=jane["id"], name="Jane S", email="j2@x.com")
    assert updated["data"]["updateUser"] == {"id": jane["id"], "name": "Jane S", "email": "j2@x.com"}

    deleted = await execute(client, DELETE_MUTATION, id=str(john.id))
    assert deleted["data"]["deleteUser"] is True
    assert [u["id"] for u in await list_users(client)] == [jane["id"]]

    deleted_again = await execute(client, DELETE_MUTATION, id=str(john.id))
    assert deleted_again["data"]["deleteUser"] is False
