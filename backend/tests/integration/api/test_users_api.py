"""
Integration tests for Users API.

WHAT: Full-stack tests for /api/users: router, service, validator, DAO and
exception handlers over in-memory SQLite.

WHY: Status codes and camelCase bodies are what clients see; these tests
pin them for every user operation.

HOW: Uses pytest-asyncio with AsyncClient for HTTP testing.
"""

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import PostFactory, UserFactory


class TestCreateUser:
    """Tests for POST /api/users."""

    @pytest.mark.asyncio
    async def test_create_user(self, client: AsyncClient, sample_user_data: dict):
        response = await client.post("/api/users", json=sample_user_data)

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "a@x.com"
        assert data["name"] == "A"
        assert data["age"] == 20
        assert uuid.UUID(data["id"])

    @pytest.mark.asyncio
    async def test_create_user_without_age(self, client: AsyncClient):
        response = await client.post("/api/users", json={"email": "a@x.com", "name": "A"})

        assert response.status_code == 201
        assert response.json()["age"] is None

    @pytest.mark.asyncio
    async def test_age_zero_accepted(self, client: AsyncClient):
        response = await client.post("/api/users", json={"email": "a@x.com", "name": "A", "age": 0})
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_negative_age_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/users", json={"email": "a@x.com", "name": "A", "age": -1}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "InvalidAgeError"
        assert body["message"] == "Age must be positive"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        await UserFactory.create(db_session, email="a@x.com")

        response = await client.post("/api/users", json={"email": "a@x.com", "name": "B"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "EmailConflictError"
        assert body["message"] == "Email already exists: a@x.com"

        listing = await client.get("/api/users")
        assert len(listing.json()) == 1

    @pytest.mark.asyncio
    async def test_taken_email_reported_before_negative_age(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        """
        WHY: On create the email check runs first, so a request failing
        both rules is answered with the email conflict.
        """
        await UserFactory.create(db_session, email="a@x.com")

        response = await client.post(
            "/api/users", json={"email": "a@x.com", "name": "B", "age": -1}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "EmailConflictError"
        assert body["message"] == "Email already exists: a@x.com"

    @pytest.mark.asyncio
    async def test_email_stored_as_sent(self, client: AsyncClient):
        """
        WHY: Emails are compared exactly as stored; the domain is not
        lowercased, so these are two different users.
        """
        first = await client.post("/api/users", json={"email": "a@X.COM", "name": "Upper"})
        second = await client.post("/api/users", json={"email": "a@x.com", "name": "Lower"})

        assert first.status_code == 201
        assert first.json()["email"] == "a@X.COM"
        assert second.status_code == 201
        assert second.json()["email"] == "a@x.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "No Email"},
            {"email": "a@x.com"},
            {"email": "not-an-email", "name": "A"},
            {"email": "a@x.com", "name": "   "},
        ],
    )
    async def test_structural_errors_are_400(self, client: AsyncClient, payload: dict):
        """
        WHY: Missing/blank required fields and malformed emails are rejected
        before any business rule runs, with the same 400 error body shape.
        """
        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "ValidationError"
        assert body["details"]["errors"]

    @pytest.mark.asyncio
    async def test_structural_errors_name_fields_as_on_the_wire(self, client: AsyncClient):
        response = await client.post("/api/users", json={"name": "   "})

        errors = response.json()["details"]["errors"]
        assert {(e["location"], e["field"]) for e in errors} == {("body", "email"), ("body", "name")}


class TestReadUsers:
    """Tests for GET /api/users and /api/users/{id}."""

    @pytest.mark.asyncio
    async def test_list_users(self, client: AsyncClient, db_session: AsyncSession):
        await UserFactory.create(db_session, email="a@x.com")
        await UserFactory.create(db_session, email="b@x.com")

        response = await client.get("/api/users")

        assert response.status_code == 200
        assert sorted(u["email"] for u in response.json()) == ["a@x.com", "b@x.com"]

    @pytest.mark.asyncio
    async def test_list_users_empty(self, client: AsyncClient):
        response = await client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_user(self, client: AsyncClient, db_session: AsyncSession):
        user = await UserFactory.create(db_session, email="a@x.com", name="A", age=33)

        response = await client.get(f"/api/users/{user.id}")

        assert response.status_code == 200
        assert response.json() == {"id": str(user.id), "email": "a@x.com", "name": "A", "age": 33}

    @pytest.mark.asyncio
    async def test_get_missing_user_is_404(self, client: AsyncClient):
        missing = uuid.uuid4()

        response = await client.get(f"/api/users/{missing}")

        assert response.status_code == 404
        assert response.json()["message"] == f"User not found with id: {missing}"

    @pytest.mark.asyncio
    async def test_malformed_id_is_400(self, client: AsyncClient):
        response = await client.get("/api/users/not-a-uuid")
        assert response.status_code == 400


class TestUpdateUser:
    """Tests for PUT /api/users/{id}."""

    @pytest.mark.asyncio
    async def test_partial_update(self, client: AsyncClient, db_session: AsyncSession):
        user = await UserFactory.create(db_session, email="a@x.com", name="A", age=20)

        response = await client.put(f"/api/users/{user.id}", json={"name": "Renamed"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Renamed"
        assert data["email"] == "a@x.com"
        assert data["age"] == 20

    @pytest.mark.asyncio
    async def test_same_email_is_not_a_conflict(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        user = await UserFactory.create(db_session, email="a@x.com")

        response = await client.put(
            f"/api/users/{user.id}", json={"email": "a@x.com", "name": "Still A"}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Still A"

    @pytest.mark.asyncio
    async def test_email_of_another_user_rejected(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        await UserFactory.create(db_session, email="taken@x.com")
        user = await UserFactory.create(db_session, email="a@x.com")

        response = await client.put(f"/api/users/{user.id}", json={"email": "taken@x.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "EmailConflictError"

        unchanged = await client.get(f"/api/users/{user.id}")
        assert unchanged.json()["email"] == "a@x.com"

    @pytest.mark.asyncio
    async def test_negative_age_rejected(self, client: AsyncClient, db_session: AsyncSession):
        user = await UserFactory.create(db_session, age=20)

        response = await client.put(f"/api/users/{user.id}", json={"age": -1})

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidAgeError"

    @pytest.mark.asyncio
    async def test_update_missing_user_is_404(self, client: AsyncClient):
        response = await client.put(f"/api/users/{uuid.uuid4()}", json={"name": "X"})
        assert response.status_code == 404


class TestDeleteUser:
    """Tests for DELETE /api/users/{id}."""

    @pytest.mark.asyncio
    async def test_delete_user(self, client: AsyncClient, db_session: AsyncSession):
        user = await UserFactory.create(db_session)

        response = await client.delete(f"/api/users/{user.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert (await client.get(f"/api/users/{user.id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_does_not_cascade(self, client: AsyncClient, db_session: AsyncSession):
        post = await PostFactory.create(db_session)

        await client.delete(f"/api/users/{post.user_id}")

        response = await client.get(f"/api/posts/{post.id}")
        assert response.status_code == 200
        assert response.json()["userId"] == str(post.user_id)

    @pytest.mark.asyncio
    async def test_delete_missing_user_is_404(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        await UserFactory.create(db_session)

        response = await client.delete(f"/api/users/{uuid.uuid4()}")

        assert response.status_code == 404
        assert len((await client.get("/api/users")).json()) == 1
