"""Integration tests for participant API endpoints"""

import pytest
from httpx import AsyncClient


class TestRegisterParticipant:
    """Test participant registration endpoint"""

    @pytest.mark.asyncio
    async def test_register_participant(self, client: AsyncClient):
        """Test registering a participant"""
        response = await client.post(
            "/api/v1/participants", json={"id": "1", "name": "Alice"}
        )

        assert response.status_code == 201
        assert response.json() == {"id": "1", "name": "Alice"}

    @pytest.mark.asyncio
    async def test_register_existing_participant(self, client: AsyncClient):
        """Test registering an existing ID returns the original record"""
        await client.post("/api/v1/participants", json={"id": "1", "name": "Alice"})

        response = await client.post(
            "/api/v1/participants", json={"id": "1", "name": "Someone Else"}
        )

        assert response.status_code == 201
        assert response.json()["name"] == "Alice"

    @pytest.mark.asyncio
    async def test_register_participant_empty_name(self, client: AsyncClient):
        """Test request validation rejects an empty name"""
        response = await client.post("/api/v1/participants", json={"id": "1", "name": ""})

        assert response.status_code == 422


class TestGetParticipants:
    """Test participant lookup endpoints"""

    @pytest.mark.asyncio
    async def test_list_participants(self, client: AsyncClient, registered_trio: dict):
        """Test listing keeps registration order"""
        response = await client.get("/api/v1/participants")

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["items"]] == ["Alice", "Bob", "Charlie"]
        assert data["pagination"]["total_items"] == 3

    @pytest.mark.asyncio
    async def test_list_participants_paginated(self, client: AsyncClient, registered_trio: dict):
        """Test pagination metadata"""
        response = await client.get("/api/v1/participants", params={"page": 2, "page_size": 2})

        data = response.json()
        assert [p["name"] for p in data["items"]] == ["Charlie"]
        assert data["pagination"]["total_pages"] == 2

    @pytest.mark.asyncio
    async def test_get_participant(self, client: AsyncClient, registered_trio: dict):
        """Test getting one participant"""
        response = await client.get("/api/v1/participants/2")

        assert response.status_code == 200
        assert response.json()["name"] == "Bob"

    @pytest.mark.asyncio
    async def test_get_unknown_participant(self, client: AsyncClient):
        """Test unknown participant returns 404 with the error envelope"""
        response = await client.get("/api/v1/participants/42")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["type"] == "UnknownParticipantError"
        assert error["details"] == {"participant_id": "42"}
        assert error["path"] == "/api/v1/participants/42"
