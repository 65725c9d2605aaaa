"""Pytest fixtures and configuration"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_ledger_service
from app.main import app
from app.models.participant import Participant
from app.services.ledger_service import LedgerService


@pytest.fixture
def ledger_service() -> LedgerService:
    """Create an empty ledger service for each test"""
    return LedgerService(tolerance=1e-6)


@pytest.fixture
def alice(ledger_service: LedgerService) -> Participant:
    """Register Alice"""
    return ledger_service.register_participant("1", "Alice")


@pytest.fixture
def bob(ledger_service: LedgerService) -> Participant:
    """Register Bob"""
    return ledger_service.register_participant("2", "Bob")


@pytest.fixture
def charlie(ledger_service: LedgerService) -> Participant:
    """Register Charlie"""
    return ledger_service.register_participant("3", "Charlie")


@pytest_asyncio.fixture
async def client(ledger_service: LedgerService) -> AsyncGenerator[AsyncClient, None]:
    """Create test client backed by the test's ledger service"""
    app.dependency_overrides[get_ledger_service] = lambda: ledger_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def registered_trio(client: AsyncClient) -> dict:
    """Register Alice, Bob and Charlie through the API"""
    ids = {}
    for participant_id, name in [("1", "Alice"), ("2", "Bob"), ("3", "Charlie")]:
        response = await client.post(
            "/api/v1/participants", json={"id": participant_id, "name": name}
        )
        assert response.status_code == 201
        ids[name.lower()] = participant_id
    return ids
