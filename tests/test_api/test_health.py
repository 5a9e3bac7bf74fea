import asyncio
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_rate_store, get_rate_updater
from api.main import app
from application.workers.rate_updater import RateUpdater
from infrastructure.store.rate_store import RateStore


@pytest.fixture
def store():
    return RateStore()


@pytest.fixture
def updater(store):
    return RateUpdater(provider=MagicMock(), store=store, assets=['bitcoin'], fiats=['usd'])


@pytest.fixture
def client(store, updater):
    app.dependency_overrides[get_rate_store] = lambda: store
    app.dependency_overrides[get_rate_updater] = lambda: updater
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_health_starting(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {
        'status': 'starting',
        'last_updated': None,
        'cycles': 0,
        'successful_cycles': 0,
        'failed_cycles': 0,
        'last_error': None,
    }


def test_health_ok_after_update(client, store, updater):
    asyncio.run(store.replace_snapshot({'bitcoin': {'usd': 1.0}}, 1_700_000_000))
    updater.cycles = 1
    updater.successful_cycles = 1
    updater.last_cycle_ok = True

    data = client.get('/health').json()

    assert data['status'] == 'ok'
    assert data['last_updated'] == 1_700_000_000


def test_health_degraded_after_failed_cycle(client, updater):
    updater.cycles = 1
    updater.failed_cycles = 1
    updater.last_cycle_ok = False
    updater.last_error = 'CoinGecko HTTP error 500: boom'

    data = client.get('/health').json()

    assert data['status'] == 'degraded'
    assert data['last_error'] == 'CoinGecko HTTP error 500: boom'
