"""
Conversor API Tests
"""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from conversor import __version__
from conversor.main import create_app
from conversor.models import RateTable
from conversor.providers import BaseRateSource, FetchTransportError
from conversor.state import ConverterState

RATES: RateTable = {"USD": 1.0, "EUR": 0.9, "JPY": 150.0}


class FixedSource(BaseRateSource):
    SOURCE_NAME = "fixed"

    def __init__(self, rates: RateTable):
        self.rates = rates

    async def fetch(self) -> RateTable:
        await asyncio.sleep(0)
        return self.rates


class FailingSource(BaseRateSource):
    SOURCE_NAME = "failing"

    async def fetch(self) -> RateTable:
        raise FetchTransportError("network unreachable", source=self.SOURCE_NAME)


async def _client_for(source: BaseRateSource) -> httpx.AsyncClient:
    state = ConverterState(source)
    await state.ready()
    app = create_app(converter=state)
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


class TestConverterRoutes:

    @pytest.mark.asyncio
    async def test_initial_view(self):
        async with await _client_for(FixedSource(RATES)) as client:
            response = await client.get("/api/v1/converter")

        assert response.status_code == 200
        body = response.json()
        assert body["currencies"] == ["USD", "EUR", "JPY"]
        assert body["source_currency"] is None
        assert body["target_currency"] is None
        assert body["amount"] == 0
        assert body["amount_text"] == ""
        assert body["result"] == 0
        assert body["result_text"] is None
        assert body["show_result"] is False
        assert body["show_error"] is False
        assert body["error_message"] is None

    @pytest.mark.asyncio
    async def test_usd_to_jpy_flow(self):
        async with await _client_for(FixedSource(RATES)) as client:
            await client.put("/api/v1/converter/source", json={"code": "USD"})
            await client.put("/api/v1/converter/target", json={"code": "JPY"})
            response = await client.put("/api/v1/converter/amount", json={"raw": "010"})

        body = response.json()
        assert body["amount"] == 10
        assert body["amount_text"] == "10"
        assert body["result"] == pytest.approx(1500.0)
        assert body["result_text"] == "1500.00 JPY"
        assert body["show_result"] is True

    @pytest.mark.asyncio
    async def test_invalid_amount_keeps_previous(self):
        async with await _client_for(FixedSource(RATES)) as client:
            await client.put("/api/v1/converter/amount", json={"raw": "9"})
            response = await client.put("/api/v1/converter/amount", json={"raw": "-3"})

        assert response.status_code == 200
        assert response.json()["amount"] == 9

    @pytest.mark.asyncio
    async def test_overlong_amount_keeps_previous(self):
        async with await _client_for(FixedSource(RATES)) as client:
            await client.put("/api/v1/converter/amount", json={"raw": "9"})
            response = await client.put("/api/v1/converter/amount", json={"raw": "9" * 5000})

        assert response.status_code == 200
        assert response.json()["amount"] == 9

    @pytest.mark.asyncio
    async def test_unselect_with_null(self):
        async with await _client_for(FixedSource(RATES)) as client:
            await client.put("/api/v1/converter/source", json={"code": "EUR"})
            response = await client.put("/api/v1/converter/source", json={"code": None})

        assert response.json()["source_currency"] is None

    @pytest.mark.asyncio
    async def test_currencies_and_health(self):
        async with await _client_for(FixedSource(RATES)) as client:
            currencies = await client.get("/api/v1/currencies")
            health = await client.get("/api/v1/health")

        assert currencies.json() == ["USD", "EUR", "JPY"]
        assert health.json() == {
            "status": "ok",
            "version": __version__,
            "rates_loaded": True,
            "currency_count": 3,
        }

    @pytest.mark.asyncio
    async def test_failed_fetch_degrades(self):
        async with await _client_for(FailingSource()) as client:
            await client.put("/api/v1/converter/source", json={"code": "USD"})
            await client.put("/api/v1/converter/target", json={"code": "JPY"})
            view = await client.put("/api/v1/converter/amount", json={"raw": "10"})
            health = await client.get("/api/v1/health")

        body = view.json()
        assert body["currencies"] == []
        assert body["show_error"] is True
        assert body["error_message"]
        assert body["result"] == 0
        assert body["show_result"] is False
        assert health.status_code == 200
        assert health.json()["status"] == "degraded"

    @pytest.mark.asyncio
    async def test_missing_body_field_rejected(self):
        async with await _client_for(FixedSource(RATES)) as client:
            response = await client.put("/api/v1/converter/amount", json={})

        assert response.status_code == 422


class TestAppLifecycle:

    def test_not_started_returns_503(self):
        app = create_app()
        client = TestClient(app)  # no context manager: lifespan not run

        response = client.get("/api/v1/converter")

        assert response.status_code == 503
        assert response.json()["detail"]["error"]["code"] == "CONVERTER_NOT_STARTED"

    def test_startup_creates_converter(self):
        app = create_app(rate_source=FailingSource())

        with TestClient(app) as client:
            response = client.get("/api/v1/converter")
            root = client.get("/")

        assert response.status_code == 200
        assert response.json()["currencies"] == []
        assert response.json()["show_error"] is True
        assert root.json()["name"] == "Conversor"
        assert app.state.converter is None
