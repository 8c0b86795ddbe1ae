"""Tests for the order lookup HTTP endpoint."""

import asyncio
from http import HTTPStatus

import httpx
import pytest

from order_cache import __version__
from order_cache.fixtures import SEED_ORDER_UID, create_test_order, seed_store
from order_cache.server import create_app
from order_cache.store import OrderStore


def test_version():
    """Test the package version."""
    assert __version__ == "0.1.0"


def test_get_seeded_order(test_client):
    """The seed order is served once the application has started."""
    response = test_client.get(f"/orders/{SEED_ORDER_UID}")

    assert response.status_code == HTTPStatus.OK
    assert response.headers["content-type"] == "application/json"
    body = response.json()
    assert body["order_uid"] == SEED_ORDER_UID
    assert body["track_number"] == "WBILMTESTTRACK"
    assert len(body["items"]) == 1
    assert body["items"][0]["chrt_id"] == 9934930
    assert body["delivery"]["city"] == "Kiryat Mozkin"
    assert body["payment"]["payment_dt"] == 1637907727


def test_get_order_body_is_serialized_order(test_client):
    response = test_client.get(f"/orders/{SEED_ORDER_UID}")

    assert response.content == create_test_order().model_dump_json().encode()
    assert list(response.json()) == [
        "order_uid",
        "track_number",
        "entry",
        "delivery",
        "payment",
        "items",
        "locale",
        "internal_signature",
        "customer_id",
        "delivery_service",
        "shardkey",
        "sm_id",
        "date_created",
        "oof_shard",
    ]


def test_get_unknown_order(test_client):
    """Test an unknown UID returns the fixed 404 payload."""
    response = test_client.get("/orders/does-not-exist")

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.content == b'{"error":"Order not found"}'


def test_lookup_logs_request_and_miss(test_client, mocker):
    """Test a lookup logs the request and, on a miss, the miss."""
    mock_logger = mocker.patch("order_cache.server.logger")

    test_client.get(f"/orders/{SEED_ORDER_UID}")
    mock_logger.info.assert_called_once_with(f"An order request with a UID was received: {SEED_ORDER_UID}")

    mock_logger.reset_mock()
    test_client.get("/orders/missing")
    assert mock_logger.info.call_count == 2
    mock_logger.info.assert_called_with("Order with UID: missing not found")


def test_only_get_is_routed(test_client):
    """Test other methods on the order path are rejected."""
    response = test_client.post(f"/orders/{SEED_ORDER_UID}")
    assert response.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_injected_store_is_served(store, test_client, test_order):
    """Orders inserted into the injected store are visible over HTTP."""
    other = test_order.model_copy(update={"order_uid": "other-uid"})
    test_client.portal.call(store.insert, "other-uid", other)

    response = test_client.get("/orders/other-uid")

    assert response.status_code == HTTPStatus.OK
    assert response.json()["order_uid"] == "other-uid"
    assert len(store) == 2


def test_apps_do_not_share_stores():
    """Test each application gets its own store."""
    first, second = create_app(), create_app()
    assert first.state.store is not second.state.store


@pytest.mark.asyncio
async def test_concurrent_lookups_return_identical_bodies():
    """Test concurrent lookups of one order return identical bodies."""
    store = OrderStore()
    await seed_store(store)
    transport = httpx.ASGITransport(app=create_app(store))

    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        responses = await asyncio.gather(*(client.get(f"/orders/{SEED_ORDER_UID}") for _ in range(100)))

    assert all(response.status_code == HTTPStatus.OK for response in responses)
    assert len({response.content for response in responses}) == 1
