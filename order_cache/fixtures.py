"""Seed data inserted at startup for smoke-testing deployments."""

from .schemas import Delivery, Item, Order, Payment
from .store import OrderStore

SEED_ORDER_UID = "b563feb7b2b84b6test"


def create_test_order() -> Order:
    """Build the fixed seed order."""
    return Order(
        order_uid=SEED_ORDER_UID,
        track_number="WBILMTESTTRACK",
        entry="WBIL",
        delivery=Delivery(
            name="Test Testov",
            phone="+9720000000",
            zip="2639809",
            city="Kiryat Mozkin",
            address="Ploshad Mira 15",
            region="Kraiot",
            email="test@gmail.com",
        ),
        payment=Payment(
            transaction=SEED_ORDER_UID,
            request_id="",
            currency="USD",
            provider="wbpay",
            amount=1817,
            payment_dt=1637907727,
            bank="alpha",
            delivery_cost=1500,
            goods_total=317,
            custom_fee=0,
        ),
        items=(
            Item(
                chrt_id=9934930,
                track_number="WBILMTESTTRACK",
                price=453,
                rid="ab4219087a764ae0btest",
                name="Mascaras",
                sale=30,
                size="0",
                total_price=317,
                nm_id=2389212,
                brand="Vivienne Sabo",
                status=202,
            ),
        ),
        locale="en",
        internal_signature="",
        customer_id="test",
        delivery_service="meest",
        shardkey="9",
        sm_id=99,
        date_created="2021-11-26T06:22:19Z",
        oof_shard="1",
    )


async def seed_store(store: OrderStore) -> None:
    """Insert the seed order into a store."""
    await store.insert(SEED_ORDER_UID, create_test_order())
