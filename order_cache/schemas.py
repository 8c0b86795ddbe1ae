"""Pydantic models for orders held by the cache."""

from pydantic import BaseModel, ConfigDict, Field

UINT64_MAX = 2**64 - 1


class Delivery(BaseModel):
    """Delivery contact and address for an order."""

    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    zip: str
    city: str
    address: str
    region: str
    email: str


class Payment(BaseModel):
    """Payment details for an order.

    Attributes:
        transaction (str): Payment transaction identifier.
        request_id (str): Payment request identifier, may be empty.
        currency (str): Currency code, e.g. ``USD``.
        provider (str): Payment provider name.
        amount (int): Total amount charged.
        payment_dt (int): Unix timestamp of the payment.
        bank (str): Issuing bank.
        delivery_cost (int): Delivery part of the amount.
        goods_total (int): Goods part of the amount.
        custom_fee (int): Customs fee.
    """

    model_config = ConfigDict(frozen=True)

    transaction: str
    request_id: str
    currency: str
    provider: str
    amount: int = Field(..., ge=0)
    payment_dt: int = Field(..., ge=0, le=UINT64_MAX)
    bank: str
    delivery_cost: int = Field(..., ge=0)
    goods_total: int = Field(..., ge=0)
    custom_fee: int = Field(..., ge=0)


class Item(BaseModel):
    """A single line item of an order."""

    model_config = ConfigDict(frozen=True)

    chrt_id: int = Field(..., ge=0)
    track_number: str
    price: int = Field(..., ge=0)
    rid: str
    name: str
    sale: int = Field(..., ge=0)
    size: str
    total_price: int = Field(..., ge=0)
    nm_id: int = Field(..., ge=0)
    brand: str
    status: int = Field(..., ge=0)


class Order(BaseModel):
    """A complete order as stored in and served from the cache.

    Orders are frozen: the cache hands out the stored instance itself, so
    nothing a caller does can change what other readers see. Items are kept
    as a tuple for the same reason; they serialize as a JSON array in their
    original order.
    """

    model_config = ConfigDict(frozen=True)

    order_uid: str = Field(..., description="Unique order identifier, the lookup key.")
    track_number: str
    entry: str
    delivery: Delivery
    payment: Payment
    items: tuple[Item, ...]
    locale: str
    internal_signature: str
    customer_id: str
    delivery_service: str
    shardkey: str
    sm_id: int = Field(..., ge=0)
    date_created: str = Field(..., description="ISO-8601 creation timestamp.")
    oof_shard: str
