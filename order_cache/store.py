"""In-memory order store keyed by order UID."""

from typing import Optional

from .rwlock import ReadWriteLock
from .schemas import Order


class OrderStore:
    """Concurrent in-memory mapping of order UID to Order.

    Lookups share a read lock and may run together; inserts take the write
    lock and exclude every other lookup and insert for the duration of the
    mutation. Stored orders are frozen models, so handing out the stored
    instance is safe.

    Attributes:
        _orders: The underlying UID to Order mapping.
        _lock: Store-wide reader-writer lock guarding ``_orders``.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._orders: dict[str, Order] = {}
        self._lock = ReadWriteLock()

    async def insert(self, uid: str, order: Order) -> None:
        """Insert or replace the order stored under a UID.

        An existing entry is overwritten; the last write wins.

        Args:
            uid: The lookup key, must be non-empty.
            order: The order to store.

        Raises:
            ValueError: If ``uid`` is empty.
        """
        if not uid:
            raise ValueError("Order UID must be non-empty")
        async with self._lock.write():
            self._orders[uid] = order

    async def get(self, uid: str) -> Optional[Order]:
        """Get an order by UID.

        Args:
            uid: The order UID to look up

        Returns:
            The stored order if found, None otherwise
        """
        async with self._lock.read():
            return self._orders.get(uid)

    def __len__(self) -> int:
        """Number of orders currently stored."""
        return len(self._orders)
