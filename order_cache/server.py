"""FastAPI server implementation for the Order Cache Service."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .fixtures import seed_store
from .logger import logger
from .store import OrderStore

router = APIRouter()


def get_store(request: Request) -> OrderStore:
    """Resolve the store the application was built with."""
    return request.app.state.store


@router.get("/orders/{order_uid}")
async def get_order(order_uid: str, store: OrderStore = Depends(get_store)):
    """Get an order by its UID.

    Args:
        order_uid: The order UID to look up
        store: The order store, injected from the application state

    Returns:
        The serialized order, or a 404 error payload if it is unknown
    """
    logger.info(f"An order request with a UID was received: {order_uid}")

    order = await store.get(order_uid)
    if order is None:
        logger.info(f"Order with UID: {order_uid} not found")
        return JSONResponse(status_code=404, content={"error": "Order not found"})
    return Response(content=order.model_dump_json(), media_type="application/json")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage the lifecycle of the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    # Startup: seed before the listener accepts connections
    await seed_store(app.state.store)
    logger.info("The test order has been added to the cache")

    yield

    logger.info(f"Shutting down order cache service, {len(app.state.store)} orders in cache")


def create_app(store: Optional[OrderStore] = None) -> FastAPI:
    """Build the application around an order store.

    Args:
        store: The store to serve lookups from; a new empty one if omitted

    Returns:
        FastAPI: The configured application
    """
    app = FastAPI(title="Order Cache Service", lifespan=lifespan)
    app.state.store = store if store is not None else OrderStore()
    app.include_router(router)
    return app


app = create_app()
