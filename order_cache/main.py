"""Main entry point for the Order Cache Service."""

import uvicorn

from order_cache.server import app

HOST = "0.0.0.0"
PORT = 3000


def main() -> None:
    """Serve the application; uvicorn exits the process if the port cannot be bound."""
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
