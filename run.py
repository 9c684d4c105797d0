"""Entry point for the Wishlist API server.

Host and port are read from the environment variables ``HOST`` and
``PORT``.  Defaults are ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server


async def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app="wishlist_api.app.main:app", host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
