"""Entry point for the Ownerbot chat webhook.

Serves the FastAPI application with Uvicorn.  Configuration such as
the database path and log level is read from environment variables
(see ``ownerbot_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import os
from uvicorn import Config, Server

from ownerbot_api.app.main import app


async def main() -> None:
    """Start the webhook server.

    Host and port are read from environment variables `HOST` and
    `PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
