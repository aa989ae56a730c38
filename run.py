"""Entry point for serving the Taskboard API.

Configuration such as API_TOKEN, ENVIRONMENT and LOG_LEVEL should be
placed in the environment or in a `.env` file in the working
directory.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from taskboard_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `HOST` and
    `PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    # The application writes its own access log.
    config = Config(app=app, host=host, port=port, reload=False, log_level="info", access_log=False)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
