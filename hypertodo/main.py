"""
hypertodo - server-rendered to-do list.

Main entry point. All initialization logic is in app/factory.py.
"""
import logging

import uvicorn

from hypertodo.app import create_app

HOST = "0.0.0.0"
PORT = 3000

# Get logger (logging is configured in app/factory.py)
logger = logging.getLogger(__name__)


def main():
    app = create_app()
    config = uvicorn.Config(
        app,
        host=HOST,
        port=PORT,
        log_config=None,
        timeout_graceful_shutdown=30,
    )
    server = uvicorn.Server(config)

    logger.info(f"hypertodo is running at {HOST}:{PORT}")
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        # Storage is closed by the lifespan context manager in app/factory.py
        logger.info("Service stopped")


if __name__ == "__main__":
    main()
