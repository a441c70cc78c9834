#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: the server runs a single uvicorn worker. All mappings live in
the process's memory, so extra worker processes would each hold their own
disjoint store. Within the worker, the store is safe under concurrent
requests and threads.

Usage:
    python app.py

Environment variables:
    HOST - Host to bind to (default 0.0.0.0)
    PORT - Port to listen on (default 8080)
    BASE_URL - Base URL for short links (default http://localhost:<PORT>)
    PATH_PREFIX - Optional path prefix for short links
    TOP_DOMAINS_LIMIT - Default number of domains in /api/v1/metrics
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - Use JSON log format
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from config import load_config
from shortener.storage.memory import InMemoryStore
from shortener.service import URLShortenerService
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    store = InMemoryStore(logger=logger)
    service = URLShortenerService(store=store, logger=logger)

    app.state.store = store
    app.state.service = service

    logger.info(f"Service started, short links use base URL {app.state.config.base_url}")

    yield

    stats = service.get_statistics()
    logger.info(f"Shutting down URL shortener service ({stats['total_urls']} mappings discarded)")


def main():
    """Main entry point."""
    try:
        config = load_config()
    except ValidationError as e:
        # Logging is not configured yet
        print(f"config: {e}", file=sys.stderr)
        sys.exit(1)

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    # Store and service are built in the lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
    )

    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=1,
        log_level=config.log_level.lower(),
        access_log=False,  # LoggingMiddleware logs each request
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Listening on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
