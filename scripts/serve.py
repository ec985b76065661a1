#!/usr/bin/env python3
"""
Run the SIP calculator API under uvicorn.

Usage:
    python scripts/serve.py

Environment variables (from .env.development or .env.production):
    HOST - Interface to bind (default 0.0.0.0)
    PORT - Port to listen on (default 4000)
    LOG_LEVEL - Logging level (default INFO)
"""

import logging
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import get_settings
from app.main import create_app

logger = logging.getLogger("serve")


def main():
    """Build the app from settings and serve it."""
    settings = get_settings()
    app = create_app(settings)

    base_url = f"http://localhost:{settings.port}"
    logger.info("Server running on %s", base_url)
    logger.info("Health check: %s/api/health", base_url)
    logger.info("SIP endpoint: POST %s/api/calculate/sip", base_url)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
