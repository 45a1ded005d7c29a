#!/usr/bin/env python3
"""TEDx NDU - API server entry point"""

import logging

import uvicorn

from tedx_ndu.app import create_app
from tedx_ndu.config import config
from tedx_ndu.logging_config import setup_logging

# INFO -> stdout, WARNING/ERROR -> stderr; reused by uvicorn below
log_config = setup_logging()
logger = logging.getLogger(__name__)

app = create_app()


def run():
    port = config["port"]
    logger.info(f"Starting TEDx NDU backend on 0.0.0.0:{port}")
    logger.info("Health check available at /health")

    try:
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=port,
            log_config=log_config,
            forwarded_allow_ips=config["forwarded_allow_ips"],
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise


if __name__ == "__main__":
    run()
