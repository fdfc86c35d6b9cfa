from __future__ import annotations

import logging

import uvicorn

from learning_api.core.config import settings
from learning_api.core.logging import configure_logging

logger = logging.getLogger("learning_api")


def main() -> None:
    configure_logging(settings.log_level)
    logger.info("AI Learning System API running on port %s", settings.port)
    logger.info("Health check: http://localhost:%s/health", settings.port)
    uvicorn.run("learning_api.main:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
