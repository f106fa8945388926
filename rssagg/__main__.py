"""
Launch the API server.

Usage:
    python -m rssagg
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

logger = logging.getLogger("rssagg")


def main():
    try:
        from rssagg.core.config import Settings
        settings = Settings()
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors())
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Missing or invalid environment variables: {missing}")
        sys.exit(1)

    from rssagg.main import app

    logger.info(f"Serving on port: {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
