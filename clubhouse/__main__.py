"""
Run the web server:

  python -m clubhouse

HOST and PORT come from the environment (or .env).
"""

import logging

import uvicorn

from clubhouse.core.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info("Listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run("clubhouse.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
