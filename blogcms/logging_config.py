"""
Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; this module only
decides levels and makes sure a handler exists.  Call ``setup_logging()``
once at startup (the FastAPI lifespan and the seed script do).
"""
import logging
import sys

from blogcms.config import settings

# Third-party loggers that follow LOG_LEVEL_DRIVER instead of LOG_LEVEL.
DRIVER_LOGGERS = ("pymongo", "motor", "redis", "httpx", "httpcore")


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.LOG_LEVEL))

    # uvicorn installs its own handlers; scripts and tests may not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s - %(message)s")
        )
        root.addHandler(handler)

    driver_level = _parse_level(settings.LOG_LEVEL_DRIVER)
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s drivers=%s", settings.LOG_LEVEL, settings.LOG_LEVEL_DRIVER
    )
