# app/core/logging_config.py
import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the process.

    Uvicorn installs its own handlers on "uvicorn*" loggers; everything
    under "app.*" propagates to the root handler set up here.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("app").setLevel(level)
