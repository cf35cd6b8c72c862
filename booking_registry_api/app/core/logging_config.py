"""
Logging setup shared by the application and the uvicorn server.

``setup_logging`` installs one formatter on the root logger so the
registry's own records (``booking_registry_api.*``) share a layout.
``uvicorn_log_config`` returns a ``dictConfig`` mapping that gives the
``uvicorn``, ``uvicorn.error`` and ``uvicorn.access`` loggers that same
layout and level; ``run.py`` hands it to ``uvicorn.Config``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _level_name(level: str) -> str:
    name = level.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the console (and optional file) handler to the root logger.

    Does nothing when the root logger already has handlers, which is the
    case under pytest or when ``create_app`` runs more than once.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level_name(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def uvicorn_log_config(level: str = "INFO") -> Dict[str, Any]:
    """Build the ``log_config`` passed to ``uvicorn.Config``.

    The uvicorn loggers do not propagate, so their records are not
    printed twice once the root logger has a handler too.
    """
    level_name = _level_name(level)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            name: {"handlers": ["console"], "level": level_name, "propagate": False}
            for name in UVICORN_LOGGERS
        },
    }
