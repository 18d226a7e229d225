# src/xpboard/logging_config.py

"""Application-wide logging setup."""

import logging
import sys


def configure_logging(level_name: str | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Safe to call more than once (reload, tests): existing handlers are
    kept and only the level is updated.
    """
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # httpx logs every upstream request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
