from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default
FALLBACK_LOG_NAME = "g810-led-install.log"

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_RULE = "=" * 69


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return str(env.get("DEBUG", "0")).strip() == "1"


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: Optional[int] = None,
    also_console: bool = True,
) -> str:
    """Configure logging.

    Every step's decisions end up in one append-only log file with lines of
    the form ``[timestamp] [LEVEL] message``. DEBUG lines are only emitted
    when ``DEBUG=1`` is set in the environment.

    Notes:
    - If the requested log directory can't be created or written, we fall
      back to a file in the current working directory and report both paths.

    Returns the actual file path being used.
    """

    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.INFO

    logging.addLevelName(logging.WARNING, "WARN")

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_g810_configured", False):
        return getattr(logger, "_g810_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    except OSError:
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        file_handler = logging.FileHandler(fallback, mode="a", encoding="utf-8")
        chosen_path = fallback
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_g810_configured", True)
    setattr(logger, "_g810_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
