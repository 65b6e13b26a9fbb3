from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from infra.paths import LOG_DIR

# Namespace shared by every vision engine logger (fog.core, fog.mechanics, ...).
ENGINE_LOGGER = "fog"

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","line":%(lineno)d,"msg":"%(message)s"}'
)

Level = Union[str, int]


def configure_logging(
    level: Level = "INFO",
    *,
    json: bool = False,
    logfile: str | Path | None = LOG_DIR / "fog.log",
    engine_level: Optional[Level] = None,
) -> None:
    """
    Route all logging to stdout and, optionally, a log file.

    Args:
        level: Root logging level name or int (e.g., "DEBUG", logging.INFO).
        json: Emit JSON lines when True; otherwise a human-friendly format.
        logfile: File to append logs to; None disables file output.
        engine_level: Separate level for the "fog" loggers, e.g. "DEBUG" to
            trace solver passes without debugging everything else.
    """
    formatter = logging.Formatter(JSON_FORMAT if json else TEXT_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(log_path, encoding="utf-8")
        to_file.setFormatter(formatter)
        handlers.append(to_file)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    logging.getLogger(ENGINE_LOGGER).setLevel(engine_level if engine_level is not None else logging.NOTSET)
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)


# Usage: from infra.logger import configure_logging, get_logger; configure_logging("INFO", engine_level="DEBUG", logfile=None); log = get_logger(__name__); log.info("ready")
