from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

DEFAULT_LOG_PATH = "logs/polkadot-launcher.log"

# Handlers we install carry this name so repeated setup can find them.
HANDLER_NAME = "polkadot-launcher"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _installed_handlers(root: logging.Logger) -> List[logging.Handler]:
    return [h for h in root.handlers if h.get_name() == HANDLER_NAME]


def _open_file_handler(log_path: str) -> logging.Handler:
    Path(log_path).parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path, encoding="utf-8")


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Attach the launcher's file and console handlers to the root logger.

    The node and sidecar write to the terminal anyway, so a log file that
    cannot be opened is not fatal: logging continues on the console only and
    ``None`` is returned. Otherwise the file path in use is returned.

    Calling this again only adjusts the level.
    """

    root = logging.getLogger()
    root.setLevel(level)

    existing = _installed_handlers(root)
    if existing:
        files = [h for h in existing if isinstance(h, logging.FileHandler)]
        return files[0].baseFilename if files else None

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    handlers: List[logging.Handler] = []

    chosen: Optional[str] = log_path
    file_error: Optional[OSError] = None
    try:
        handlers.append(_open_file_handler(log_path))
    except OSError as e:
        chosen, file_error = None, e

    if also_console or file_error is not None:
        handlers.append(logging.StreamHandler())

    for h in handlers:
        h.set_name(HANDLER_NAME)
        h.setFormatter(fmt)
        root.addHandler(h)

    log = logging.getLogger(__name__)
    if file_error is not None:
        log.warning("Cannot open log file %s (%s); logging to console only", log_path, file_error)
    else:
        log.info("Logging to %s", log_path)
    return chosen
