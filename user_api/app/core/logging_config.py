"""
Logging setup driven by ``Settings``.

``DEBUG`` forces the ``DEBUG`` level regardless of ``LOG_LEVEL``;
``LOG_FILE`` adds a file handler next to the console one.  Handlers
installed here carry a name, so calling ``setup_logging`` again (tests,
a second ``create_app``) only adds what is missing and never
duplicates output.
"""

import logging
import sys
from pathlib import Path
from typing import List

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "user_api.console"
FILE_HANDLER_NAME = "user_api.file"

# File watchers used by ``uvicorn --reload`` log every change they see.
QUIET_LOGGERS = ("watchfiles", "watchfiles.main", "watchdog")


def resolve_level(config: Settings) -> int:
    """Return the numeric root level; unknown names fall back to INFO."""
    if config.debug:
        return logging.DEBUG
    level = getattr(logging, config.log_level.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def build_handlers(config: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    handlers: List[logging.Handler] = [console_handler]

    if config.log_file:
        log_path = Path(config.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Settings) -> None:
    """Configure the root logger from ``config``."""
    root = logging.getLogger()
    root.setLevel(resolve_level(config))

    installed = {handler.get_name() for handler in root.handlers}
    for handler in build_handlers(config):
        if handler.get_name() in installed:
            handler.close()
            continue
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)
