# src/htmlwalker/utils/configure_logging.py
import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

from htmlwalker.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

LIBRARY_LOGGER = "htmlwalker"
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

Level = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    Writes records through `tqdm.write()`, so log lines emitted while a
    caller shows a progress bar over many document loads don't tear it.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Level, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        level: Optional[Level] = None,
        module_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None
) -> logging.Logger:
    """
    Attaches a TQDM-friendly handler to the 'htmlwalker' logger.

    Unset arguments come from the 'debug' section of the settings:
    `debug.level`, `debug.module_levels` (e.g. {"htmlwalker.dom.traverser": "DEBUG"})
    and `debug.silenced_loggers` (third-party loggers such as urllib3).
    Only the library's own logger tree is touched; the root logger is left alone.
    """
    if level is None:
        level = config_manager.get_nested("debug.level", "WARNING")
    if module_levels is None:
        module_levels = config_manager.get_nested("debug.module_levels", {})
    if silenced_loggers is None:
        silenced_loggers = config_manager.get_nested("debug.silenced_loggers", {})

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(_to_level(level, logging.WARNING))

    # Replace a handler installed by an earlier call instead of stacking them
    for handler in [h for h in library_logger.handlers if isinstance(h, LogWithTqdm)]:
        library_logger.removeHandler(handler)

    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    library_logger.addHandler(handler)
    library_logger.propagate = False

    for name, module_level in module_levels.items():
        if not name.startswith(LIBRARY_LOGGER):
            logger.warning("Ignoring level for non-library logger '%s'.", name)
            continue
        logging.getLogger(name).setLevel(_to_level(module_level, logging.INFO))

    for name, silenced_level in silenced_loggers.items():
        logging.getLogger(name).setLevel(_to_level(silenced_level, logging.CRITICAL))

    return library_logger
