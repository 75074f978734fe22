"""Logging setup for the riftdeck logger tree.

Every module logs through 'riftdeck.<module>' ('riftdeck.deck_io',
'riftdeck.deck_scorer', ...). Handlers hang off the 'riftdeck' root only and
filter nothing themselves, so the level of each logger in the tree decides
what gets written.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

ROOT_LOGGER = 'riftdeck'

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _qualified(name: str) -> str:
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + '.'):
        return name
    return f'{ROOT_LOGGER}.{name}'


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    module_levels: Optional[Mapping[str, int]] = None,
) -> logging.Logger:
    """
    Configure the 'riftdeck' logger tree.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Level of the 'riftdeck' logger
        log_to_file: Whether to log to a timestamped file (default: True)
        log_to_console: Whether to log to stdout (default: True)
        module_levels: Per-module overrides, keyed by module name
            ('deck_scorer') or full logger name ('riftdeck.deck_scorer').
            A module set to DEBUG under an INFO root still gets its
            debug records written.

    Returns:
        The 'riftdeck' logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    # Overrides from an earlier call would otherwise outlive it
    for name, existing in list(logging.root.manager.loggerDict.items()):
        if name.startswith(ROOT_LOGGER + '.') and isinstance(existing, logging.Logger):
            existing.setLevel(logging.NOTSET)

    for name, module_level in (module_levels or {}).items():
        logging.getLogger(_qualified(name)).setLevel(module_level)

    if log_to_file:
        log_dir = Path(log_dir) if log_dir is not None else Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'riftdeck_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Logger inside the riftdeck tree; 'cli' and 'riftdeck.cli' are the same logger."""
    return logging.getLogger(_qualified(name))
