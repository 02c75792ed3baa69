"""
imbus/logs/logger.py

Logger setup for proxy runs: one log file per run plus console output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEFMT = '%Y-%m-%d %H:%M:%S'


def get_logger(run_name: str = "imbus", scenario: Optional[str] = None,
               log_dir: Union[str, Path] = "logs", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Return the ``imbus`` package logger, writing to a fresh log file.

    Parameters
    ----------
    run_name : str
        Name of the run; first part of the log file name.
    scenario : str, optional
        Survey or dataset name; second part of the log file name.
    log_dir : str or Path
        Directory for log files, created if missing.
    level : int or str
        Logging level, e.g. ``logging.DEBUG`` or ``'DEBUG'``.

    Returns
    -------
    logging.Logger
        Logger named ``imbus``; module loggers (``imbus.proxies...``)
        propagate to it.

    Notes
    -----
    Handlers from a previous call are removed, so calling this twice does
    not duplicate output.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    parts = [run_name] + ([scenario] if scenario else []) + [stamp]
    log_path = log_dir / f"{'_'.join(parts)}.log"

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    logger = logging.getLogger("imbus")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    # File handler
    fh = logging.FileHandler(log_path)
    fh.setLevel(level)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    logger.info("Logging: level=%s, file=%s", logging.getLevelName(level), log_path)
    return logger
