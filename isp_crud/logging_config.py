"""
Logging setup.

``setup_logging`` attaches a rich console handler (and optionally a file
handler) to the root logger. It does nothing if the root logger already has
handlers, so calling it from both the demo and the shell is safe.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", logfile: Optional[str] = None, console: Optional[Console] = None) -> None:
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    rich_handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    rich_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(rich_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)
