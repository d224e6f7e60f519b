"""
Logging setup shared by the CLI.

Console records go through a :class:`rich.logging.RichHandler`; a rotating
``graphql_config.log`` is added when ``--log-dir`` or
``$GRAPHQL_CONFIG_LOG_DIR`` names a directory, and ``--save-logfile`` mirrors
console output into a plain-text file.

structlog is routed through the standard library so every handler sees the
same records. The decoding core never logs; only the loader and the CLI do.
"""

from __future__ import annotations

import atexit
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

import structlog
from rich.logging import RichHandler
from structlog.dev import ConsoleRenderer as StructlogConsoleRenderer
from structlog.stdlib import LoggerFactory

__all__ = ["setup_logging", "LOG_DIR_ENV"]

LOG_DIR_ENV = "GRAPHQL_CONFIG_LOG_DIR"


# --------------------------------------------------------------------------- #
# Internal helpers – file-based handlers                                      #
# --------------------------------------------------------------------------- #
def _rotating_file_handler(log_dir: Path | None, level: int) -> logging.Handler | None:
    """Return a rotating file handler or *None* when no directory is known.

    Args:
        log_dir: Explicit log directory. Falls back to ``$GRAPHQL_CONFIG_LOG_DIR``.
        level: Log-level for the handler.

    Returns:
        Handler writing ``graphql_config.log`` with three backups of ~5 MB,
        or ``None`` when neither *log_dir* nor the environment variable is set.
    """
    env_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir is not None:
        logdir = log_dir.expanduser()
    elif env_dir:
        logdir = Path(env_dir).expanduser()
    else:
        return None
    logdir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=logdir / "graphql_config.log",
        maxBytes=5_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def _plain_text_file_handler(
    path: Optional[Path], level: int
) -> logging.Handler | None:
    """Return a plain-text file handler or *None* when *path* is *None*."""
    if path is None:
        return None

    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8", mode="a")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    atexit.register(handler.close)
    return handler


# --------------------------------------------------------------------------- #
# Public API – main entry-point                                               #
# --------------------------------------------------------------------------- #
def setup_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    log_dir: Path | None = None,
    extra_text_log: Optional[Path] = None,
) -> None:
    """Install console, rotating-file and plain-text handlers, then structlog.

    Args:
        verbose: Lower the console threshold to INFO.
        debug: Emit DEBUG-level messages plus rich tracebacks.
        log_dir: Directory for the rotating log file.
        extra_text_log: File receiving a plain-text copy of console records.
    """
    console_lvl = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    file_lvl = logging.DEBUG if debug else logging.INFO

    handlers: list[logging.Handler] = [
        RichHandler(
            level=console_lvl,
            rich_tracebacks=debug,
            tracebacks_show_locals=False,
            markup=False,
        )
    ]

    file_handler = _rotating_file_handler(log_dir, file_lvl)
    if file_handler:
        handlers.append(file_handler)

    txt_handler = _plain_text_file_handler(extra_text_log, console_lvl)
    if txt_handler:
        handlers.append(txt_handler)

    # Root logger stays at DEBUG; handlers filter. ``force`` lets repeated CLI
    # invocations in one process (tests) replace earlier handlers.
    logging.basicConfig(
        level=logging.DEBUG,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            (
                StructlogConsoleRenderer(colors=False)
                if verbose or debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            min(console_lvl, file_lvl)
        ),
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=False,
    )
