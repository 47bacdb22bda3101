"""Logging configuration shared by the CLI and embedding hosts.

Standard messages go through the root logger. The per-query trace of the
engine (words, concept expansions, synonyms, result table) goes to the
separate ``detail`` logger, which does not propagate and stays silent unless
``[LOGGING] log_search_details = 1``.
"""

from __future__ import annotations

import configparser
import logging
import os
import shutil
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

DETAIL_LOGGER_NAME = "detail"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class SafeEncodingStreamHandler(logging.StreamHandler):
    def emit(self, record):
        """Schreibt Logzeilen robust unter Erhalt nicht-ASCII-Zeichen."""
        try:
            msg = self.format(record)
            stream = self.stream
            # Encode to UTF-8 with replacement for unencodable characters
            stream.write(msg.encode("utf-8", errors="replace").decode("utf-8", errors="ignore") + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


class SafeRotatingFileHandler(RotatingFileHandler):
    """Rotating handler that tolerates Windows file locks (e.g. OneDrive/AV)."""

    def rotate(self, source: str, dest: str) -> None:
        try:
            super().rotate(source, dest)
            return
        except PermissionError as exc:
            if getattr(exc, "winerror", None) != 32:
                raise
        # Fallback: copy current log and truncate instead of renaming
        try:
            if os.path.exists(source):
                shutil.copy2(source, dest)
            with open(source, "w", encoding=self.encoding or "utf-8") as fh:
                fh.truncate(0)
        except OSError:
            return


def _level(name: str, default: int) -> int:
    return logging._nameToLevel.get(name.strip().upper(), default)


def _reset_handlers(target: logging.Logger) -> None:
    for handler in target.handlers[:]:
        target.removeHandler(handler)
        try:
            handler.close()
        except OSError:
            pass


def configure_logging(
    cfg: Optional[configparser.ConfigParser] = None,
    *,
    console_level: Optional[int] = None,
    log_file: Optional[Path] = None,
    search_details: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Install the handlers described in ``[LOGGING]`` and return the detail logger.

    Keyword arguments override the configuration (used by CLI flags);
    ``stream`` defaults to stdout.
    """

    cfg = cfg or configparser.ConfigParser()
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    _reset_handlers(root_logger)
    level_name = cfg.get("LOGGING", "console_level", fallback="INFO")
    level = console_level if console_level is not None else _level(level_name, logging.INFO)
    safe_handler = SafeEncodingStreamHandler(stream or sys.stdout)
    safe_handler.setFormatter(formatter)
    safe_handler.setLevel(level)
    root_logger.addHandler(safe_handler)
    root_logger.setLevel(level)

    detail_logger = logging.getLogger(DETAIL_LOGGER_NAME)
    _reset_handlers(detail_logger)
    detail_handler = SafeEncodingStreamHandler(stream or sys.stdout)
    detail_handler.setFormatter(formatter)
    detail_logger.addHandler(detail_handler)
    detail_logger.propagate = False

    if search_details is None:
        search_details = cfg.get("LOGGING", "log_search_details", fallback="0").strip() == "1"
    if search_details:
        detail_logger.setLevel(logging.INFO)
        detail_handler.setLevel(logging.INFO)
    else:
        # If no detailed logging is active, set the level high to ignore all info messages.
        detail_logger.setLevel(logging.WARNING)
        detail_handler.setLevel(logging.WARNING)

    file_path: Optional[Path] = log_file
    if file_path is None and cfg.get("LOGGING", "file_enabled", fallback="0").strip() == "1":
        raw = cfg.get("LOGGING", "file_path", fallback="").strip()
        file_path = Path(raw) if raw else None
    if file_path is not None:
        try:
            max_bytes = max(0, cfg.getint("LOGGING", "file_max_bytes", fallback=1048576))
            backup_count = max(0, cfg.getint("LOGGING", "file_backup_count", fallback=5))
        except ValueError:
            max_bytes, backup_count = 1048576, 5
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = SafeRotatingFileHandler(
                file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
                delay=True,
            )
            file_handler.setLevel(_level(cfg.get("LOGGING", "file_level", fallback=level_name), level))
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            # Auch Detail-Logger schreibt in Datei
            detail_logger.addHandler(file_handler)
        except OSError as exc:
            logger.warning("Dateilogs konnten nicht initialisiert werden: %s", exc)

    return detail_logger
