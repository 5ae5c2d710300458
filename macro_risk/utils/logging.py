"""Logging configuration utilities.

One call at process start wires the root logger for either local runs
(rotating file) or containers (stdout), in plain text or JSON lines.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Literal, Optional, TextIO

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_OUTPUT = "stdout"
DEFAULT_LOG_FILE_PATH = "logs/macro-risk.log"
DEFAULT_LOG_FORMAT = "text"

LogOutput = Literal["stdout", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", '
    '"file": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)


def is_kubernetes_env() -> bool:
    """Check if the process runs inside a Kubernetes pod."""
    return bool(
        os.environ.get("K8S_CLUSTER")
        or os.environ.get("KUBERNETES_SERVICE_HOST")
        or os.path.exists("/var/run/secrets/kubernetes.io/serviceaccount")
    )


def _build_handlers(output: str, file_path: str, stream: Optional[TextIO] = None) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if output in ("stdout", "both"):
        handlers.append(logging.StreamHandler(stream or sys.stdout))
    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=10 * 1024 * 1024, backupCount=5))
    return handlers


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Logging level name (e.g. "INFO") or numeric value. Falls back to
        ``LOG_LEVEL``.
    output:
        "stdout", "file" or "both". Falls back to ``LOG_OUTPUT``; inside
        Kubernetes the default is always stdout.
    file_path:
        Log file used for "file"/"both". Falls back to ``LOG_FILE_PATH``.
    log_format:
        "text" or "json". Falls back to ``LOG_FORMAT``.
    stream:
        Stream for the console handler. Defaults to ``sys.stdout``; pass
        ``sys.stderr`` when stdout carries program output.
    """
    # Resolved at call time so a .env loaded in main() is honoured
    if level is None:
        level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_format is None:
        log_format = os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT).lower()  # type: ignore[assignment]
    if output is None:
        if is_kubernetes_env() and "LOG_OUTPUT" not in os.environ:
            output = "stdout"
        else:
            output = os.environ.get("LOG_OUTPUT", DEFAULT_LOG_OUTPUT).lower()  # type: ignore[assignment]
    if file_path is None:
        file_path = os.environ.get("LOG_FILE_PATH") or DEFAULT_LOG_FILE_PATH

    formatter = logging.Formatter(_JSON_FORMAT if log_format == "json" else _TEXT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in _build_handlers(output, file_path, stream):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
