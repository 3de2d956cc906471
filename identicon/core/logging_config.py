"""Logging setup for the CLI and the desktop app. JSON or key=value lines."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)


class StructuredFormatter(logging.Formatter):
    """One record per line; extra= fields are carried through."""

    def __init__(self, use_json: bool = True) -> None:
        super().__init__()
        self.use_json = use_json

    def format(self, record: logging.LogRecord) -> str:
        log_dict: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_dict[key] = value
        if self.use_json:
            return json.dumps(log_dict, default=str)
        return " ".join(f"{k}={v!r}" for k, v in log_dict.items())


def setup_logging(level: str = "INFO", use_json: bool = False, stream: TextIO | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(StructuredFormatter(use_json=use_json))
        root.addHandler(handler)
