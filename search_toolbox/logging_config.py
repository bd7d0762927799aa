#!/usr/bin/env python3
"""
结构化日志初始化

JSON (default) or plain text output, controlled by LOG_LEVEL and LOG_FORMAT.
"""
import json
import logging
import sys
from typing import Any, Dict, Optional

from search_toolbox.config import get_search_settings

_RESERVED_ATTRS = {
    "args",
    "msg",
    "levelno",
    "levelname",
    "name",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # extra 字段
        for key, value in getattr(record, "__dict__", {}).items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    settings = get_search_settings()
    root = logging.getLogger()
    # 清理已有 handler，避免重复初始化
    for h in list(root.handlers):
        root.removeHandler(h)

    level_name = str(level or settings.log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    handler = logging.StreamHandler(sys.stderr)

    fmt_name = str(fmt or settings.log_format).lower()
    if fmt_name == "json":
        handler.setFormatter(JsonFormatter())
    else:
        formatter = logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)

    root.addHandler(handler)
