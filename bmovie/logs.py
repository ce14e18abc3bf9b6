"""File-backed loggers and an adapter exposing the web framework logger API."""

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

DEBUG = 1
INFO = 2
WARN = 3
ERROR = 4
OFF = 5

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}

_SAFE_CHARS = set("-._/@^+")


class Formatter(str, Enum):
    TEXT = "TEXT"
    JSON = "JSON"


@dataclass
class LogOption:
    file_path: str
    file_name: str
    formatter: str = Formatter.TEXT
    stdout: bool = False
    report_caller: bool = False


def _timestamp(record):
    moment = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone()
    return moment.isoformat(timespec="seconds")


def _level(record):
    return getattr(record, "log_level", None) or _LEVEL_NAMES.get(
        record.levelno, record.levelname.lower()
    )


def _extra_fields(record):
    extra = getattr(record, "fields", None)
    return dict(extra) if isinstance(extra, dict) else {}


def _message(record):
    return record.getMessage().removesuffix("\n")


class _TextFormatter(logging.Formatter):
    def __init__(self, report_caller):
        super().__init__()
        self.report_caller = report_caller

    @staticmethod
    def _quote(value):
        text = str(value)
        if text and all(ch.isalnum() or ch in _SAFE_CHARS for ch in text):
            return text
        return json.dumps(text, ensure_ascii=False)

    def format(self, record):
        pairs = [("time", _timestamp(record)), ("level", _level(record)), ("msg", _message(record))]
        if self.report_caller:
            pairs.append(("func", record.funcName))
            pairs.append(("file", f"{record.pathname}:{record.lineno}"))
        pairs.extend(sorted(_extra_fields(record).items()))
        return " ".join(f"{key}={self._quote(value)}" for key, value in pairs)


class _JsonFormatter(logging.Formatter):
    def __init__(self, report_caller):
        super().__init__()
        self.report_caller = report_caller

    def format(self, record):
        data = _extra_fields(record)
        data.update(level=_level(record), msg=_message(record), time=_timestamp(record))
        if self.report_caller:
            data["func"] = record.funcName
            data["file"] = f"{record.pathname}:{record.lineno}"
        return json.dumps(data, default=str, sort_keys=True)


def new_logger(option):
    """Create an INFO-level logger writing to file_path + file_name.

    The directory is created when missing. Output is also copied to
    stdout when option.stdout is set.
    """
    if not os.path.exists(option.file_path):
        os.makedirs(option.file_path, exist_ok=True)
    path = option.file_path + option.file_name

    if option.formatter == Formatter.JSON:
        formatter = _JsonFormatter(option.report_caller)
    else:
        formatter = _TextFormatter(option.report_caller)

    logger = logging.Logger(f"bmovie:{path}", logging.INFO)
    logger.propagate = False

    handlers = [logging.FileHandler(path, mode="a", encoding="utf-8")]
    if option.stdout:
        handlers.append(logging.StreamHandler(sys.stdout))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


class _MultiWriter:
    def __init__(self, streams):
        self.streams = list(streams)

    def write(self, text):
        for stream in self.streams:
            stream.write(text)
        return len(text)

    def flush(self):
        for stream in self.streams:
            stream.flush()


def _as_json(j):
    return json.dumps(j, default=str, sort_keys=True)


@dataclass
class LoggerWrapper:
    """Adapts a logging.Logger to the web framework's logger interface."""

    logger: logging.Logger
    prefix: str = "echo"
    level: int = INFO
    header: str = ""

    def output(self):
        """Return the stream the wrapped logger writes to."""
        streams = [
            h.stream
            for h in self.logger.handlers
            if isinstance(h, logging.StreamHandler) and h.stream is not None
        ]
        if not streams:
            return sys.stderr
        if len(streams) == 1:
            return streams[0]
        return _MultiWriter(streams)

    def set_header(self, header):
        """Record the header; it does not change how records are formatted."""
        self.header = header

    def printj(self, j):
        self.logger.info(_as_json(j))

    def debugj(self, j):
        self.logger.debug(_as_json(j))

    def infoj(self, j):
        self.logger.info(_as_json(j))

    def warnj(self, j):
        self.logger.warning(_as_json(j))

    def errorj(self, j):
        self.logger.error(_as_json(j))

    def fatalj(self, j):
        """Log at fatal level and exit with status 1."""
        self.logger.critical(_as_json(j))
        raise SystemExit(1)

    def panicj(self, j):
        """Log at panic level and raise RuntimeError."""
        message = _as_json(j)
        self.logger.critical(message, extra={"log_level": "panic"})
        raise RuntimeError(message)