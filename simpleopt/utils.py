# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for programs that parse their command line with simpleopt.

The parser itself only emits records on the `simpleopt` logger: option
registration and parse summaries at DEBUG, shorthands shadowed by an earlier
option at WARNING. `setup_logging` wires handlers for those records and sets the
`simpleopt` logger to the lowest level any handler will show, so DEBUG records
are not built when nothing would print them.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from simpleopt.logger import logger

LOG_MODE_ENV = "SIMPLEOPT_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in _CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        # Option tokens may contain "[...]"; never read them as Rich markup.
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "simpleopt.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Route simpleopt's log records to the console and, optionally, a file.

    Existing root handlers are replaced. With the defaults, shorthand shadowing
    warnings reach the console while the DEBUG trace of each parse only goes to
    `simpleopt.log`.

    Args:
        mode (str | None): "cli" for Rich console logs, "json" for one JSON
            object per record. Defaults to `SIMPLEOPT_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | None): Log file path. None disables file logging.
        json_log_to_file (bool): Write the file in JSON instead of plain text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or (
            "json" if running_in_container() else "cli"
        )

    handlers = [_console_handler(mode)]
    handlers[0].setLevel(console_log_level)
    if log_filename:
        handlers.append(_file_handler(log_filename, json_log_to_file))
        handlers[-1].setLevel(file_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)

    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
