# logger_utils.py - logging messages and timing metrics for the fuzzy index

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where log files go by default
LOG_DIR = "logs"

# Path to the default log file, can be overriden per Log instance / via config
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "fuzzy_index.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger writing timestamped lines to a file and the console."""

    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "INFO",
        use_color: bool = True,
        echo: bool = True,
        stream: Optional[TextIO] = None,
    ):
        if level.upper() not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.path = path or DEFAULT_LOG_PATH
        self.level = level.upper()
        self.use_color = use_color
        self.echo = echo
        self.stream = stream

    def _write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if LEVELS[level] < LEVELS[self.level]:
            return

        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        # the folder is created lazily, on first write
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        out = self.stream or sys.stdout
        if self.use_color and level in self.COLORS:
            out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            out.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str) -> None:
        self._write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._write("INFO", msg)

    def warning(self, msg: str) -> None:
        self._write("WARNING", msg)

    def error(self, msg: str) -> None:
        self._write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timings, counts). Example line:
        [2026-01-01 12:45:02] INFO    | build index done: 0.123s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Measure a code block and log how long it took:
            with log.time_block("build index"):
                do_some_work()
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
