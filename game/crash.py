"""Crash reporting at the process boundary."""

import json
import os
import sys
import traceback

from .logger import format_timestamp

_crash_log = "logs/crash.log"


def configure(crash_file):
    """Set crash log file path from config."""
    global _crash_log
    _crash_log = crash_file


def _write_crash(timestamp, exc_name, exc_msg, tb):
    log_dir = os.path.dirname(_crash_log)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    record = {"timestamp": timestamp, "type": exc_name, "msg": exc_msg, "traceback": tb}
    with open(_crash_log, "a") as f:
        f.write(json.dumps(record) + "\n")


def log_crash(exc_type, exc_value, exc_tb):
    """Report an uncaught exception on stderr and append it to the crash log."""
    timestamp = format_timestamp()
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    exc_msg = str(exc_value) if exc_value else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

    sys.stderr.write(f"\n{'=' * 60}\nCRASH {timestamp}\n{'=' * 60}\n")
    sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{'=' * 60}\n\n")
    try:
        _write_crash(timestamp, exc_name, exc_msg, tb)
    except OSError as exc:
        sys.stderr.write(f"crash log not written ({_crash_log}): {exc}\n")


def install_crash_handler(crash_file=None):
    """Install global sync exception handler."""
    if crash_file:
        configure(crash_file)
    sys.excepthook = log_crash
