"""Debug logging utilities."""

import os
import sys
import time


def get_log_path() -> str:
    """Get the debug log file path under the XDG state directory."""
    state_home = os.getenv("XDG_STATE_HOME", os.path.expanduser("~/.local/state"))
    return os.path.join(state_home, "spectrbar", "debug.log")


def debug_log(message: str, widget_id: str = "") -> None:
    """Append a debug message to the log file if debug mode is enabled.

    Args:
        message: Debug message to log
        widget_id: Optional identifier of the widget the message concerns
    """
    if not os.getenv("SPECTRBAR_DEBUG"):
        return

    log_file = get_log_path()
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    widget_prefix = f"[{widget_id}] " if widget_id else ""
    log_message = f"[{timestamp}] {widget_prefix}{message}\n"

    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {widget_prefix}{message}",
            file=sys.stderr,
        )
