"""Retriever sampling the standard output of an external command."""

import subprocess

from typing import Optional

from ..parsers.digits import to_data
from ..types import Data
from ..utils.debug import debug_log
from .base import DataRetriever
from .registry import register_retriever


def _run_command(args: list[str], timeout: Optional[float] = None) -> Optional[bytes]:
    """Run a command and return its stdout, or None if it could not run.

    Standard error and the exit status are ignored; only a failure to
    launch (or a timeout) counts as an error.

    Args:
        args: Program followed by its arguments
        timeout: Seconds to wait before giving up, or None to wait forever

    Returns:
        Raw stdout bytes or None if the command failed to run
    """
    if not args:
        return None
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
        )
        return result.stdout
    except subprocess.TimeoutExpired:
        debug_log(f"Command timed out after {timeout}s: {' '.join(args)}")
        return None
    except (FileNotFoundError, PermissionError, OSError, ValueError) as e:
        debug_log(f"Command failed to start: {' '.join(args)}: {e}")
        return None


@register_retriever("extern")
class ExternRetriever(DataRetriever):
    """Sample the output of a command line.

    The command line is split on whitespace; the first token is the program
    and the rest are its arguments. Quoting is not supported, so a single
    argument cannot contain spaces.
    """

    def __init__(self, command_line: str, timeout: Optional[float] = None) -> None:
        self.command_line = command_line
        self.timeout = timeout

    def describe(self) -> str:
        return self.command_line

    def retrieve(self, is_numeric: bool) -> Data:
        """Run the command and parse its output."""
        stdout = _run_command(self.command_line.split(), self.timeout)
        if stdout is None:
            return Data.unavailable(is_numeric)

        output = stdout.decode("utf-8", errors="replace")
        return to_data(output, is_numeric, self.describe())
