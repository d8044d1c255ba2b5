"""
Progress reporting for gowork commands.

Data goes to stdout; progress notes, successes and errors go to stderr so
that ``cd "$(gowork workon x)"`` only ever sees a path.
"""

import os
import sys
from typing import Optional

RESET = '\033[0m'
RED = '\033[31m'
GREEN = '\033[32m'


class ProgressReporter:
    """Writes human-oriented status lines to stderr."""

    def __init__(self, enabled: Optional[bool] = None):
        """
        Args:
            enabled: Show progress notes. None means only when stderr is a terminal.
        """
        tty = sys.stderr.isatty()
        self.enabled = tty if enabled is None else enabled
        self.use_colors = tty and os.environ.get('NO_COLOR') is None

    def _colorize(self, text: str, color: str) -> str:
        if self.use_colors:
            return f"{color}{text}{RESET}"
        return text

    def __call__(self, message: str):
        """Print a progress note if enabled."""
        if self.enabled:
            print(message, file=sys.stderr, flush=True)

    def success(self, message: str):
        """Print a success note if enabled."""
        self(self._colorize(f"✓ {message}", GREEN))

    def error(self, message: str):
        """Always print errors."""
        print(self._colorize(f"ERROR: {message}", RED), file=sys.stderr, flush=True)


_progress = None


def get_progress(enabled: Optional[bool] = None) -> ProgressReporter:
    """Return the shared reporter, rebuilding it when ``enabled`` is given."""
    global _progress
    if _progress is None or enabled is not None:
        _progress = ProgressReporter(enabled)
    return _progress
