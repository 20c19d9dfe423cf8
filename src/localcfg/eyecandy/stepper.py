# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Single-step progress indicator for localcfg CLI UI.

A step animates a spinner next to its name on a background thread until it
is completed. Completion stops the animation and prints the final status
line exactly once.
"""

from __future__ import annotations

import itertools
import threading
from typing import TYPE_CHECKING

from rich.console import Console
from rich.control import Control
from rich.spinner import Spinner
from rich.text import Text

from localcfg.errors import AlreadyCompletedError

if TYPE_CHECKING:
    from types import TracebackType

SPINNER_NAME = "clock"
REDRAW_INTERVAL = 0.1


class Step:
    """
    Animated status line for one named unit of work.

    Args:
        name (str): Label shown next to the spinner and in the final line
        console (Console | None): Rich console instance for output
            (optional, creates default if None)
        interval (float): Seconds between spinner frames

    Example:
        with Step("Saving config") as step:
            store.set("key", "value")
    """

    def __init__(
        self, name: str, console: Console | None = None, *, interval: float = REDRAW_INTERVAL
    ) -> None:
        self._name = name
        self.console = console or Console()
        self._interval = interval
        self._frames = Spinner(SPINNER_NAME).frames
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._completed = False
        self._thread = threading.Thread(
            target=self._redraw, name=f"step-{name}", daemon=True
        )
        self._thread.start()

    @property
    def name(self) -> str:
        """Name of the step."""
        return self._name

    @property
    def completed(self) -> bool:
        """True once :meth:`complete` has been called."""
        with self._lock:
            return self._completed

    def complete(self, error: BaseException | None = None) -> BaseException | None:
        """Mark the step as finished, failed if ``error`` is given.

        Args:
            error (BaseException | None): Failure to report, or None on success

        Returns:
            BaseException | None: ``error``, unchanged

        Raises:
            AlreadyCompletedError: If the step was already completed
        """
        with self._lock:
            if self._completed:
                raise AlreadyCompletedError(self._name)
            self._completed = True
            self._stop.set()
            self._thread.join()
            self._render_result(error)
        return error

    def __enter__(self) -> Step:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.completed:
            self.complete(exc)

    def _redraw(self) -> None:
        # Only animate on a real terminal; piped output gets the final line only
        if not self.console.is_terminal:
            return
        for frame in itertools.cycle(self._frames):
            if self._stop.is_set():
                return
            self.console.control(Control.move_to_column(0))
            self.console.print(
                Text(f"{frame} {self._name}"), end="", soft_wrap=True, highlight=False
            )
            if self._stop.wait(self._interval):
                return

    def _render_result(self, error: BaseException | None) -> None:
        if self.console.is_terminal:
            self.console.control(Control.move_to_column(0))
        if error is None:
            line = Text(f"✅ {self._name}", style="bold green")
        else:
            line = Text(f"🔴 {self._name} - error: {error}", style="bold red")
        self.console.print(line, soft_wrap=True, highlight=False)
