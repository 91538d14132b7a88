"""
Per-cell copy-to-clipboard widget.

The widget is a two-state machine. Idle is the initial state; a successful
clipboard write moves it to Confirmed, and a timer moves it back to Idle
after COPY_DWELL_SECONDS. Activating it again at any time issues a fresh
write and, on success, restarts the timer.

The clipboard itself is an external collaborator: anything with an
``async write_text(text)`` coroutine method.
"""
import asyncio
import logging
from enum import Enum
from typing import Callable, Optional, Protocol

from tableview.interaction import PointerEvent

logger = logging.getLogger(__name__)

COPY_DWELL_SECONDS = 2.0

IDLE_LABEL = "Copy to clipboard"
CONFIRMED_LABEL = "Copied!"


class ClipboardWriteError(Exception):
    """Raised by clipboard collaborators when a write is rejected."""


class ClipboardWriter(Protocol):
    async def write_text(self, text: str) -> None:
        ...


class MemoryClipboard:
    """Keeps the last written text; for hosts without a platform clipboard."""

    def __init__(self):
        self.text: Optional[str] = None

    async def write_text(self, text: str) -> None:
        self.text = text


class ThreadedClipboard:
    """Adapts a blocking ``setter(text)`` so it runs off the event loop."""

    def __init__(self, setter: Callable[[str], None]):
        self._setter = setter

    async def write_text(self, text: str) -> None:
        try:
            await asyncio.to_thread(self._setter, text)
        except Exception as e:
            raise ClipboardWriteError(str(e)) from e


class WidgetState(str, Enum):
    IDLE = "idle"
    CONFIRMED = "confirmed"


class ClipboardExportWidget:
    def __init__(self, text: str, clipboard: ClipboardWriter, dwell: float = COPY_DWELL_SECONDS):
        self.text = text
        self.clipboard = clipboard
        self.dwell = dwell
        self.state = WidgetState.IDLE
        self._timer: Optional[asyncio.TimerHandle] = None
        self._torn_down = False
        self._generation = 0

    # ------------------------------
    # Indicator
    # ------------------------------
    @property
    def confirmed(self) -> bool:
        return self.state is WidgetState.CONFIRMED

    @property
    def label(self) -> str:
        return CONFIRMED_LABEL if self.confirmed else IDLE_LABEL

    @property
    def aria_label(self) -> str:
        return self.label

    @property
    def icon(self) -> str:
        return "check" if self.confirmed else "copy"

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def snapshot(self) -> dict:
        return {"state": self.state.value, "label": self.label, "aria_label": self.aria_label, "icon": self.icon}

    # ------------------------------
    # Transitions
    # ------------------------------
    def activate(self, event: Optional[PointerEvent] = None) -> "asyncio.Task[None]":
        """
        Start a copy. Must be called from a running event loop.

        Propagation is stopped before anything is awaited so the enclosing
        row never sees this click.
        """
        loop = asyncio.get_running_loop()
        if event is not None:
            event.stop_propagation()
        self._generation += 1
        return loop.create_task(self._copy(self._generation))

    async def _copy(self, generation: int) -> None:
        try:
            await self.clipboard.write_text(self.text)
        except Exception as e:
            logger.error("Failed to copy: %s", e)
            if self._is_current(generation):
                self._cancel_timer()
                self.state = WidgetState.IDLE
            return

        if not self._is_current(generation):
            return
        self._cancel_timer()
        self.state = WidgetState.CONFIRMED
        self._timer = asyncio.get_running_loop().call_later(self.dwell, self._revert)

    def _is_current(self, generation: int) -> bool:
        # superseded or torn-down writes must not touch state
        return not self._torn_down and generation == self._generation

    def _revert(self) -> None:
        self._timer = None
        if not self._torn_down:
            self.state = WidgetState.IDLE

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def teardown(self) -> None:
        """Cell removed: cancel the pending reversion and ignore late writes."""
        self._cancel_timer()
        self._torn_down = True
