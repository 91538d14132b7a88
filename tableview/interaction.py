import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, MutableMapping, Optional, Sequence

from tableview.schemas import RowRecord

logger = logging.getLogger(__name__)

RowHandler = Callable[[RowRecord], None]

ROW_ID_PREFIX = "row-"


@dataclass
class PointerEvent:
    """A pointer activation bubbling from a cell widget up to its row."""
    row_index: int
    column_key: Optional[str] = None
    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


def row_id(index: int) -> str:
    return f"{ROW_ID_PREFIX}{index}"


class RowInteractionController:
    """
    Dispatches row activations to an optional external handler.

    The handler receives the row record object exactly as rendered. Without a
    handler activation does nothing; errors raised by the handler propagate
    to the caller.
    """

    def __init__(self, rows: Sequence[RowRecord], on_row_click: Optional[RowHandler] = None):
        self.rows: List[RowRecord] = list(rows)
        self.on_row_click = on_row_click

    @property
    def hoverable(self) -> bool:
        return self.on_row_click is not None

    def row_style(self) -> Optional[Dict[str, str]]:
        return {"cursor": "pointer"} if self.hoverable else None

    def row_ids(self) -> List[str]:
        return [row_id(i) for i in range(len(self.rows))]

    def activate(self, index: int, event: Optional[PointerEvent] = None) -> None:
        if event is not None and event.propagation_stopped:
            return
        if self.on_row_click is None:
            return
        logger.debug("Row %s activated", index)
        self.on_row_click(self.rows[index])

    def activate_by_id(self, identifier: str, event: Optional[PointerEvent] = None) -> None:
        ids = self.row_ids()
        if identifier not in ids:
            raise KeyError(identifier)
        self.activate(ids.index(identifier), event)


def dispatch_selection(
    controller: RowInteractionController,
    state: MutableMapping,
    selected: Sequence[int],
    key: str = "dispatched_row",
) -> bool:
    """
    Activate the first selected row once per selection change.

    Widget selections survive reruns, so ``state`` (e.g. Streamlit's session
    state) remembers the last dispatched index. Clearing the selection resets
    it, which lets the same row be activated again later.
    """
    current = selected[0] if selected else None
    if current == state.get(key):
        return False
    state[key] = current
    if current is None:
        return False
    controller.activate(current)
    return True
