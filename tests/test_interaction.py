from unittest.mock import MagicMock

import pytest

from tableview.interaction import PointerEvent, RowInteractionController, dispatch_selection, row_id

ROWS = [{"Item": "A"}, {"Item": "B"}, {"Item": "C"}]


def test_row_ids_are_positional() -> None:
    controller = RowInteractionController(ROWS)
    assert controller.row_ids() == ["row-0", "row-1", "row-2"]
    assert row_id(7) == "row-7"


def test_activation_without_handler_is_noop() -> None:
    controller = RowInteractionController(ROWS)
    controller.activate(1)
    assert controller.hoverable is False
    assert controller.row_style() is None


def test_activation_calls_handler_once_with_rendered_row() -> None:
    handler = MagicMock()
    controller = RowInteractionController(ROWS, handler)

    controller.activate(1)

    handler.assert_called_once_with({"Item": "B"})
    assert handler.call_args[0][0] is controller.rows[1]
    assert controller.hoverable is True
    assert controller.row_style() == {"cursor": "pointer"}


def test_stopped_event_does_not_reach_handler() -> None:
    handler = MagicMock()
    controller = RowInteractionController(ROWS, handler)
    event = PointerEvent(row_index=0, column_key="Item")
    event.stop_propagation()

    controller.activate(0, event)

    handler.assert_not_called()


def test_activate_by_id() -> None:
    handler = MagicMock()
    controller = RowInteractionController(ROWS, handler)

    controller.activate_by_id("row-2")
    handler.assert_called_once_with({"Item": "C"})

    with pytest.raises(KeyError):
        controller.activate_by_id("row-9")


def test_handler_errors_propagate() -> None:
    controller = RowInteractionController(ROWS, MagicMock(side_effect=RuntimeError("boom")))
    with pytest.raises(RuntimeError):
        controller.activate(0)


def test_dispatch_selection_once_per_change() -> None:
    handler = MagicMock()
    controller = RowInteractionController(ROWS, handler)
    state = {}

    assert dispatch_selection(controller, state, [1]) is True
    # rerun with the selection still set
    assert dispatch_selection(controller, state, [1]) is False
    handler.assert_called_once_with({"Item": "B"})

    assert dispatch_selection(controller, state, [2]) is True
    assert dispatch_selection(controller, state, []) is False
    assert dispatch_selection(controller, state, [2]) is True
    assert handler.call_count == 3
