"""
One presentation pass over a TableProps payload.

A TableView owns everything derived from a single render: the table model,
the empty-state decision, the row controller and one copy widget per cell in
a copyable column. Nothing is reused between passes; ``rerender`` tears the
old view down and builds a new one.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from tableview.classifier import is_copyable_column
from tableview.clipboard import ClipboardExportWidget, ClipboardWriter, MemoryClipboard
from tableview.interaction import PointerEvent, RowHandler, RowInteractionController, row_id
from tableview.presentation import Presentation, PresentationKind, resolve_presentation
from tableview.schemas import RowRecord, TableProps
from tableview.transform import fields_to_table

logger = logging.getLogger(__name__)


class TableView:
    def __init__(
        self,
        props: TableProps,
        on_row_click: Optional[RowHandler] = None,
        clipboard: Optional[ClipboardWriter] = None,
    ):
        self.props = props
        self.on_row_click = on_row_click
        self.clipboard = clipboard if clipboard is not None else MemoryClipboard()

        model = fields_to_table(props.fields)
        self.presentation: Presentation = resolve_presentation(props.title, props.fields, model)
        self.controller = RowInteractionController(self.presentation.model.rows, on_row_click)
        self.copyable_columns: List[str] = [
            col.key for col in self.presentation.model.columns if is_copyable_column(col.key)
        ]

        self.widgets: Dict[Tuple[int, str], ClipboardExportWidget] = {}
        if self.presentation.kind is PresentationKind.TABLE:
            for index, row in enumerate(self.rows):
                for key in self.copyable_columns:
                    self.widgets[(index, key)] = ClipboardExportWidget(row[key], self.clipboard)

    @property
    def rows(self) -> List[RowRecord]:
        return self.presentation.model.rows

    def widget(self, index: int, key: str) -> ClipboardExportWidget:
        return self.widgets[(index, key)]

    # ------------------------------
    # Interaction
    # ------------------------------
    def click_row(self, index: int) -> None:
        """Pointer click on a plain cell of row ``index``."""
        self.controller.activate(index, PointerEvent(row_index=index))

    def click_copy(self, index: int, key: str) -> "asyncio.Task[None]":
        """Pointer click on a copy widget; the event still bubbles to the row."""
        event = PointerEvent(row_index=index, column_key=key)
        task = self.widget(index, key).activate(event)
        self.controller.activate(index, event)
        return task

    def teardown(self) -> None:
        for widget in self.widgets.values():
            widget.teardown()

    def rerender(self, props: TableProps) -> "TableView":
        self.teardown()
        return TableView(props, on_row_click=self.on_row_click, clipboard=self.clipboard)

    # ------------------------------
    # Render tree for the delegated renderer
    # ------------------------------
    def render(self) -> dict:
        presentation = self.presentation
        tree = {
            "id": self.props.id,
            "class_name": self.props.class_name,
            "kind": presentation.kind.value,
        }
        if presentation.is_placeholder:
            tree["placeholder"] = {"has_error": presentation.has_error, "message": presentation.message}
            return tree

        rendered_rows = []
        for index, row in enumerate(self.rows):
            cells = []
            for col in presentation.model.columns:
                widget = self.widgets.get((index, col.key))
                cells.append({
                    "key": col.key,
                    "value": row[col.key],
                    "copy": widget.snapshot() if widget is not None else None,
                })
            rendered_rows.append({
                "row_id": row_id(index),
                "hoverable": self.controller.hoverable,
                "style": self.controller.row_style(),
                "cells": cells,
            })

        tree["table"] = {
            "caption": self.props.title,
            "variant": "compact",
            "borders": True,
            "columns": [col.model_dump() for col in presentation.model.columns],
            "rows": rendered_rows,
        }
        return tree
