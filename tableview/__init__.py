from tableview.classifier import COPYABLE_KEYWORDS, is_copyable_column
from tableview.clipboard import ClipboardExportWidget, WidgetState
from tableview.interaction import PointerEvent, RowInteractionController
from tableview.presentation import Presentation, PresentationKind, resolve_presentation
from tableview.schemas import Column, FieldDescriptor, TableModel, TableProps
from tableview.transform import fields_to_table, to_display_string
from tableview.view import TableView

__all__ = [
    "COPYABLE_KEYWORDS",
    "ClipboardExportWidget",
    "Column",
    "FieldDescriptor",
    "PointerEvent",
    "Presentation",
    "PresentationKind",
    "RowInteractionController",
    "TableModel",
    "TableProps",
    "TableView",
    "WidgetState",
    "fields_to_table",
    "is_copyable_column",
    "resolve_presentation",
    "to_display_string",
]
