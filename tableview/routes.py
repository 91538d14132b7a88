# tableview/routes.py
import io
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response

from tableview.config import get_settings
from tableview.interaction import row_id
from tableview.renderer import render_presentation_image
from tableview.schemas import RowRecord, TableProps
from tableview.view import TableView

logger = logging.getLogger(__name__)

router = APIRouter()


def _render_pass(props: TableProps) -> TableView:
    view = TableView(props)
    logger.debug("Rendered %s for %r (%d rows)", view.presentation.kind.value, props.id, len(view.rows))
    return view


# ------------------------------
# Render tree
# ------------------------------
@router.post("/table")
def render_table(props: TableProps):
    """
    Normalize the fields and return the render tree for one pass: either a
    placeholder or the table with row ids and per-cell copy widget state.
    """
    view = _render_pass(props)
    try:
        tree = view.render()
        tree["copyable"] = view.copyable_columns
        return tree
    finally:
        view.teardown()


@router.post("/table/rows/{index}/activate")
def activate_row(index: int, props: TableProps):
    """Activate one row and return the record the row handler received."""
    delivered: List[RowRecord] = []
    view = TableView(props, on_row_click=delivered.append)
    try:
        if index < 0 or index >= len(view.rows):
            raise HTTPException(status_code=404, detail=f"Row {index} does not exist")
        view.click_row(index)
        return {"row_id": row_id(index), "row": delivered[0]}
    finally:
        view.teardown()


# ------------------------------
# Exports
# ------------------------------
@router.post("/table/csv")
def export_csv(props: TableProps):
    view = _render_pass(props)
    view.teardown()
    if view.presentation.is_placeholder:
        raise HTTPException(status_code=404, detail=view.presentation.message)

    buf = io.StringIO()
    view.presentation.model.to_dataframe().to_csv(buf, index=False)
    return Response(content=buf.getvalue().encode("utf-8"), media_type="text/csv")


@router.post("/table/image")
def export_image(props: TableProps):
    view = _render_pass(props)
    view.teardown()
    try:
        img = render_presentation_image(view.presentation, title=props.title, max_width=get_settings().image_width)
        buf = io.BytesIO()
        img.save(buf, format="PNG")
    except Exception as e:
        logger.exception("Failed to render table image for %r", props.id)
        raise HTTPException(status_code=500, detail=f"Error rendering image: {e}")
    return Response(content=buf.getvalue(), media_type="image/png")
