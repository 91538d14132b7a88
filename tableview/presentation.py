from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from tableview.schemas import FieldDescriptor, TableModel
from tableview.transform import fields_to_table

NO_CONTENT_MESSAGE = "No content available"
NO_DATA_MESSAGE = "No data available"


class PresentationKind(str, Enum):
    NO_CONTENT = "no_content"
    NO_DATA = "no_data"
    TABLE = "table"


@dataclass(frozen=True)
class Presentation:
    kind: PresentationKind
    model: TableModel = field(default_factory=TableModel)
    message: Optional[str] = None
    has_error: bool = False

    @property
    def is_placeholder(self) -> bool:
        return self.kind is not PresentationKind.TABLE


def resolve_presentation(
    title: str,
    fields: Sequence[FieldDescriptor],
    model: Optional[TableModel] = None,
) -> Presentation:
    """
    Pick what to show for a title/fields pair.

    "Nothing supplied at all" (blank title and no fields) and "supplied but
    zero rows" are reported with different messages. A title with an empty
    fields list falls into the second case.
    """
    if not (title or "").strip() and not fields:
        return Presentation(kind=PresentationKind.NO_CONTENT, message=NO_CONTENT_MESSAGE)

    if model is None:
        model = fields_to_table(fields)
    if not model.rows:
        return Presentation(kind=PresentationKind.NO_DATA, model=model, message=NO_DATA_MESSAGE)

    return Presentation(kind=PresentationKind.TABLE, model=model)
