from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from typing import Dict, List, Optional, Union

import pandas as pd

# Strict scalars keep `true` a bool and `1995` an int instead of letting
# pydantic coerce them into each other.
Scalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
CellValue = Optional[Union[Scalar, List[Union[StrictInt, StrictFloat, StrictStr]]]]

# column key -> normalized display string
RowRecord = Dict[str, str]


class FieldDescriptor(BaseModel):
    name: str
    data_path: str = ""  # provenance only
    data: List[CellValue] = Field(default_factory=list)


class Column(BaseModel):
    key: str
    label: str


class TableModel(BaseModel):
    columns: List[Column] = Field(default_factory=list)
    rows: List[RowRecord] = Field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Normalized rows as a string-valued DataFrame, one column per Column."""
        keys = [col.key for col in self.columns]
        return pd.DataFrame(
            [[row.get(k, "") for k in keys] for row in self.rows],
            columns=keys,
            dtype=str,
        )


class TableProps(BaseModel):
    title: str = ""
    id: str = ""
    fields: List[FieldDescriptor] = Field(default_factory=list)
    class_name: Optional[str] = None  # opaque styling token
