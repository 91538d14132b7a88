"""Pytest configuration to make the project root importable.

This ensures ``import tableview`` works when tests are run from the
repository root without an editable install.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tableview.schemas import FieldDescriptor, TableProps  # noqa: E402


@pytest.fixture
def movie_props() -> TableProps:
    return TableProps(
        title="Details of Toy Story",
        id="call_5glz9rb6",
        fields=[
            FieldDescriptor(name="Title", data_path="movie.title", data=["Toy Story"]),
            FieldDescriptor(name="Year", data_path="movie.year", data=[1995]),
            FieldDescriptor(name="Runtime", data_path="movie.runtime", data=[81]),
            FieldDescriptor(name="IMDB Rating", data_path="movie.imdbRating", data=[8.3]),
            FieldDescriptor(name="Revenue", data_path="movie.revenue", data=[373554033]),
            FieldDescriptor(name="Countries", data_path="movie.countries[size:1]", data=[["USA"]]),
        ],
    )
