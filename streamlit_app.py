# streamlit_app.py
import streamlit as st
import requests
import json
import pandas as pd
import plotly.graph_objects as go
from typing import Optional, Dict, Any

from tableview.config import get_settings
from tableview.interaction import RowInteractionController, dispatch_selection

API_BASE = get_settings().api_base

EXAMPLE_PAYLOAD = {
    "title": "Details of Toy Story",
    "id": "call_5glz9rb6",
    "fields": [
        {"name": "Title", "data_path": "movie.title", "data": ["Toy Story"]},
        {"name": "Year", "data_path": "movie.year", "data": [1995]},
        {"name": "IMDB Rating", "data_path": "movie.imdbRating", "data": [8.3]},
        {"name": "Countries", "data_path": "movie.countries", "data": [["USA"]]},
    ],
}

st.set_page_config(page_title="Table View", layout="wide")
st.title("Fields → Table")
st.write("Paste a table payload (title, id, fields), then inspect the normalized rows.")

# -------------------------
# Helpers
# -------------------------
def try_parse_json(raw: str) -> Optional[Dict[str, Any]]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None

def tree_to_df(tree: Dict[str, Any]) -> pd.DataFrame:
    """Render tree rows -> DataFrame of display strings."""
    table = tree["table"]
    keys = [col["key"] for col in table["columns"]]
    rows = [[cell["value"] for cell in row["cells"]] for row in table["rows"]]
    return pd.DataFrame(rows, columns=keys, dtype=str)

def plotly_table_from_df(df: pd.DataFrame, caption: str) -> go.Figure:
    fig = go.Figure(data=[go.Table(
        header=dict(values=list(df.columns), fill_color="#0f62fe", font=dict(color="white", size=12)),
        cells=dict(values=[df[col] for col in df.columns],
                   fill_color=[["#f8fbff" if i % 2 == 0 else "white" for i in range(df.shape[0])] for _ in df.columns],
                   align="left"))
    ])
    fig.update_layout(title=caption, margin=dict(l=5, r=5, t=40, b=5), height=400)
    return fig

def post(path: str, payload: Dict[str, Any]) -> requests.Response:
    return requests.post(f"{API_BASE}{path}", json=payload, timeout=60)

def on_row_click(row: Dict[str, str]) -> None:
    st.session_state["activated_row"] = row

# -------------------------
# UI: input & call
# -------------------------
raw = st.text_area("Table payload (JSON)", value=json.dumps(EXAMPLE_PAYLOAD, indent=2), height=260)
payload = try_parse_json(raw)
if payload is None:
    st.warning("Payload is not valid JSON.")
    st.stop()

try:
    resp = post("/table", payload)
except requests.RequestException as e:
    st.error("Failed to call API")
    st.exception(e)
    st.stop()

if resp.status_code != 200:
    st.error(f"Backend returned error: {resp.status_code}")
    st.code(resp.text)
    st.stop()

tree = resp.json()

if "placeholder" in tree:
    st.info(tree["placeholder"]["message"])
    st.stop()

df = tree_to_df(tree)
caption = tree["table"]["caption"]
st.plotly_chart(plotly_table_from_df(df, caption), use_container_width=True)

# Row activation: selecting a row dispatches its record to the handler.
st.subheader("Rows")
event = st.dataframe(df, on_select="rerun", selection_mode="single-row", hide_index=True)
controller = RowInteractionController(df.to_dict(orient="records"), on_row_click)
selected = event.selection.rows if event is not None else []
dispatch_selection(controller, st.session_state, selected)

row = st.session_state.get("activated_row")
if row:
    st.write("### Activated row")
    st.json(row)
    # st.code renders a copy-to-clipboard button for each copyable value.
    for key in tree["copyable"]:
        if row.get(key):
            st.caption(key)
            st.code(row[key], language=None)

st.download_button("Download CSV", data=df.to_csv(index=False).encode("utf-8"),
                   file_name="table.csv", mime="text/csv")

img_resp = post("/table/image", payload)
if img_resp.status_code == 200:
    st.download_button("Download image (PNG)", data=img_resp.content, file_name="table.png", mime="image/png")
