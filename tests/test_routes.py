import pytest
from fastapi.testclient import TestClient

from tableview.main import app

MOVIE = {
    "title": "Details of Toy Story",
    "id": "call_5glz9rb6",
    "fields": [
        {"name": "Title", "data_path": "movie.title", "data": ["Toy Story"]},
        {"name": "Year", "data_path": "movie.year", "data": [1995]},
        {"name": "Countries", "data_path": "movie.countries", "data": [["USA", "Canada"]]},
    ],
}


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_render_table(client: TestClient):
    response = client.post("/api/table", json=MOVIE)
    assert response.status_code == 200
    tree = response.json()
    assert tree["kind"] == "table"
    assert tree["copyable"] == []
    cells = tree["table"]["rows"][0]["cells"]
    assert [c["value"] for c in cells] == ["Toy Story", "1995", "USA, Canada"]


def test_render_placeholders(client: TestClient):
    response = client.post("/api/table", json={"title": "", "id": "x", "fields": []})
    assert response.json()["placeholder"]["message"] == "No content available"

    response = client.post("/api/table", json={"title": "T", "id": "x", "fields": [{"name": "A", "data": []}]})
    assert response.json()["placeholder"]["message"] == "No data available"


def test_invalid_payload(client: TestClient):
    response = client.post("/api/table", json={"fields": [{"data": [1]}]})
    assert response.status_code == 422


def test_activate_row(client: TestClient):
    payload = {"title": "Items", "id": "x", "fields": [{"name": "Item", "data": ["A", "B", "C"]}]}
    response = client.post("/api/table/rows/1/activate", json=payload)
    assert response.status_code == 200
    assert response.json() == {"row_id": "row-1", "row": {"Item": "B"}}

    response = client.post("/api/table/rows/5/activate", json=payload)
    assert response.status_code == 404


def test_export_csv(client: TestClient):
    response = client.post("/api/table/csv", json=MOVIE)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0] == "Title,Year,Countries"
    assert lines[1] == 'Toy Story,1995,"USA, Canada"'


def test_export_csv_without_rows(client: TestClient):
    response = client.post("/api/table/csv", json={"title": "T", "id": "x", "fields": []})
    assert response.status_code == 404
    assert response.json()["detail"] == "No data available"


def test_export_image(client: TestClient):
    response = client.post("/api/table/image", json=MOVIE)
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content[:8] == b"\x89PNG\r\n\x1a\n"
