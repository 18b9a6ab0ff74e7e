import pytest

from palette_studio.app import create_app


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "GENERATION_DELAY": 0, "PALETTE_COUNT": 6})
    return app.test_client()


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Palette Studio" in resp.data


def test_variants(client):
    data = client.get("/variants?color=3b82f6&tints=3&shades=2").get_json()
    assert data["base"] == "#3b82f6"
    assert data["tints"][0] == "hsl(217, 91%, 68.75%)"
    assert len(data["shades"]) == 2
    assert data["formats"]["hsl"] == "hsl(217, 91%, 60%)"


def test_variants_are_clamped(client):
    data = client.get("/variants?color=%23000&tints=500&shades=-3").get_json()
    assert len(data["tints"]) == 20
    assert data["shades"] == []


def test_variants_bad_input(client):
    assert client.get("/variants?color=blue").status_code == 400
    assert client.get("/variants?tints=many").status_code == 400


def test_convert(client):
    data = client.get("/convert", query_string={"color": "rgb(59, 130, 246)", "format": "hex"}).get_json()
    assert data["value"] == "#3b82f6"
    assert client.get("/convert", query_string={"color": "#fff", "format": "cmyk"}).status_code == 400
    assert client.get("/convert", query_string={"color": "teal", "format": "hex"}).status_code == 400


def test_contrast(client):
    data = client.get("/contrast", query_string={"a": "#ffffff", "b": "#000000"}).get_json()
    assert data == {"ratio": 21.0, "grade": "AAA", "aa": True, "aaa": True, "aa_large": True}
    assert client.get("/contrast", query_string={"a": "x", "b": "#000"}).status_code == 400


def test_palettes_post(client):
    resp = client.post("/palettes", json={"colors": ["#3b82f6", "#f59e0b"]})
    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data) == 6
    assert data[0]["name"] == "Oceanic Harmony"
    assert data[0]["primary"]["hex"] == "#3b82f6"
    assert data[0]["brandColors"] == ["#3b82f6", "#f59e0b"]


def test_palettes_query(client):
    data = client.get("/palettes?colors=3b82f6").get_json()
    assert [p["pattern"] for p in data][:2] == ["complementary", "analogous"]


def test_palettes_bad_input(client):
    assert client.post("/palettes", json={"colors": []}).status_code == 400
    assert client.post("/palettes", json={"colors": ["#fff"] * 4}).status_code == 400
    assert client.get("/palettes?colors=nothex").status_code == 400


def test_export_css_and_json(client):
    css = client.get("/palettes/export?colors=3b82f6&index=0&format=css")
    assert css.status_code == 200
    assert css.mimetype == "text/css"
    assert b"--color-primary: #3b82f6;" in css.data

    js = client.get("/palettes/export?colors=3b82f6&index=1&format=json").get_json()
    assert js["name"] == "Digital Bloom"


def test_export_bad_input(client):
    assert client.get("/palettes/export?colors=3b82f6&format=png").status_code == 400
    assert client.get("/palettes/export?colors=3b82f6&index=99").status_code == 400
