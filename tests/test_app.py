import pytest

from color_scale.app import create_app


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_palette_default(client):
    res = client.get("/api/palette")
    assert res.status_code == 200
    data = res.get_json()
    assert data["base"] == "#6366f1"
    assert data["label"] == "#6366F1"
    assert data["name"] == "Indigo"
    assert [s["step"] for s in data["steps"]] == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]
    assert data["steps"][5]["hex"] == "#6366f1"
    assert data["steps"][5]["css"].startswith("oklch(0.585 0.204 ")


def test_palette_black_has_null_hue(client):
    data = client.get("/api/palette?color=000").get_json()
    assert all(s["oklch"][2] is None for s in data["steps"])


def test_palette_invalid(client):
    res = client.get("/api/palette?color=not-a-color")
    assert res.status_code == 400
    assert "invalid color" in res.get_json()["error"]


def test_export_theme(client):
    res = client.get("/api/export?color=6366f1")
    assert res.status_code == 200
    assert res.mimetype == "text/plain"
    text = res.get_data(as_text=True)
    assert text.startswith("@theme {\n")
    assert text.count("--color-indigo-") == 10


def test_export_with_secondary_default(client):
    text = client.get("/api/export?secondary=").get_data(as_text=True)
    assert text.count("--color-indigo-") == 10
    assert text.count("--color-amber-") == 10


def test_export_unwrapped(client):
    text = client.get("/api/export?color=000000&wrap=0").get_data(as_text=True)
    assert not text.startswith("@theme")
    assert len(text.splitlines()) == 10


def test_export_invalid(client):
    res = client.get("/api/export?color=6366f1&secondary=zzz")
    assert res.status_code == 400


def test_random(client):
    color = client.get("/api/random").get_json()["color"]
    assert len(color) == 7 and color.startswith("#")


def test_default_color_from_config():
    app = create_app({"TESTING": True, "DEFAULT_COLOR": "#f59e0b"})
    data = app.test_client().get("/api/palette").get_json()
    assert data["name"] == "Amber"
