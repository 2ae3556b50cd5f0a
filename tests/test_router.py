"""
Tests router FastAPI — /canvas/render, /validate, /catalog, /blocks/{id}/render.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from block_canvas.core.schemas import KNOWN_BLOCK_TYPES
from block_canvas.renderer import Renderer
from block_canvas.router import get_renderer, router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    with TestClient(app) as c:
        yield c


PAGE = {
    "blocks": [
        {"id": "h1", "type": "heading", "content": {"text": "Bonjour"}},
        {"id": "l1", "type": "linkButton", "content": {"label": "Spotify", "url": "https://open.spotify.com/x"}, "styles": {}},
    ],
    "theme": {"branding": {"siteName": "Atelier"}},
}


# ── POST /canvas/render ─────────────────────────────────────────────────────

class TestRender:
    def test_returns_html(self, client):
        r = client.post("/canvas/render", json=PAGE)
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "<title>Atelier</title>" in r.text
        assert "Bonjour" in r.text
        assert "bc-icon--spotify" in r.text

    def test_duplicate_ids_rejected(self, client):
        page = {"blocks": [{"id": "x", "type": "text"}, {"id": "x", "type": "text"}]}
        assert client.post("/canvas/render", json=page).status_code == 422

    def test_unknown_type_still_renders(self, client):
        r = client.post("/canvas/render", json={"blocks": [{"id": "z", "type": "hologram"}]})
        assert r.status_code == 200
        assert "Type de bloc inconnu : hologram" in r.text


# ── POST /canvas/validate ───────────────────────────────────────────────────

class TestValidate:
    def test_valid(self, client):
        assert client.post("/canvas/validate", json=PAGE).json() == {"valid": True}

    def test_duplicates(self, client):
        body = client.post("/canvas/validate", json={"blocks": [{"id": "x", "type": "text"}, {"id": "x", "type": "text"}]}).json()
        assert body["valid"] is False
        assert "dupliqué" in body["error"]

    def test_unknown_type_warning(self, client):
        body = client.post("/canvas/validate", json={"blocks": [{"id": "z", "type": "hologram"}]}).json()
        assert body == {"valid": True, "warnings": ["Type de bloc inconnu : hologram"]}

    def test_bad_background(self, client):
        body = client.post("/canvas/validate", json={"theme": {"background": {"type": "plasma"}}}).json()
        assert body["valid"] is False


# ── GET /canvas/catalog ─────────────────────────────────────────────────────

def test_catalog(client):
    blocks = client.get("/canvas/catalog").json()["blocks"]
    by_type = {b["type"]: b for b in blocks}
    assert set(by_type) == set(KNOWN_BLOCK_TYPES)
    assert by_type["heading"]["default_content"] == {"text": "Heading", "level": 1}
    assert by_type["gallery"]["lazy"] is True
    assert by_type["heading"]["lazy"] is False


# ── POST /canvas/blocks/{id}/render ─────────────────────────────────────────

def test_render_single_block(client):
    r = client.post("/canvas/blocks/h1/render", json=PAGE)
    assert r.status_code == 200
    assert 'data-block-id="h1"' in r.text
    assert "Spotify" not in r.text


def test_render_single_block_not_found(client):
    r = client.post("/canvas/blocks/nope/render", json=PAGE)
    assert r.status_code == 404


# ── Renderer injecté ────────────────────────────────────────────────────────

class _PlainRenderer:
    def render_page(self, page):
        return "<pre>" + ",".join(b.id for b in page.blocks) + "</pre>"

    def render_block(self, block, theme=None):
        return f"<pre>{block.id}</pre>"


def test_renderer_can_be_overridden():
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_renderer] = _PlainRenderer
    assert isinstance(_PlainRenderer(), Renderer)
    with TestClient(app) as c:
        assert c.post("/canvas/render", json=PAGE).text == "<pre>h1,l1</pre>"
        assert c.post("/canvas/blocks/l1/render", json=PAGE).text == "<pre>l1</pre>"
