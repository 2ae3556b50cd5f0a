"""
Tests registry des renderers — eager / lazy, placeholders, états de chargement.
"""
import pytest

from block_canvas.blocks.registry import LAZY_RENDERERS, LoadState, RendererRegistry, RendererSlot, default_registry
from block_canvas.core.errors import RendererLoadError
from block_canvas.core.schemas import Block, KNOWN_BLOCK_TYPES, PageTheme
from block_canvas.style.resolver import resolve


def _render(registry, block, **kw):
    theme = PageTheme()
    return registry.render(block, resolve(block, theme), theme, **kw)


def _echo(block, style, theme):
    return f"<p>{block.type}</p>"


# ── Slots ───────────────────────────────────────────────────────────────────

def test_slot_requires_fn_or_target():
    with pytest.raises(ValueError):
        RendererSlot("x")


def test_eager_slot_is_ready():
    slot = RendererSlot("x", fn=_echo)
    assert slot.state is LoadState.READY
    assert not slot.lazy


def test_lazy_slot_loads_once():
    slot = RendererSlot("text", target="block_canvas.blocks.text:render_text")
    assert slot.state is LoadState.PENDING
    fn = slot.load()
    assert callable(fn)
    assert slot.state is LoadState.READY
    assert slot.load() is fn


@pytest.mark.parametrize("target", [
    "block_canvas.blocks.does_not_exist:render",
    "block_canvas.blocks.text:does_not_exist",
])
def test_lazy_slot_failure(target):
    slot = RendererSlot("broken", target=target)
    assert slot.load() is None
    assert slot.state is LoadState.ERROR
    assert isinstance(slot.error, RendererLoadError)
    # pas de nouvelle tentative
    assert slot.load() is None


def test_module_raising_on_import(tmp_path, monkeypatch):
    (tmp_path / "canvas_broken_renderer.py").write_text(
        "raise RuntimeError('import impossible')\n\ndef render(block, style, theme):\n    return ''\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    registry = RendererRegistry()
    registry.register_lazy("gallery", "canvas_broken_renderer:render")
    html = _render(registry, Block(id="1", type="gallery"))
    assert "bc-placeholder--unknown" in html
    assert registry.state("gallery") is LoadState.ERROR
    slot = registry.slot("gallery")
    assert isinstance(slot.error, RendererLoadError)
    assert isinstance(slot.error.cause, RuntimeError)
    assert "bc-placeholder--unknown" in _render(registry, Block(id="2", type="gallery"))


# ── Rendu ───────────────────────────────────────────────────────────────────

class TestRender:
    def test_unknown_type_placeholder(self):
        html = _render(RendererRegistry(), Block(id="1", type="hologram"))
        assert "bc-placeholder--unknown" in html
        assert "hologram" in html

    def test_eager(self):
        registry = RendererRegistry()
        registry.register("spacer", _echo)
        assert _render(registry, Block(id="1", type="spacer")) == "<p>spacer</p>"

    def test_pending_without_load_gives_loading_placeholder(self):
        registry = RendererRegistry()
        registry.register_lazy("text", "block_canvas.blocks.text:render_text", min_height=90)
        html = _render(registry, Block(id="1", type="text"), load=False)
        assert "bc-placeholder--loading" in html
        assert "min-height:90px" in html
        assert registry.state("text") is LoadState.PENDING

    def test_load_on_demand(self):
        registry = RendererRegistry()
        registry.register_lazy("text", "block_canvas.blocks.text:render_text")
        html = _render(registry, Block(id="1", type="text", content={"html": "<p>Bonjour</p>"}))
        assert "Bonjour" in html
        assert registry.state("text") is LoadState.READY

    def test_failed_load_degrades_to_unknown(self):
        registry = RendererRegistry()
        registry.register_lazy("map", "block_canvas.blocks.nowhere:render_map")
        html = _render(registry, Block(id="1", type="map"))
        assert "bc-placeholder--unknown" in html
        assert registry.state("map") is LoadState.ERROR

    def test_renderer_exception_propagates(self):
        def boom(block, style, theme):
            raise RuntimeError("boom")

        registry = RendererRegistry()
        registry.register("text", boom)
        with pytest.raises(RuntimeError):
            _render(registry, Block(id="1", type="text"))

    def test_view_is_passed_through(self):
        seen = []

        def with_view(block, style, theme, view):
            seen.append(view)
            return ""

        registry = RendererRegistry()
        registry.register("gallery", with_view)
        theme = PageTheme()
        block = Block(id="1", type="gallery")
        registry.render(block, resolve(block, theme), theme, view="VIEW")
        assert seen == ["VIEW"]


# ── Table par défaut ────────────────────────────────────────────────────────

def test_default_registry_covers_every_known_type():
    registry = default_registry()
    assert set(registry.types()) == set(KNOWN_BLOCK_TYPES)


def test_default_registry_lazy_split():
    registry = default_registry()
    for block_type in LAZY_RENDERERS:
        assert registry.is_lazy(block_type)
        assert registry.state(block_type) is LoadState.PENDING
    assert not registry.is_lazy("heading")


def test_default_registry_all_lazy_targets_load():
    registry = default_registry()
    states = registry.load_all()
    assert set(states.values()) == {LoadState.READY}


def test_load_all_subset_ignores_unknown():
    registry = default_registry()
    states = registry.load_all(["map", "hologram"])
    assert states == {"map": LoadState.READY}
    assert registry.state("video") is LoadState.PENDING
