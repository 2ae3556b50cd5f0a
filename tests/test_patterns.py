"""
Tests générateur de motifs + fond de page.
"""
import base64

import pytest

from block_canvas.core.errors import UnknownPatternError
from block_canvas.core.schemas import PageTheme
from block_canvas.style.patterns import PATTERN_SIZES, background_style, generate, style_attr


def _background(data):
    return PageTheme.model_validate({"background": data}).background


# ── generate ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("pattern", sorted(PATTERN_SIZES))
def test_every_pattern_is_valid_svg(pattern):
    image = generate(pattern, "#000000", 0.1, "medium")
    assert image.svg.startswith("<svg ")
    assert image.svg.endswith("</svg>")
    assert image.tile_size == PATTERN_SIZES[pattern]["medium"]
    decoded = base64.b64decode(image.data_uri.split(",", 1)[1]).decode("utf-8")
    assert decoded == image.svg


def test_dots_geometry():
    image = generate("dots", "#000000", 0.1, "medium")
    assert '<circle cx="12.5" cy="12.5" r="5" fill="#000000" opacity="0.1"/>' in image.svg


@pytest.mark.parametrize("pattern", sorted(PATTERN_SIZES))
def test_color_only_changes_color_fields(pattern):
    dark = generate(pattern, "#111111", 0.2, "small")
    light = generate(pattern, "#eeeeee", 0.2, "small")
    assert dark.tile_size == light.tile_size
    assert dark.svg != light.svg
    assert dark.svg.replace("#111111", "#eeeeee") == light.svg


def test_color_is_escaped():
    svg = generate("dots", 'red" onload="alert(1)', 0.1).svg
    assert 'fill="red&quot; onload=&quot;alert(1)"' in svg
    assert ' onload="' not in svg


def test_deterministic():
    first = generate("waves", "#336699", 0.3, "large").svg
    generate.cache_clear()
    assert generate("waves", "#336699", 0.3, "large").svg == first


def test_unknown_size_falls_back_to_medium():
    assert generate("grid", "#000000", 0.1, "huge").tile_size == 40


def test_opacity_is_clamped():
    assert 'opacity="1"' in generate("grid", "#000000", 5, "small").svg
    assert 'opacity="0"' in generate("grid", "#000000", -1, "small").svg


def test_unknown_pattern_raises():
    with pytest.raises(UnknownPatternError):
        generate("zigzag", "#000000", 0.1)


def test_css_url():
    image = generate("grid", "#000000", 0.1)
    assert image.css == f'url("{image.data_uri}")'


# ── background_style ────────────────────────────────────────────────────────

class TestBackgroundStyle:
    def test_absent_is_white(self):
        assert background_style(None) == {"background-color": "#ffffff"}

    def test_solid(self):
        assert background_style(_background({"type": "solid", "color": "#000"})) == {"background-color": "#000"}

    def test_gradient_with_via(self):
        bg = _background({"type": "gradient", "gradientFrom": "#111", "gradientVia": "#222",
                          "gradientTo": "#333", "gradientDirection": "to-br"})
        assert background_style(bg) == {
            "background-image": "linear-gradient(to bottom right, #111, #222, #333)",
        }

    def test_pattern(self):
        bg = _background({"type": "pattern", "baseColor": "#fafafa", "pattern": "dots"})
        style = background_style(bg)
        assert style["background-color"] == "#fafafa"
        assert style["background-image"].startswith('url("data:image/svg+xml;base64,')
        assert style["background-repeat"] == "repeat"

    def test_unknown_pattern_keeps_base_color(self):
        bg = _background({"type": "pattern", "baseColor": "#fafafa", "pattern": "zigzag"})
        assert background_style(bg) == {"background-color": "#fafafa"}

    def test_image(self):
        bg = _background({"type": "image", "imageUrl": "https://cdn.example.com/bg.jpg"})
        style = background_style(bg)
        assert style["background-image"] == 'url("https://cdn.example.com/bg.jpg")'
        assert style["background-size"] == "cover"

    def test_image_without_url(self):
        assert background_style(_background({"type": "image"})) == {"background-color": "#ffffff"}

    def test_video_fallback_color(self):
        assert background_style(_background({"type": "video", "videoUrl": "x.mp4"})) == {"background-color": "#000000"}


def test_style_attr():
    assert style_attr({"a": "1", "b": "2"}) == "a:1;b:2"
    assert style_attr({}) == ""
