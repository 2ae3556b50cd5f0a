"""
Tests utilitaires couleur — parsing, teintes, dégradés, détection des fonds sombres.
"""
import pytest

from block_canvas.core.design_system import (
    create_gradient,
    hex_to_rgb,
    is_dark_color,
    light_tint,
    parse_color,
    shift_hue,
)


# ── Parsing ─────────────────────────────────────────────────────────────────

def test_hex_short_and_long():
    assert hex_to_rgb("#abc") == (170, 187, 204)
    assert hex_to_rgb("8b5cf6") == (139, 92, 246)
    assert hex_to_rgb("#zzz") is None


def test_parse_rgb_functions():
    assert parse_color("rgba(1, 2, 3, 0.5)") == (1, 2, 3)
    assert parse_color("rgb(10,20,30)") == (10, 20, 30)
    assert parse_color("transparent") is None


# ── Dérivés ─────────────────────────────────────────────────────────────────

def test_light_tint():
    assert light_tint("#ff0000", 0.15) == "rgba(255, 0, 0, 0.15)"
    assert light_tint("pas une couleur", 0.1) == "rgba(124, 58, 237, 0.1)"


def test_shift_hue():
    assert shift_hue("#ff0000", 120) == "#00ff00"
    assert shift_hue("illisible", 30) == "illisible"


def test_create_gradient():
    assert create_gradient("#111111", "#222222", "135deg") == "linear-gradient(135deg, #111111, #222222)"
    assert create_gradient("#ff0000").startswith("linear-gradient(to right, #ff0000, #")


@pytest.mark.parametrize("color,dark", [
    ("#101010", True),
    ("#ffffff", False),
    ("rgb(0, 0, 60)", True),
    ("navy", True),
    (None, False),
])
def test_is_dark_color(color, dark):
    assert is_dark_color(color) is dark
