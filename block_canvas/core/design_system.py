"""
Utilitaires couleur du Block Canvas.
Parse les couleurs, dérive teintes translucides et dégradés.
"""
import colorsys
import re
from typing import Optional

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)")


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """Convertit #RGB / #RRGGBB en (R, G, B) ; None si invalide."""
    if not hex_color:
        return None
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        return None
    h = m.group(1)
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))


def parse_color(color: str) -> Optional[tuple[int, int, int]]:
    """Accepte hex ou rgb()/rgba()."""
    rgb = hex_to_rgb(color)
    if rgb:
        return rgb
    m = _RGB_RE.match((color or "").strip())
    if m:
        return int(m.group(1)), int(m.group(2)), int(m.group(3))
    return None


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def shift_hue(hex_color: str, degrees: float) -> str:
    """Décale la teinte (roue chromatique) en conservant luminosité/saturation."""
    rgb = hex_to_rgb(hex_color)
    if not rgb:
        return hex_color
    h, l, s = colorsys.rgb_to_hls(*(c / 255.0 for c in rgb))
    h = (h + degrees / 360.0) % 1.0
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return rgb_to_hex(round(r * 255), round(g * 255), round(b * 255))


def light_tint(color: str, opacity: float = 0.1) -> str:
    """rgba() translucide de la couleur ; violet par défaut si illisible."""
    rgb = parse_color(color)
    if not rgb:
        return f"rgba(124, 58, 237, {opacity})"
    return f"rgba({rgb[0]}, {rgb[1]}, {rgb[2]}, {opacity})"


def create_gradient(color1: str, color2: Optional[str] = None, direction: str = "to right") -> str:
    c2 = color2 or shift_hue(color1, 20)
    return f"linear-gradient({direction}, {color1}, {c2})"


def is_dark_color(color: Optional[str]) -> bool:
    """Luminosité moyenne < 128 pour hex/rgb ; mots-clés sombres reconnus."""
    if not color:
        return False
    rgb = parse_color(color)
    if rgb:
        return sum(rgb) / 3 < 128
    lowered = color.lower()
    return any(word in lowered for word in ("black", "navy", "dark"))
