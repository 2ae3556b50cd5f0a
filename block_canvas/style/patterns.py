"""
Générateur de motifs de fond — SVG tuilables déterministes.

    generate("dots", "#000000", 0.1, "medium")  →  ImageDescriptor(data_uri=..., css=...)

Fonction pure, mémoïsée sur ses quatre arguments : mêmes entrées ⇒ sortie
identique octet pour octet (appelée à chaque rendu d'un fond à motif).
"""
import base64
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Optional

from ..blocks.base import esc
from ..core.design_system import is_dark_color
from ..core.errors import UnknownPatternError
from ..core.schemas import (
    GradientBackground,
    ImageBackground,
    PatternBackground,
    SolidBackground,
    VideoBackground,
)

log = logging.getLogger(__name__)

# Taille de tuile (px) par type de motif et par taille
PATTERN_SIZES: Dict[str, Dict[str, int]] = {
    "grid":     {"small": 20,  "medium": 40,  "large": 60},
    "dots":     {"small": 15,  "medium": 25,  "large": 40},
    "diagonal": {"small": 20,  "medium": 40,  "large": 60},
    "waves":    {"small": 40,  "medium": 80,  "large": 120},
    "morph":    {"small": 100, "medium": 200, "large": 300},
    "organic":  {"small": 80,  "medium": 150, "large": 250},
}

PATTERN_TYPES = tuple(PATTERN_SIZES)
DEFAULT_SIZE = "medium"


@dataclass(frozen=True)
class ImageDescriptor:
    """Image de fond tuilable prête à poser en CSS."""
    pattern: str
    tile_size: int
    svg: str
    data_uri: str

    @property
    def css(self) -> str:
        return f'url("{self.data_uri}")'


def _n(value: float) -> str:
    """Nombre compact et stable : 20 → "20", 12.5 → "12.5", 0.0333.. → "0.03"."""
    value = round(float(value), 2)
    if value == int(value):
        return str(int(value))
    return f"{value:g}"


def _wrap(pattern_id: str, size: int, body: str) -> str:
    return (
        f'<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">'
        f'<defs><pattern id="{pattern_id}" width="{size}" height="{size}" patternUnits="userSpaceOnUse">'
        f"{body}"
        f"</pattern></defs>"
        f'<rect width="{size}" height="{size}" fill="url(#{pattern_id})"/>'
        f"</svg>"
    )


# ── Dessins par type ────────────────────────────────────────────────────────

def _grid(color: str, opacity: float, s: int) -> str:
    return (
        f'<path d="M {s} 0 L 0 0 0 {s}" fill="none" stroke="{color}" '
        f'stroke-width="1" opacity="{_n(opacity)}"/>'
    )


def _dots(color: str, opacity: float, s: int) -> str:
    return f'<circle cx="{_n(s / 2)}" cy="{_n(s / 2)}" r="{_n(s / 5)}" fill="{color}" opacity="{_n(opacity)}"/>'


def _diagonal(color: str, opacity: float, s: int) -> str:
    o = _n(opacity)
    segments = [
        (0, s, s, 0),
        (-s / 2, s / 2, s / 2, -s / 2),
        (s / 2, s * 1.5, s * 1.5, s / 2),
    ]
    return "".join(
        f'<path d="M {_n(x1)} {_n(y1)} L {_n(x2)} {_n(y2)}" stroke="{color}" stroke-width="2" opacity="{o}"/>'
        for x1, y1, x2, y2 in segments
    )


def _waves(color: str, opacity: float, s: int) -> str:
    amp, freq, mid = s / 4, s / 2, s / 2
    first = f"M 0 {_n(mid)} Q {_n(freq / 2)} {_n(mid - amp)} {_n(freq)} {_n(mid)} T {s} {_n(mid)}"
    second = (
        f"M 0 {_n(mid + amp)} Q {_n(freq / 2)} {_n(mid)} {_n(freq)} {_n(mid + amp)} "
        f"T {s} {_n(mid + amp)}"
    )
    return (
        f'<path d="{first}" stroke="{color}" stroke-width="2" fill="none" opacity="{_n(opacity)}"/>'
        f'<path d="{second}" stroke="{color}" stroke-width="2" fill="none" opacity="{_n(opacity * 0.5)}"/>'
    )


def _morph(color: str, opacity: float, s: int) -> str:
    pts = [
        (0.5, 0.2),
        (0.7, 0.25), (0.75, 0.45),
        (0.8, 0.65), (0.6, 0.75),
        (0.4, 0.85), (0.25, 0.7),
        (0.1, 0.55), (0.2, 0.35),
        (0.3, 0.15), (0.5, 0.2),
    ]
    p = [(_n(s * x), _n(s * y)) for x, y in pts]
    d = f"M {p[0][0]} {p[0][1]} " + " ".join(
        f"Q {p[i][0]} {p[i][1]} {p[i + 1][0]} {p[i + 1][1]}" for i in range(1, len(p), 2)
    ) + " Z"
    return f'<path d="{d}" fill="{color}" opacity="{_n(opacity)}"/>'


def _organic(color: str, opacity: float, s: int) -> str:
    def ellipse(cx, cy, rx, ry, op, rot):
        return (
            f'<ellipse cx="{_n(s * cx)}" cy="{_n(s * cy)}" rx="{_n(s * rx)}" ry="{_n(s * ry)}" '
            f'fill="{color}" opacity="{_n(op)}" transform="rotate({rot} {_n(s * cx)} {_n(s * cy)})"/>'
        )
    return (
        ellipse(0.3, 0.3, 0.15, 0.2, opacity, 45)
        + ellipse(0.7, 0.7, 0.18, 0.12, opacity * 0.7, -30)
        + f'<circle cx="{_n(s * 0.2)}" cy="{_n(s * 0.8)}" r="{_n(s * 0.08)}" fill="{color}" opacity="{_n(opacity * 0.5)}"/>'
        + ellipse(0.8, 0.2, 0.1, 0.15, opacity * 0.6, 60)
    )


_DRAWERS: Dict[str, Callable[[str, float, int], str]] = {
    "grid": _grid,
    "dots": _dots,
    "diagonal": _diagonal,
    "waves": _waves,
    "morph": _morph,
    "organic": _organic,
}


# ── Point d'entrée public ───────────────────────────────────────────────────

@lru_cache(maxsize=256)
def generate(pattern: str, color: str, opacity: float, size: str = DEFAULT_SIZE) -> ImageDescriptor:
    """
    Génère le motif `pattern` pour (couleur, opacité 0-1, taille small|medium|large).
    Taille inconnue → medium. Opacité bornée à [0, 1].
    """
    drawer = _DRAWERS.get(pattern)
    if drawer is None:
        raise UnknownPatternError(f"Motif inconnu : {pattern!r}. Supportés : {list(PATTERN_TYPES)}")
    sizes = PATTERN_SIZES[pattern]
    tile = sizes.get(size, sizes[DEFAULT_SIZE])
    opacity = min(1.0, max(0.0, float(opacity)))

    svg = _wrap(pattern, tile, drawer(esc(color), opacity, tile))
    data_uri = "data:image/svg+xml;base64," + base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return ImageDescriptor(pattern=pattern, tile_size=tile, svg=svg, data_uri=data_uri)


# ── Fond de page ────────────────────────────────────────────────────────────

GRADIENT_DIRECTIONS: Dict[str, str] = {
    "to-top": "to top",
    "to-bottom": "to bottom",
    "to-left": "to left",
    "to-right": "to right",
    "to-top-right": "to top right",
    "to-top-left": "to top left",
    "to-bottom-right": "to bottom right",
    "to-bottom-left": "to bottom left",
    "to-t": "to top",
    "to-b": "to bottom",
    "to-l": "to left",
    "to-r": "to right",
    "to-tr": "to top right",
    "to-tl": "to top left",
    "to-br": "to bottom right",
    "to-bl": "to bottom left",
}


def background_style(background) -> Dict[str, str]:
    """Fond du thème → propriétés CSS (kebab-case). Absent → blanc."""
    if background is None:
        return {"background-color": "#ffffff"}

    if isinstance(background, SolidBackground):
        return {"background-color": background.color or "#ffffff"}

    if isinstance(background, GradientBackground):
        start = background.gradient_from or "#9333ea"
        end = background.gradient_to or "#3b82f6"
        direction = GRADIENT_DIRECTIONS.get(background.gradient_direction or "to-bottom", "to bottom")
        stops = f"{start}, {background.gradient_via}, {end}" if background.gradient_via else f"{start}, {end}"
        return {"background-image": f"linear-gradient({direction}, {stops})"}

    if isinstance(background, PatternBackground):
        style = {"background-color": background.color or "#f3f4f6"}
        if background.pattern:
            opacity = background.pattern_opacity if background.pattern_opacity is not None else 0.1
            try:
                image = generate(
                    background.pattern,
                    background.pattern_color or "#000000",
                    opacity,
                    background.pattern_size or DEFAULT_SIZE,
                )
            except UnknownPatternError:
                log.warning("Motif de fond ignoré : %r", background.pattern)
                return style
            style["background-image"] = image.css
            style["background-repeat"] = "repeat"
        return style

    if isinstance(background, ImageBackground):
        if not background.image_url:
            return {"background-color": background.color or "#ffffff"}
        return {
            "background-image": f'url("{background.image_url}")',
            "background-size": background.image_fit or "cover",
            "background-position": background.image_position or "center",
            "background-repeat": "no-repeat",
        }

    if isinstance(background, VideoBackground):
        # La vidéo est posée à part ; couleur de repli sous la vidéo
        return {"background-color": background.color or "#000000"}

    return {"background-color": "#ffffff"}


def background_is_dark(background) -> bool:
    """Heuristique de contraste : images/vidéos/motifs considérés sombres."""
    if background is None:
        return False
    if isinstance(background, SolidBackground):
        return is_dark_color(background.color)
    if isinstance(background, GradientBackground):
        return is_dark_color(background.gradient_from) or is_dark_color(background.gradient_to)
    return isinstance(background, (ImageBackground, VideoBackground, PatternBackground))


def style_attr(props: Optional[Dict[str, str]]) -> str:
    """dict CSS → contenu d'attribut style (ordre conservé)."""
    if not props:
        return ""
    return ";".join(f"{k}:{v}" for k, v in props.items())
