"""
Générateur CSS — variables de thème + SCSS compilé (libsass).

Pipeline :
  generate_css_variables(theme)  →  :root { --bc-primary: ...; ... }
  get_compiled_scss()            →  reset + canvas + blocs (compilé une fois)
  generate_page_css(theme)       →  variables + SCSS
"""
import logging
from pathlib import Path

import sass

from ..core.fonts import font_family
from ..core.schemas import PageTheme
from ..style import recipes

log = logging.getLogger(__name__)

_SCSS_DIR = Path(__file__).parent.parent / "scss"
_SCSS_CACHE: dict = {}


def get_compiled_scss() -> str:
    """Compile main.scss une seule fois, met en cache."""
    if "main" not in _SCSS_CACHE:
        _SCSS_CACHE["main"] = sass.compile(
            filename=str(_SCSS_DIR / "main.scss"),
            output_style="compressed",
        )
        log.debug("SCSS compilé (%d octets)", len(_SCSS_CACHE["main"]))
    return _SCSS_CACHE["main"]


def invalidate_scss_cache():
    """Force la recompilation SCSS (dev only)."""
    _SCSS_CACHE.clear()


def generate_css_variables(theme: PageTheme) -> str:
    """Bloc :root dérivé du thème ; chaque valeur absente retombe sur un défaut."""
    t, b = theme.typography, theme.branding
    max_width = theme.layout.max_width
    if isinstance(max_width, int):
        max_width = f"{max_width}px"
    spacing = recipes.pick(recipes.SPACING_DENSITY, theme.layout.spacing, "normal")
    variables = {
        "--bc-primary": b.primary_color or theme.button.background_color or "#8b5cf6",
        "--bc-secondary": b.secondary_color or "#3b82f6",
        "--bc-title-font": font_family(t.title_font),
        "--bc-body-font": font_family(t.body_font),
        "--bc-title-color": t.title_color or "#1f2937",
        "--bc-body-color": t.body_color or "#4b5563",
        "--bc-link-color": t.link_color or b.primary_color or "#8b5cf6",
        "--bc-max-width": max_width or "680px",
        "--bc-block-spacing": f"{spacing}px",
    }
    body = "\n".join(f"  {k}: {v};" for k, v in variables.items())
    return f":root {{\n{body}\n}}"


def generate_page_css(theme: PageTheme) -> str:
    """
    CSS complet d'une page :
    1. :root { variables } depuis le thème
    2. SCSS compilé (reset + canvas + blocs)
    """
    return generate_css_variables(theme) + "\n\n" + get_compiled_scss()
