"""
Helpers communs aux renderers de blocs.

Signature d'un renderer : `render(block, style, theme) -> str` (fragment HTML).
Chaque renderer ne lit que les clés de `block.content` propres à son type,
avec un défaut pour chacune : un contenu incomplet rend quand même.
"""
import html
import re
from typing import Any, Callable, Optional

from ..core.schemas import Block, PageTheme, ResolvedStyle

BlockRenderFn = Callable[[Block, ResolvedStyle, PageTheme], str]

# Image de repli inline (carré gris + pictogramme) pour les assets cassés
IMAGE_FALLBACK = (
    "data:image/svg+xml;utf8,"
    '<svg xmlns="http://www.w3.org/2000/svg" width="160" height="120" viewBox="0 0 160 120">'
    '<rect width="160" height="120" fill="%23f3f4f6"/>'
    '<path d="M56 78l16-20 12 14 8-10 14 16z" fill="%239ca3af"/>'
    '<circle cx="66" cy="48" r="7" fill="%239ca3af"/></svg>'
)


def esc(value: Any) -> str:
    """Échappe texte et valeurs d'attribut. None → ""."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def style_attr(*pairs) -> str:
    """Paires (propriété, valeur) → ` style="..."` ; valeurs vides ignorées."""
    css = ";".join(f"{k}:{v}" for k, v in pairs if v not in (None, ""))
    return f' style="{esc(css)}"' if css else ""


def class_attr(*names: Optional[str]) -> str:
    return f' class="{esc(" ".join(n for n in names if n))}"'


def text(content: dict, key: str, default: str = "") -> str:
    """Champ texte du contenu, échappé ; absent ou vide → défaut."""
    value = content.get(key)
    if value is None or value == "":
        value = default
    return esc(value)


def number(content: dict, key: str, default: float) -> float:
    value = content.get(key)
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def items(content: dict, key: str) -> list:
    """Liste de dicts du contenu ; tout autre type → []."""
    value = content.get(key)
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def img(src: Optional[str], alt: str = "", css_class: str = "", style: str = "", lazy: bool = True) -> str:
    """Balise <img> qui bascule sur IMAGE_FALLBACK si l'asset échoue."""
    if not src:
        return f'<img src="{esc(IMAGE_FALLBACK)}" alt="{esc(alt)}"{class_attr(css_class)}{style}>'
    loading = ' loading="lazy"' if lazy else ""
    onerror = esc(f"this.onerror=null;this.src='{IMAGE_FALLBACK}'")
    return (
        f'<img src="{esc(src)}" alt="{esc(alt)}"{class_attr(css_class)}{style}{loading} '
        f'onerror="{onerror}">'
    )


def is_inert_url(url: Optional[str]) -> bool:
    return not url or url.strip() in ("", "#", "https://", "http://")


# ── Placeholders ────────────────────────────────────────────────────────────

def unknown_placeholder(block_type: str) -> str:
    return (
        f'<div class="bc-placeholder bc-placeholder--unknown" data-block-type="{esc(block_type)}">'
        f"Type de bloc inconnu : {esc(block_type)}</div>"
    )


def loading_placeholder(block_type: str, min_height: int) -> str:
    return (
        f'<div class="bc-placeholder bc-placeholder--loading" data-block-type="{esc(block_type)}"'
        f' style="min-height:{min_height}px" aria-busy="true">Chargement…</div>'
    )


def error_placeholder(block_type: str) -> str:
    return (
        f'<div class="bc-placeholder bc-placeholder--error" data-block-type="{esc(block_type)}">'
        f"Ce bloc n'a pas pu être affiché.</div>"
    )


def empty_placeholder(message: str, hint: str = "") -> str:
    hint_html = f'<p class="bc-placeholder__hint">{esc(hint)}</p>' if hint else ""
    return f'<div class="bc-placeholder bc-placeholder--empty"><p>{esc(message)}</p>{hint_html}</div>'


def invalid_url_placeholder(url: str, message: str) -> str:
    return (
        f'<div class="bc-placeholder bc-placeholder--invalid">'
        f"<p>{esc(message)}</p><code>{esc(url)}</code></div>"
    )


# ── Surfaces stylées (boutons, liens) ───────────────────────────────────────

def surface_pairs(style: ResolvedStyle, background: Optional[str] = None) -> list:
    """
    Paires CSS d'une surface cliquable + variables hover consommées par
    `.bc-hoverable:hover` (voir scss/main.scss). Les variables de fond, couleur
    et ombre retombent sur la valeur de base : le hover les impose en !important
    pour passer devant le style inline.
    """
    hover = style.hover
    background = background or style.background
    return [
        ("background", background),
        ("color", style.text_color),
        ("border", style.border),
        ("border-radius", f"{style.border_radius}px"),
        ("box-shadow", style.box_shadow),
        ("backdrop-filter", style.backdrop_filter),
        ("animation", style.animation),
        ("--bc-hover-bg", hover.background or background),
        ("--bc-hover-color", hover.color or style.text_color),
        ("--bc-hover-shadow", hover.box_shadow or style.box_shadow),
        ("--bc-hover-filter", hover.filter),
        ("--bc-hover-opacity", hover.opacity),
        ("--bc-hover-transform", hover.transform),
    ]


# ── Texte riche ─────────────────────────────────────────────────────────────

_DANGEROUS_TAGS = re.compile(r"<(script|style|iframe|object|embed)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_LONE_TAGS = re.compile(r"<(script|style|iframe|object|embed)\b[^>]*/?>", re.IGNORECASE)
_EVENT_ATTRS = re.compile(r"\s+on[a-z]+\s*=\s*(\"[^\"]*\"|'[^']*'|[^\s>]+)", re.IGNORECASE)
_JS_URLS = re.compile(r"(href|src)\s*=\s*([\"'])\s*javascript:[^\"']*\2", re.IGNORECASE)


def sanitize_rich_text(markup: str) -> str:
    """HTML saisi dans l'éditeur de texte riche, sans scripts ni handlers."""
    markup = _DANGEROUS_TAGS.sub("", markup)
    markup = _LONE_TAGS.sub("", markup)
    markup = _EVENT_ATTRS.sub("", markup)
    return _JS_URLS.sub(r'\1="#"', markup)
