"""Bloc button — bouton d'action (url, téléphone, email, téléchargement)."""
import re
from typing import Optional

from ..core.schemas import Block, PageTheme, ResolvedStyle
from ..style import recipes
from .base import class_attr, esc, style_attr, surface_pairs

WIDTHS = {"auto": None, "full": "100%", "half": "50%", "third": "33.333%"}
JUSTIFY = {"left": "flex-start", "center": "center", "right": "flex-end"}


def build_href(url: Optional[str], action_type: Optional[str]) -> str:
    """
    Destination du bouton selon `actionType` :
    phone → `tel:` (espaces retirés), email → `mailto:`, url/download → tel quel.
    Sans url → `#`.
    """
    if not url:
        return "#"
    if action_type == "phone":
        return "tel:" + re.sub(r"\s", "", url)
    if action_type == "email":
        return "mailto:" + url
    return url


def render_button(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    action = c.get("actionType") or "url"
    href = build_href(c.get("url"), action)
    label = esc(c.get("label") or "Click me")
    icon = c.get("icon")
    if icon:
        icon_html = f'<span class="button-block__icon">{esc(icon)}</span>'
        label = label + icon_html if c.get("iconPosition") == "right" else icon_html + label

    size_css = recipes.pick(recipes.BUTTON_SIZES, c.get("size"), "medium")
    size_pairs = [tuple(p.split(":", 1)) for p in size_css.split(";")]
    attrs = style_attr(*size_pairs, *surface_pairs(style))

    extra = ""
    if c.get("openInNewTab"):
        extra += ' target="_blank" rel="noopener noreferrer"'
    if action == "download":
        extra += " download"

    helper = f'<p class="button-block__helper">{esc(c["helperText"])}</p>' if c.get("helperText") else ""
    width = recipes.pick(WIDTHS, c.get("width"), "full")

    return (
        f'<div class="button-block"{style_attr(("justify-content", JUSTIFY.get(style.alignment, "center")))}>'
        f'<div class="button-block__inner"{style_attr(("width", width))}>'
        f'<a href="{esc(href)}"{class_attr("button-block__link", "bc-hoverable", f"button-block--{style.variant}")}{attrs}{extra}>{label}</a>'
        f"{helper}</div></div>"
    )
