"""
Style Resolver — (block, theme) → ResolvedStyle.

Cascade à trois niveaux, propriété par propriété :
  1. override du bloc (`block.style[prop]`, ou champ de `content` prévu pour ça,
     ex. `customBgColor` quand `useThemeColors` est faux)
  2. champ correspondant du thème
  3. constante par défaut (éventuellement propre au type de bloc)

Un bloc peut surcharger la couleur et hériter du rayon. Fonction pure :
mêmes entrées ⇒ même objet (égalité de valeur), ce qui permet la mémoïsation.
"""
from typing import Any, Dict, Optional

from ..core.fonts import font_family
from ..core.schemas import Block, HoverRecipe, PageTheme, ResolvedStyle
from . import recipes
from .recipes import pick

DEFAULT_BUTTON_BG = "#8b5cf6"
DEFAULT_BUTTON_TEXT = "#ffffff"
DEFAULT_TITLE_COLOR = "#1f2937"
DEFAULT_BODY_COLOR = "#4b5563"

# Défauts de niveau 3 qui diffèrent selon le type
TYPE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "linkButton": {
        "background": "#ffffff",
        "text_color": "#000000",
        "radius": 12,
        "hover_effect": "scale",
        "alignment": "center",
    },
    "button": {"radius": 8, "hover_effect": "lift", "alignment": "center"},
    "heading": {"alignment": "left", "hover_effect": "none"},
    "text": {"alignment": "left", "hover_effect": "none"},
    "social": {"radius": 9999, "alignment": "center"},
}

BASE_DEFAULTS: Dict[str, Any] = {
    "background": DEFAULT_BUTTON_BG,
    "text_color": DEFAULT_BUTTON_TEXT,
    "radius": 8,
    "hover_effect": "none",
    "alignment": "center",
}


def _first(*candidates):
    """Premier candidat renseigné (None et "" comptent comme absents)."""
    for c in candidates:
        if c is not None and c != "":
            return c
    return None


def _default(block_type: str, key: str):
    return TYPE_DEFAULTS.get(block_type, {}).get(key, BASE_DEFAULTS[key])


def _custom_colors(content: Dict[str, Any]) -> tuple[Optional[str], Optional[str]]:
    """Couleurs personnalisées du contenu, actives seulement hors couleurs du thème."""
    if content.get("useThemeColors", True) is not False:
        return None, None
    return content.get("customBgColor"), content.get("customTextColor")


def resolve(block: Block, theme: Optional[PageTheme] = None) -> ResolvedStyle:
    """Calcule la spécification visuelle concrète d'un bloc."""
    theme = theme or PageTheme()
    style, content = block.style, block.content
    btn, typo, brand = theme.button, theme.typography, theme.branding
    custom_bg, custom_text = _custom_colors(content)

    variant = recipes.normalize_variant(_first(
        style.get("variant"), content.get("variant"), btn.style, btn.variant,
    ))
    background = _first(
        style.get("backgroundColor"), custom_bg,
        btn.background_color, brand.primary_color,
        _default(block.type, "background"),
    )
    text_color = _first(
        style.get("textColor"), custom_text,
        btn.text_color,
        _default(block.type, "text_color"),
    )
    radius = recipes.border_radius(
        _first(style.get("borderRadius"), content.get("borderRadius"), btn.border_radius),
        _default(block.type, "radius"),
    )
    accent = _first(
        style.get("accentColor"), content.get("accentColor"),
        brand.primary_color, btn.background_color,
        DEFAULT_BUTTON_BG,
    )

    recipe = recipes.variant_recipe(variant, background, text_color, brand.secondary_color)

    shadow_key = _first(style.get("shadow"), content.get("shadow"), btn.shadow, "none")
    preset_shadow = pick(recipes.SHADOW_PRESETS, shadow_key, "none")
    box_shadow = preset_shadow if preset_shadow != "none" else recipe["box_shadow"]

    style_animation = style.get("animation")
    hover_effect = _first(
        style.get("hoverEffect"),
        style_animation if style_animation in recipes.HOVER_EFFECTS else None,
        content.get("hoverEffect"),
        btn.hover_effect,
        _default(block.type, "hover_effect"),
    )
    hover_transform = pick(recipes.HOVER_EFFECTS, hover_effect, "none")
    hover_shadow = recipes.HOVER_SHADOWS.get(hover_effect)
    hover_data = dict(recipe["hover"])
    if hover_transform:
        hover_data["transform"] = hover_transform
    if hover_shadow:
        hover_data.setdefault("box_shadow", hover_shadow.format(color=background))

    animation = None
    for candidate in (style_animation, content.get("animation")):
        if candidate in recipes.ANIMATIONS:
            animation = recipes.ANIMATIONS[candidate]
            break

    if block.type == "heading":
        theme_align = typo.title_align
    elif block.type == "text":
        theme_align = typo.body_align
    else:
        theme_align = None
    alignment = _first(style.get("alignment"), content.get("alignment"), theme_align,
                       _default(block.type, "alignment"))

    block_font = style.get("fontFamily")
    title_font = font_family(_first(block_font if block.type == "heading" else None, typo.title_font))
    body_font = font_family(_first(block_font if block.type != "heading" else None, typo.body_font))

    title_color = _first(style.get("color"), typo.title_color, DEFAULT_TITLE_COLOR)
    body_color = _first(style.get("color"), typo.body_color, DEFAULT_BODY_COLOR)

    font_size = style.get("fontSize")
    font_weight = style.get("fontWeight")
    if block.type == "heading":
        level = content.get("level") if content.get("level") in recipes.HEADING_SIZES else 1
        sizes = recipes.HEADING_SIZES[level]
        font_size = _first(font_size, sizes["font_size"])
        font_weight = _first(font_weight, typo.title_weight, sizes["font_weight"])
    elif block.type == "text":
        font_size = _first(font_size, pick(recipes.TEXT_SIZES, content.get("fontSize"), "base"))

    text_shadow = pick(recipes.TEXT_SHADOWS, _first(content.get("textShadow"), style.get("textShadow")), "none")
    gradient = pick(recipes.HEADING_GRADIENTS, content.get("gradient"), "none")
    gradient_text = gradient.format(primary=accent) if gradient else None
    decoration = pick(recipes.DECORATIONS, content.get("decoration"), "none")

    spacing = pick(recipes.SPACING_DENSITY, theme.layout.spacing, "normal")

    return ResolvedStyle(
        variant=variant,
        background=recipe["background"],
        text_color=recipe["color"],
        border=recipe["border"],
        border_radius=radius,
        box_shadow=box_shadow,
        backdrop_filter=recipe.get("backdrop_filter"),
        hover=HoverRecipe(**hover_data),
        hover_transform=hover_transform,
        animation=animation,
        alignment=alignment,
        title_font=title_font,
        body_font=body_font,
        title_color=title_color,
        body_color=body_color,
        accent_color=accent,
        font_size=font_size,
        font_weight=font_weight,
        letter_spacing=style.get("letterSpacing"),
        text_shadow=text_shadow,
        gradient_text=gradient_text,
        decoration=decoration,
        block_spacing=spacing,
    )
