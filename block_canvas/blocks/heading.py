"""Bloc heading — h1/h2/h3 avec dégradé, ombre portée, décoration et icône."""
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, esc, number, style_attr


def render_heading(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    level = c.get("level") if c.get("level") in (1, 2, 3) else 1
    label = esc(c.get("text") or "Heading")
    icon = c.get("icon")
    icon_pos = c.get("iconPosition") or "left"

    if icon:
        icon_html = f'<span class="heading__icon heading__icon--{esc(icon_pos)}">{esc(icon)}</span>'
        if icon_pos in ("left", "above"):
            label = icon_html + label
        else:
            label = label + icon_html

    gradient_pairs = ()
    if style.gradient_text:
        gradient_pairs = (
            ("background-image", style.gradient_text),
            ("-webkit-background-clip", "text"),
            ("background-clip", "text"),
            ("color", "transparent"),
        )

    attrs = style_attr(
        ("text-align", style.alignment),
        ("color", None if style.gradient_text else style.title_color),
        ("font-family", style.title_font),
        ("font-size", style.font_size),
        ("font-weight", style.font_weight),
        ("line-height", number(c, "lineHeight", 1.2)),
        ("letter-spacing", style.letter_spacing),
        ("text-shadow", style.text_shadow if style.text_shadow != "none" else None),
        ("margin-top", f"{int(number(c, 'marginTop', 0))}px"),
        ("margin-bottom", f"{int(number(c, 'marginBottom', 0))}px"),
        ("animation", style.animation),
        *gradient_pairs,
    )
    if style.decoration:
        # la décoration s'applique au texte, pas à la boîte du titre
        label = f'<span class="heading__decoration" style="{esc(style.decoration)}">{label}</span>'
    stacked = "heading--stacked" if icon and icon_pos in ("above", "below") else None
    return f"<h{level}{class_attr('heading', f'heading--h{level}', stacked)}{attrs}>{label}</h{level}>"
