"""Bloc text — HTML riche (nettoyé) avec styles de paragraphe."""
from ..core.design_system import light_tint
from ..core.schemas import Block, PageTheme, ResolvedStyle
from ..style import recipes
from .base import class_attr, esc, sanitize_rich_text, style_attr

LINE_HEIGHTS = {"tight": "1.25", "normal": "1.5", "relaxed": "1.625", "loose": "2"}
FONT_WEIGHTS = {"normal": "400", "medium": "500", "semibold": "600", "bold": "700"}
MAX_WIDTHS = {"full": None, "4xl": "56rem", "2xl": "42rem", "xl": "36rem"}


def render_text(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c, s = block.content, block.style
    markup = sanitize_rich_text(c.get("html") or "<p>Your text here...</p>")

    text_style = recipes.pick(recipes.TEXT_STYLES, c.get("textStyle"), "normal")
    if text_style:
        text_style = text_style.format(accent=style.accent_color, tint=light_tint(style.accent_color, 0.08))

    max_width = recipes.pick(MAX_WIDTHS, c.get("maxWidth"), "full")
    border = c.get("borderStyle")
    border_css = None
    if border == "left":
        border_css = ("border-left", f"4px solid {c.get('borderColor') or '#8b5cf6'}")
    elif border in ("full", "dashed"):
        kind = "dashed" if border == "dashed" else "solid"
        border_css = ("border", f"2px {kind} {c.get('borderColor') or '#8b5cf6'}")
    boxed = bool(s.get("backgroundColor")) or border_css is not None

    attrs = style_attr(
        ("color", style.body_color),
        ("font-family", style.body_font),
        ("font-size", style.font_size),
        ("font-weight", recipes.pick(FONT_WEIGHTS, c.get("fontWeight"), "normal")),
        ("line-height", recipes.pick(LINE_HEIGHTS, c.get("lineHeight"), "normal")),
        ("text-align", c.get("textAlign") or style.alignment),
        ("text-shadow", style.text_shadow if style.text_shadow != "none" else None),
        ("background-color", s.get("backgroundColor")),
        ("padding", (c.get("containerPadding") or "1rem") if boxed else None),
        ("border-radius", "0.5rem" if boxed else None),
        border_css or ("border", None),
        ("max-width", max_width),
        ("margin", "0 auto" if max_width else None),
        ("column-count", "2" if c.get("columns") is True else None),
        ("animation", style.animation),
    )
    wrapper_style = f' style="{esc(text_style)}"' if text_style else ""
    drop_cap = "text-block--drop-cap" if c.get("dropCap") else None

    icon_html = ""
    if c.get("icon"):
        icon_html = f'<span class="text-block__icon text-block__icon--{esc(c.get("iconPosition") or "left")}">{esc(c["icon"])}</span>'

    author = ""
    if c.get("textStyle") == "quote" and (c.get("authorName") or c.get("authorTitle")):
        name = c.get("authorName") or ""
        initial = esc(name[:1].upper() or "?")
        author = (
            f'<div class="text-block__author"><span class="text-block__avatar">{initial}</span>'
            f'<span class="text-block__author-name">{esc(name)}</span>'
            f'<span class="text-block__author-title">{esc(c.get("authorTitle"))}</span></div>'
        )

    return (
        f'<div class="text-block"{wrapper_style}>{icon_html}'
        f'<div{class_attr("text-block__body", drop_cap)}{attrs}>{markup}</div>{author}</div>'
    )
