"""Blocs de mise en page : spacer, divider."""
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, esc, number, style_attr

JUSTIFY = {"left": "flex-start", "center": "center", "right": "flex-end"}

SPACER_PATTERNS = {
    "dots": ("radial-gradient(circle, rgba(0,0,0,0.1) 1px, transparent 1px)", "20px 20px"),
    "lines": (
        "repeating-linear-gradient(45deg, transparent, transparent 10px, "
        "rgba(0,0,0,0.05) 10px, rgba(0,0,0,0.05) 20px)",
        None,
    ),
    "gradient": ("linear-gradient(to right, transparent, rgba(0,0,0,0.05), transparent)", None),
}


def render_spacer(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    height = int(number(c, "height", 40))
    classes = ["spacer"]
    if c.get("hideOnMobile"):
        classes.append("spacer--hide-mobile")
    if c.get("hideOnDesktop"):
        classes.append("spacer--hide-desktop")

    pattern_image, pattern_size = None, None
    background = None
    if c.get("backgroundEnabled"):
        background = c.get("backgroundColor") or "#f3f4f6"
        pattern_image, pattern_size = SPACER_PATTERNS.get(c.get("backgroundPattern"), (None, None))

    mobile = None
    if c.get("mobileHeightEnabled"):
        mobile = f"{int(number(c, 'mobileHeight', 20))}px"

    line = ""
    divider = c.get("dividerStyle") or "none"
    if divider != "none":
        thickness = int(number(c, "dividerThickness", 1))
        color = c.get("dividerColor") or "#e5e7eb"
        line = (
            f'<span class="spacer__line spacer__line--{esc(c.get("dividerAlignment") or "center")}"'
            + style_attr(
                ("width", c.get("dividerWidth") or "100%"),
                ("height", f"{thickness}px"),
                ("background", "linear-gradient(to right, transparent, #9333ea, transparent)" if divider == "gradient" else None),
                ("border-top", None if divider == "gradient" else f"{thickness}px {divider} {color}"),
            )
            + "></span>"
        )
    icon = f'<span class="spacer__icon">{esc(c["icon"])}</span>' if c.get("icon") else ""

    attrs = style_attr(
        ("height", f"{height}px"),
        ("--bc-spacer-mobile", mobile),
        ("background-color", background),
        ("background-image", pattern_image),
        ("background-size", pattern_size),
    )
    return f'<div{class_attr(*classes)}{attrs} aria-hidden="true">{line}{icon}</div>'


def render_divider(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    kind = c.get("style") or "solid"
    thickness = int(number(c, "thickness", 2))
    width = c.get("width") or "100%"
    color = c.get("color") or "#e5e7eb"
    justify = JUSTIFY.get(c.get("alignment") or "center", "center")

    if kind == "gradient":
        inner = f'<div class="divider__line"{style_attr(("width", width), ("height", f"{thickness}px"), ("background", "linear-gradient(to right, transparent, #9333ea, transparent)"))}></div>'
    elif kind == "double":
        rule = style_attr(("border-style", "solid"), ("border-width", f"{thickness}px 0 0 0"), ("border-color", color), ("margin", "0"))
        gap = style_attr(("border-style", "solid"), ("border-width", f"{thickness}px 0 0 0"), ("border-color", color), ("margin", f"{thickness * 2}px 0 0 0"))
        inner = f'<div{style_attr(("width", width))}><hr{rule}><hr{gap}></div>'
    else:
        inner = f'<hr{style_attr(("width", width), ("border-style", kind), ("border-width", f"{thickness}px 0 0 0"), ("border-color", color))}>'
    return f'<div class="divider"{style_attr(("justify-content", justify))}>{inner}</div>'
