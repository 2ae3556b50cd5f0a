"""Bloc image — image unique avec légende, lien et effets."""
from ..core.schemas import Block, PageTheme, ResolvedStyle
from ..style import recipes
from .base import class_attr, empty_placeholder, esc, img, number, style_attr

IMAGE_SHADOWS = {**recipes.SHADOW_PRESETS, "glow": "0 0 20px rgba(139,92,246,0.5)"}
IMAGE_FILTERS = {
    "none": None,
    "grayscale": "grayscale(1)",
    "sepia": "sepia(1)",
    "blur": "blur(4px)",
    "brightness": "brightness(1.1)",
    "contrast": "contrast(1.25)",
}
IMAGE_HOVERS = {"none": None, "zoom": "zoom", "lift": "lift", "brightness": "brightness", "grayscale": "grayscale", "blur": "blur"}
JUSTIFY = {"left": "flex-start", "center": "center", "right": "flex-end"}


def render_image(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    url = c.get("url")
    if not url:
        return empty_placeholder("No image URL set", "Add URL in the inspector →")

    if c.get("width") == "custom":
        width = f"{int(number(c, 'customWidth', 100))}%"
    else:
        width = c.get("width") or "100%"

    border_style = c.get("borderStyle") or "none"
    border = None
    if border_style != "none":
        border = f"{int(number(c, 'borderWidth', 2))}px {border_style} {c.get('borderColor') or '#000000'}"

    object_fit = block.style.get("objectFit") or "cover"
    img_style = style_attr(
        ("object-fit", object_fit if c.get("aspectRatioLock", True) else "fill"),
        ("height", f"{int(number(c, 'fixedHeight', 300))}px" if c.get("heightMode") == "fixed" else "auto"),
        ("width", "100%"),
        ("border-radius", f"{int(number(c, 'borderRadius', 8))}px"),
        ("border", border),
        ("opacity", number(c, "opacity", 100) / 100),
        ("box-shadow", recipes.pick(IMAGE_SHADOWS, c.get("shadow"), "none")),
        ("filter", recipes.pick(IMAGE_FILTERS, c.get("filter"), "none")),
    )
    hover = recipes.pick(IMAGE_HOVERS, c.get("hoverEffect"), "none")
    element = img(
        url,
        alt=c.get("alt") or "",
        css_class=f"image-block__img{f' image-block__img--{hover}' if hover else ''}",
        style=img_style,
        lazy=c.get("lazyLoad", True) is not False,
    )

    link = c.get("link")
    if c.get("lightbox"):
        element = f'<a href="{esc(url)}" target="_blank" rel="noopener" class="image-block__zoom">{element}</a>'
    elif link:
        target = ' target="_blank" rel="noopener noreferrer"' if c.get("openInNewTab") else ""
        element = f'<a href="{esc(link)}"{target} class="image-block__link">{element}</a>'

    caption = f'<p class="image-block__caption">{esc(c["caption"])}</p>' if c.get("caption") else ""
    wrapper = style_attr(
        ("justify-content", JUSTIFY.get(c.get("alignment") or "center", "center")),
        ("margin-top", f"{int(number(c, 'marginTop', 0))}px"),
        ("margin-bottom", f"{int(number(c, 'marginBottom', 0))}px"),
    )
    return (
        f'<div{class_attr("image-block")}{wrapper}>'
        f'<figure class="image-block__frame"{style_attr(("width", width))}>{element}{caption}</figure>'
        f"</div>"
    )
