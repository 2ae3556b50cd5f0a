"""
Bloc linkButton — lien pleine largeur avec icône de plateforme.

Icône : plateforme connue (dégradé de marque) > favicon du domaine > globe.
Un lien sans destination (absent, `#`) est rendu inerte.
"""
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, esc, img, is_inert_url, style_attr, surface_pairs
from .platforms import detect_link


def _thumbnail(block: Block, link) -> str:
    content, bstyle = block.content, block.style
    if content.get("thumbnail"):
        return f'<span class="link-button__thumb">{img(content["thumbnail"], css_class="link-button__thumb-img")}</span>'
    if bstyle.get("showIcon") is False:
        return ""
    if link.kind == "platform":
        p = link.platform
        return (
            f'<span class="link-button__icon bc-icon--{esc(p.icon)}"'
            f'{style_attr(("background", p.gradient), ("color", p.color))} aria-label="{esc(p.name)}"></span>'
        )
    if link.kind == "favicon":
        # favicon introuvable : on masque simplement l'image
        return (
            f'<span class="link-button__icon link-button__icon--favicon">'
            f'<img src="{esc(link.url)}" alt="" loading="lazy" onerror="this.style.display=\'none\'"></span>'
        )
    return '<span class="link-button__icon bc-icon--globe"></span>'


def render_link_button(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    content, bstyle = block.content, block.style
    url = content.get("url") or "#"
    title = content.get("label") or content.get("title") or "Link"
    subtitle = content.get("description")
    new_tab = bstyle.get("openInNewTab") is not False
    icon_right = bstyle.get("iconPosition") == "right"

    link = detect_link(url)
    background = None
    if style.variant == "gradient" and link.kind == "platform":
        background = link.platform.gradient

    thumb = _thumbnail(block, link)
    accent = ""
    if link.kind == "platform" and style.variant != "gradient":
        accent = f'<span class="link-button__accent"{style_attr(("background-color", link.platform.color))}></span>'
    sub_html = f'<p class="link-button__subtitle">{esc(subtitle)}</p>' if subtitle else ""
    arrow = '<span class="link-button__arrow bc-icon--external"></span>' if new_tab else '<span class="link-button__arrow bc-icon--chevron"></span>'

    inner = (
        f'<div class="link-button__body bc-hoverable"{style_attr(*surface_pairs(style, background))}>'
        f"{accent}"
        f"{'' if icon_right else thumb}"
        f'<div class="link-button__text"><span class="link-button__title">{esc(title)}</span>{sub_html}</div>'
        f"{thumb if icon_right else ''}"
        f"{arrow}"
        f"</div>"
    )

    if is_inert_url(url):
        return f'<div{class_attr("link-button", "link-button--inert")} aria-disabled="true">{inner}</div>'

    target = ' target="_blank" rel="noopener noreferrer"' if new_tab else ""
    return f'<a href="{esc(url)}"{class_attr("link-button")}{target}>{inner}</a>'
