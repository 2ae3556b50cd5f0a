"""Blocs d'identité : profile, header."""
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, esc, img, is_inert_url, items, style_attr

AVATAR_SIZES = {"small": 64, "medium": 96, "large": 128}


def _initials(name: str) -> str:
    parts = [p for p in name.split() if p]
    return "".join(p[0].upper() for p in parts[:2]) or "?"


def render_profile(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    name = c.get("displayName") or c.get("name") or "Your Name"
    size = AVATAR_SIZES.get(theme.header.avatar_size or "medium", 96)
    shape = "square" if theme.header.avatar_shape == "square" else "circle"

    if c.get("avatar"):
        avatar = img(c["avatar"], alt=name, css_class=f"profile__avatar profile__avatar--{shape}",
                     style=style_attr(("width", f"{size}px"), ("height", f"{size}px")), lazy=False)
    else:
        avatar = (
            f'<div class="profile__avatar profile__avatar--{shape} profile__avatar--initials"'
            f'{style_attr(("width", f"{size}px"), ("height", f"{size}px"), ("background", style.accent_color))}>'
            f"{esc(_initials(name))}</div>"
        )

    bio = f'<p class="profile__bio"{style_attr(("color", style.body_color))}>{esc(c["bio"])}</p>' if c.get("bio") else ""
    location = f'<p class="profile__location">{esc(c["location"])}</p>' if c.get("location") else ""
    verified = '<span class="profile__verified" aria-label="verified">✓</span>' if c.get("verified") else ""

    return f"""<div class="profile profile--{esc(theme.header.alignment or 'center')}">
  {avatar}
  <h1 class="profile__name"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>{esc(name)}{verified}</h1>
  {bio}
  {location}
</div>"""


def render_header(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    h = theme.header
    title = c.get("title") or theme.branding.site_name or "My Site"
    logo = c.get("logo") or theme.branding.logo_url

    brand = img(logo, alt=title, css_class="site-header__logo", lazy=False) if logo else esc(title)
    links_html = "".join(
        f'<a href="{esc(lnk.get("url") or "#")}" class="site-header__link">{esc(lnk.get("label") or "")}</a>'
        for lnk in items(c, "links")
        if not is_inert_url(lnk.get("url")) or lnk.get("label")
    )
    attrs = style_attr(
        ("background", c.get("backgroundColor") or h.background_color),
        ("color", c.get("textColor") or h.text_color),
        ("font-family", style.title_font),
    )
    return f"""<header{class_attr("site-header", f"site-header--{h.style or 'simple'}")}{attrs}>
  <div class="site-header__inner">
    <span class="site-header__brand">{brand}</span>
    <nav class="site-header__links">{links_html}</nav>
  </div>
</header>"""
