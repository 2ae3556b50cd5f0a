"""Blocs footer et social."""
import datetime as dt
from typing import Optional

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, empty_placeholder, esc, items, style_attr
from .platforms import DEFAULT_SOCIAL_COLOR, SOCIAL_PLATFORMS, build_profile_url

FOOTER_STYLES = ("simple", "minimal", "centered", "columns")


def copyright_text(block: Block, theme: PageTheme, year: Optional[int] = None) -> str:
    """Texte du bloc > copyright du thème > mention générée."""
    year = year or dt.date.today().year
    site = theme.branding.site_name or "Your Brand"
    return (
        block.content.get("text")
        or theme.branding.copyright_text
        or f"© {year} {site}. All rights reserved."
    )


def _social_links(block: Block) -> list:
    """Nouveau format (liste socialLinks) sinon ancien format (dict links)."""
    c = block.content
    new = [l for l in items(c, "socialLinks") if l.get("value") or l.get("url")]
    if new:
        return [
            (l.get("platformId") or l.get("platform") or "website",
             build_profile_url(l.get("platformId") or l.get("platform") or "", l.get("value") or l.get("url") or ""))
            for l in sorted(new, key=lambda l: l.get("order", 0))
        ]
    old = c.get("links")
    if isinstance(old, dict):
        return [
            ("x" if pid == "twitter" else pid, build_profile_url("x" if pid == "twitter" else pid, value))
            for pid, value in old.items()
            if isinstance(value, str) and value
        ]
    return []


def _social_icon(platform_id: str, url: str, size: int = 40, filled: bool = True) -> str:
    platform = SOCIAL_PLATFORMS.get(platform_id)
    color = platform.brand_color if platform else DEFAULT_SOCIAL_COLOR
    name = platform.name if platform else platform_id
    attrs = style_attr(
        ("width", f"{size}px"),
        ("height", f"{size}px"),
        ("background", color if filled else None),
        ("color", "#ffffff" if filled else color),
    )
    return (
        f'<a href="{esc(url)}" class="social__icon bc-icon--{esc(platform_id)}" target="_blank" '
        f'rel="noopener noreferrer" aria-label="{esc(name)}"{attrs}></a>'
    )


def render_social(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    links = _social_links(block)
    if not links:
        return empty_placeholder("No social profiles yet", "Add your profiles in the inspector")
    bstyle = block.style
    size = bstyle.get("iconSize") if isinstance(bstyle.get("iconSize"), int) else 40
    filled = (block.content.get("style") or "icons") != "outline"
    layout = bstyle.get("layout") or "row"
    icons = "".join(_social_icon(pid, url, size, filled) for pid, url in links)
    return f'<div{class_attr("social", f"social--{layout}")}{style_attr(("justify-content", style.alignment))}>{icons}</div>'


def render_footer(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    variant = c.get("style") if c.get("style") in FOOTER_STYLES else "simple"
    border = c.get("showBorder", theme.footer.border_top if theme.footer.border_top is not None else True)

    links_html = "".join(
        f'<a href="{esc(l.get("url") or "#")}" class="footer__link">{esc(l.get("label") or "")}</a>'
        for l in items(c, "links")
    )
    social = ""
    if c.get("showSocial") or c.get("socialLinks"):
        social = "".join(_social_icon(pid, url, 32) for pid, url in _social_links(block))
        social = f'<div class="footer__social">{social}</div>' if social else ""

    contact = []
    if c.get("email"):
        contact.append(f'<a href="mailto:{esc(c["email"])}" class="footer__contact">{esc(c["email"])}</a>')
    if c.get("phone"):
        contact.append(f'<a href="tel:{esc(c["phone"])}" class="footer__contact">{esc(c["phone"])}</a>')
    if c.get("address"):
        contact.append(f'<span class="footer__contact">{esc(c["address"])}</span>')
    contact_html = f'<div class="footer__contacts">{"".join(contact)}</div>' if contact else ""

    newsletter = ""
    if c.get("showNewsletter"):
        newsletter = f"""<form class="footer__newsletter" onsubmit="return false">
      <h3 class="footer__newsletter-title">{esc(c.get("newsletterTitle") or "Subscribe to updates")}</h3>
      <input type="email" placeholder="Enter your email" required>
      <button type="submit"{style_attr(("background", style.accent_color))}>Subscribe</button>
    </form>"""

    show_branding = c.get("showBranding", theme.footer.show_branding if theme.footer.show_branding is not None else True)
    branding = '<p class="footer__branding">Made with Block Canvas</p>' if show_branding else ""

    attrs = style_attr(
        ("background", c.get("backgroundColor") or theme.footer.background_color),
        ("color", c.get("textColor") or theme.footer.text_color),
        ("font-family", style.body_font),
        ("text-align", theme.footer.alignment),
    )
    return f"""<footer{class_attr("footer", f"footer--{variant}", "footer--bordered" if border else None)}{attrs}>
  <div class="footer__inner">
    {newsletter}
    <nav class="footer__links">{links_html}</nav>
    {contact_html}
    {social}
    <p class="footer__copyright">{esc(copyright_text(block, theme))}</p>
    {branding}
  </div>
</footer>"""
