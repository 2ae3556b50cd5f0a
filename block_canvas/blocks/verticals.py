"""Blocs métier : real-estate, menu, artist, deals."""
import datetime as dt

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, empty_placeholder, esc, img, is_inert_url, items, style_attr, text
from .commerce import format_price
from .platforms import SOCIAL_PLATFORMS, DEFAULT_SOCIAL_COLOR


def _title(c: dict, style: ResolvedStyle, default: str) -> str:
    return (
        f'<h3 class="section__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>'
        f"{text(c, 'title', default)}</h3>"
    )


# ── Real estate ──────────────────────────────────────────────────────────────

def render_real_estate(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    properties = items(c, "properties")
    if not properties:
        return empty_placeholder("No listings yet", "Add properties to showcase them")
    currency = c.get("currency") or "USD"
    cards = []
    for p in properties:
        facts = " · ".join(
            f"{esc(p[key])} {label}" for key, label in (("beds", "bd"), ("baths", "ba"), ("sqft", "sqft")) if p.get(key)
        )
        status = p.get("status") or "for-sale"
        cards.append(f"""<article class="listing">
    {img(p.get("image"), alt=p.get("address") or "Property", css_class="listing__image")}
    <span class="listing__status listing__status--{esc(status)}">{esc(status.replace("-", " ").title())}</span>
    <div class="listing__body">
      <p class="listing__price"{style_attr(("color", style.accent_color))}>{esc(format_price(p.get("price"), currency))}</p>
      <p class="listing__address">{esc(p.get("address") or "")}</p>
      <p class="listing__facts">{facts}</p>
    </div>
  </article>""")
    return f"""<section class="real-estate">
  {_title(c, style, "Listings")}
  <div class="real-estate__grid">{"".join(cards)}</div>
</section>"""


# ── Menu ─────────────────────────────────────────────────────────────────────

def render_menu(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    sections = [s for s in items(c, "sections") if items(s, "items")]
    if not sections:
        return empty_placeholder("Your menu is empty", "Add sections and dishes")
    currency = c.get("currency") or "USD"
    html_sections = []
    for section in sections:
        dishes = "".join(
            f'<li class="menu__dish"><div class="menu__dish-head"><span class="menu__dish-name">{esc(d.get("name") or "")}</span>'
            f'<span class="menu__dots"></span><span class="menu__dish-price">{esc(format_price(d.get("price"), currency))}</span></div>'
            + (f'<p class="menu__dish-desc">{esc(d["description"])}</p>' if d.get("description") else "")
            + "".join(f'<span class="menu__tag">{esc(t)}</span>' for t in d.get("tags") or [] if isinstance(t, str))
            + "</li>"
            for d in items(section, "items")
        )
        html_sections.append(
            f'<div class="menu__section"><h4 class="menu__section-title"{style_attr(("color", style.accent_color))}>'
            f'{esc(section.get("name") or section.get("title") or "")}</h4><ul class="menu__dishes">{dishes}</ul></div>'
        )
    return f"""<section class="menu"{style_attr(("font-family", style.body_font))}>
  {_title(c, style, "Menu")}
  {"".join(html_sections)}
</section>"""


# ── Artist ───────────────────────────────────────────────────────────────────

def render_artist(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    name = c.get("name") or "Artist"
    photo = img(c["image"], alt=name, css_class="artist__photo", lazy=False) if c.get("image") else ""
    releases = "".join(
        f'<li class="artist__release">{img(r.get("cover"), alt=r.get("title") or "", css_class="artist__cover")}'
        f'<strong>{esc(r.get("title") or "Untitled")}</strong>'
        f'<span class="artist__year">{esc(r.get("year") or "")}</span></li>'
        for r in items(c, "releases")
    )
    links = []
    for link in items(c, "streamingLinks"):
        if is_inert_url(link.get("url")):
            continue
        platform = SOCIAL_PLATFORMS.get(link.get("platform") or "")
        color = platform.brand_color if platform else DEFAULT_SOCIAL_COLOR
        label = link.get("label") or (platform.name if platform else "Listen")
        links.append(
            f'<a href="{esc(link["url"])}" class="artist__stream" target="_blank" rel="noopener noreferrer"'
            f'{style_attr(("background", color))}>{esc(label)}</a>'
        )
    bio = f'<p class="artist__bio">{esc(c["bio"])}</p>' if c.get("bio") else ""
    return f"""<section class="artist"{style_attr(("text-align", style.alignment))}>
  {photo}
  <h2 class="artist__name"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>{esc(name)}</h2>
  {bio}
  <div class="artist__streams">{"".join(links)}</div>
  <ul class="artist__releases">{releases}</ul>
</section>"""


# ── Deals ────────────────────────────────────────────────────────────────────

def active_deals(block: Block, today: dt.date) -> list:
    """Offres non expirées (`expiresAt` ISO, absent = sans limite)."""
    kept = []
    for deal in items(block.content, "deals"):
        raw = deal.get("expiresAt")
        try:
            expires = dt.date.fromisoformat(raw[:10]) if isinstance(raw, str) and raw else None
        except ValueError:
            expires = None
        if expires is None or expires >= today:
            kept.append(deal)
    return kept


def render_deals(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    deals = active_deals(block, dt.date.today())
    if not deals:
        return empty_placeholder("No active deals", "Add a discount or promo code")
    cards = []
    for d in deals:
        code = f'<code class="deals__code">{esc(d["code"])}</code>' if d.get("code") else ""
        expiry = f'<span class="deals__expiry">Ends {esc(d["expiresAt"][:10])}</span>' if isinstance(d.get("expiresAt"), str) and d["expiresAt"] else ""
        cta = ""
        if not is_inert_url(d.get("url")):
            cta = f'<a href="{esc(d["url"])}" class="deals__cta" target="_blank" rel="noopener noreferrer">Shop now</a>'
        cards.append(f"""<div{class_attr("deals__card")}{style_attr(("border-color", style.accent_color))}>
    <span class="deals__discount"{style_attr(("background", style.accent_color), ("color", style.text_color))}>{esc(d.get("discount") or "")}</span>
    <h4 class="deals__name">{esc(d.get("title") or "Deal")}</h4>
    {code}
    {expiry}
    {cta}
  </div>""")
    return f"""<section class="deals">
  {_title(c, style, "Deals")}
  <div class="deals__grid">{"".join(cards)}</div>
</section>"""
