"""
Blocs de section marketing : hero, features, stats, testimonial, faq, pricing.

Tous suivent le même gabarit : titre optionnel + liste d'items du contenu,
liste vide → placeholder d'invitation.
"""
from ..core.design_system import light_tint
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import (
    class_attr, empty_placeholder, esc, img, is_inert_url, items, number, style_attr,
    surface_pairs, text,
)
from .commerce import format_price


def _section_title(c: dict, style: ResolvedStyle, default: str = "") -> str:
    title = c.get("title") or default
    if not title:
        return ""
    return (
        f'<h3 class="section__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>'
        f"{esc(title)}</h3>"
    )


def _str_list(value) -> list:
    return [v for v in value if isinstance(v, str)] if isinstance(value, list) else []


def _columns(c: dict, default: int = 3) -> int:
    columns = int(number(c, "columns", default))
    return columns if columns in (1, 2, 3, 4) else default


# ── Hero ─────────────────────────────────────────────────────────────────────

def render_hero(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    bg_image = c.get("backgroundImage")
    overlay = ""
    if bg_image:
        overlay = f'<div class="hero__overlay"{style_attr(("opacity", number(c, "overlayOpacity", 0.4)))}></div>'
    subtitle = f'<p class="hero__subtitle">{esc(c["subtitle"])}</p>' if c.get("subtitle") else ""
    cta = ""
    if c.get("ctaLabel"):
        url = "#" if is_inert_url(c.get("ctaUrl")) else c["ctaUrl"]
        cta = (
            f'<a href="{esc(url)}" class="hero__cta bc-hoverable"{style_attr(*surface_pairs(style))}>'
            f'{esc(c["ctaLabel"])}</a>'
        )
    attrs = style_attr(
        ("background-image", f"url('{bg_image}')" if bg_image else None),
        ("background", None if bg_image else style.accent_color),
        ("min-height", f"{int(number(c, 'height', 360))}px"),
        ("text-align", c.get("alignment") or "center"),
    )
    color = "#ffffff" if bg_image else style.text_color
    return f"""<section{class_attr("hero", "hero--image" if bg_image else None)}{attrs}>
  {overlay}
  <div class="hero__content"{style_attr(("color", color))}>
    <h1 class="hero__title"{style_attr(("font-family", style.title_font))}>{text(c, "title", "Welcome")}</h1>
    {subtitle}
    {cta}
  </div>
</section>"""


# ── Features ─────────────────────────────────────────────────────────────────

def render_features(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    features = items(c, "features")
    if not features:
        return empty_placeholder("Features", "Add features to highlight what you offer")
    cards = "".join(
        f"""<div class="features__card">
      <span class="features__icon"{style_attr(("background", light_tint(style.accent_color, 0.12)), ("color", style.accent_color))}>{esc(f.get("icon") or "★")}</span>
      <h4 class="features__name"{style_attr(("color", style.title_color))}>{esc(f.get("title") or "")}</h4>
      <p class="features__desc"{style_attr(("color", style.body_color))}>{esc(f.get("description") or "")}</p>
    </div>"""
        for f in features
    )
    return f"""<section class="features">
  {_section_title(c, style)}
  <div class="features__grid"{style_attr(("--bc-columns", _columns(c)))}>{cards}</div>
</section>"""


# ── Stats ────────────────────────────────────────────────────────────────────

def render_stats(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    stats = items(c, "stats")
    if not stats:
        return empty_placeholder("Stats", "Add numbers worth bragging about")
    cells = "".join(
        f'<div class="stats__cell"><span class="stats__value"{style_attr(("color", style.accent_color), ("font-family", style.title_font))}>'
        f'{esc(s.get("prefix") or "")}{esc(s.get("value") if s.get("value") is not None else "0")}{esc(s.get("suffix") or "")}</span>'
        f'<span class="stats__label"{style_attr(("color", style.body_color))}>{esc(s.get("label") or "")}</span></div>'
        for s in stats
    )
    return f"""<section class="stats">
  {_section_title(c, style)}
  <div class="stats__grid"{style_attr(("--bc-columns", min(len(stats), 4)))}>{cells}</div>
</section>"""


# ── Testimonial ──────────────────────────────────────────────────────────────

def _stars(rating) -> str:
    try:
        count = max(0, min(5, int(rating)))
    except (TypeError, ValueError):
        return ""
    return f'<span class="testimonial__stars" aria-label="{count} out of 5">{"★" * count}{"☆" * (5 - count)}</span>'


def render_testimonial(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    testimonials = items(c, "testimonials")
    if not testimonials:
        return empty_placeholder("Testimonials", "Add quotes from happy customers")
    layout = c.get("layout") if c.get("layout") in ("grid", "list", "single") else "grid"
    if layout == "single":
        testimonials = testimonials[:1]

    cards = []
    for t in testimonials:
        author = t.get("name") or t.get("author") or "Anonymous"
        avatar = img(t["avatar"], alt=author, css_class="testimonial__avatar") if t.get("avatar") else ""
        role = f'<span class="testimonial__role">{esc(t["role"])}</span>' if t.get("role") else ""
        cards.append(f"""<figure class="testimonial__card">
      {_stars(t.get("rating")) if t.get("rating") is not None else ""}
      <blockquote class="testimonial__quote"{style_attr(("color", style.body_color))}>“{esc(t.get("quote") or t.get("text") or "")}”</blockquote>
      <figcaption class="testimonial__author">{avatar}<strong>{esc(author)}</strong>{role}</figcaption>
    </figure>""")
    return f"""<section{class_attr("testimonial", f"testimonial--{layout}")}>
  {_section_title(c, style)}
  <div class="testimonial__items">{"".join(cards)}</div>
</section>"""


# ── FAQ ──────────────────────────────────────────────────────────────────────

def render_faq(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    entries = [i for i in items(c, "items") if i.get("question")]
    if not entries:
        return empty_placeholder("FAQ", "Add questions and answers")
    open_first = c.get("openFirst", False)
    rows = "".join(
        f'<details class="faq__item"{" open" if open_first and n == 0 else ""}>'
        f'<summary class="faq__question"{style_attr(("color", style.title_color))}>{esc(i["question"])}</summary>'
        f'<div class="faq__answer"{style_attr(("color", style.body_color))}>{esc(i.get("answer") or "")}</div></details>'
        for n, i in enumerate(entries)
    )
    return f"""<section class="faq">
  {_section_title(c, style, "Frequently asked questions")}
  <div class="faq__items">{rows}</div>
</section>"""


# ── Pricing ──────────────────────────────────────────────────────────────────

def render_pricing(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    plans = items(c, "plans")
    if not plans:
        return empty_placeholder("Pricing", "Add plans to show your prices")
    currency = c.get("currency") or "USD"
    cards = []
    for plan in plans:
        highlighted = bool(plan.get("highlighted") or plan.get("popular"))
        period = f'<span class="pricing__period">/{esc(plan["period"])}</span>' if plan.get("period") else ""
        features = "".join(f"<li>{esc(f)}</li>" for f in _str_list(plan.get("features")))
        badge = '<span class="pricing__badge">Most popular</span>' if highlighted else ""
        url = "#" if is_inert_url(plan.get("url")) else plan["url"]
        cards.append(f"""<div{class_attr("pricing__plan", "pricing__plan--highlighted" if highlighted else None)}{style_attr(("border-color", style.accent_color if highlighted else None))}>
      {badge}
      <h4 class="pricing__name"{style_attr(("color", style.title_color))}>{esc(plan.get("name") or "Plan")}</h4>
      <p class="pricing__price"><strong>{esc(format_price(plan.get("price"), currency))}</strong>{period}</p>
      <ul class="pricing__features">{features}</ul>
      <a href="{esc(url)}" class="pricing__cta bc-hoverable"{style_attr(*surface_pairs(style))}>{esc(plan.get("ctaLabel") or "Get started")}</a>
    </div>""")
    return f"""<section class="pricing">
  {_section_title(c, style)}
  <div class="pricing__plans"{style_attr(("--bc-columns", min(len(plans), 3)))}>{"".join(cards)}</div>
</section>"""
