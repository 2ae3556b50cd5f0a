"""Blocs calendar / events — liste d'événements datés."""
import datetime as dt
from typing import Optional

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import empty_placeholder, esc, is_inert_url, items, style_attr, text


def _event_date(event: dict):
    raw = event.get("date")
    if not isinstance(raw, str):
        return None
    try:
        return dt.date.fromisoformat(raw[:10])
    except ValueError:
        return None


def sorted_events(block: Block, today: Optional[dt.date] = None) -> list:
    """Événements triés par date ; les passés sont masqués sauf `showPast`."""
    today = today or dt.date.today()
    events = items(block.content, "events")
    if not block.content.get("showPast"):
        events = [e for e in events if (_event_date(e) or today) >= today]
    return sorted(events, key=lambda e: _event_date(e) or dt.date.max)


def _badge(event: dict, accent: str) -> str:
    day = _event_date(event)
    if day is None:
        return f'<div class="events__badge"{style_attr(("background", accent))}>TBA</div>'
    return (
        f'<div class="events__badge"{style_attr(("background", accent))}>'
        f'<span class="events__month">{day.strftime("%b").upper()}</span>'
        f'<span class="events__day">{day.day}</span></div>'
    )


def render_events(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    events = sorted_events(block)
    if not events:
        return empty_placeholder("No upcoming events", "Add events in the inspector")

    rows = []
    for event in events:
        meta = " · ".join(esc(event[k]) for k in ("time", "location") if event.get(k))
        desc = f'<p class="events__desc">{esc(event["description"])}</p>' if event.get("description") else ""
        cta = ""
        if not is_inert_url(event.get("url")):
            cta = (
                f'<a href="{esc(event["url"])}" class="events__cta" target="_blank" rel="noopener noreferrer"'
                f'{style_attr(("color", style.accent_color))}>{esc(event.get("ctaLabel") or "Details")}</a>'
            )
        rows.append(f"""<li class="events__item">
      {_badge(event, style.accent_color)}
      <div class="events__body">
        <h4 class="events__name"{style_attr(("color", style.title_color))}>{esc(event.get("title") or "Untitled event")}</h4>
        <p class="events__meta">{meta}</p>
        {desc}
      </div>
      {cta}
    </li>""")

    return f"""<section class="events"{style_attr(("font-family", style.body_font))}>
  <h3 class="events__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>{text(c, "title", "Upcoming events")}</h3>
  <ul class="events__list">
    {"".join(rows)}
  </ul>
</section>"""


render_calendar = render_events
