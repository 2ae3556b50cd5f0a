"""
Bloc schedule — prise de rendez-vous (services + créneaux).

Rendu vitrine : un lien Calendly remplace la grille de créneaux quand il est
renseigné. La réservation elle-même reste hors du moteur de rendu.
"""
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, esc, is_inert_url, items, style_attr, text
from .commerce import format_price

DEFAULT_SERVICES = [
    {"id": "1", "name": "30-Minute Consultation", "duration": 30, "price": 0, "description": "Quick intro call"},
    {"id": "2", "name": "1-Hour Strategy Session", "duration": 60, "price": 99, "description": "Deep dive into your needs"},
    {"id": "3", "name": "In-Person Meeting", "duration": 60, "price": 149, "description": "Face-to-face consultation"},
]
DEFAULT_SLOTS = [
    {"time": t, "available": t not in ("09:30", "11:00", "15:00")}
    for t in ("09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
              "14:00", "14:30", "15:00", "15:30", "16:00", "16:30")
]


def schedule_services(content: dict) -> list:
    return items(content, "services") or DEFAULT_SERVICES


def schedule_slots(content: dict) -> list:
    slots = items(content, "timeSlots") or items(content, "slots")
    return [s for s in slots if s.get("time")] or DEFAULT_SLOTS


def render_schedule(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    currency = c.get("currency") or "USD"
    subtitle = text(c, "subtitle", "Select a time that works for you")

    if not is_inert_url(c.get("calendlyUrl")):
        body = (
            f'<iframe class="schedule__embed" src="{esc(c["calendlyUrl"])}" title="Booking calendar" '
            f'loading="lazy" frameborder="0"></iframe>'
        )
    else:
        services = "".join(
            f'<div class="schedule__service" data-service="{esc(s.get("id") or "")}">'
            f'<strong>{esc(s.get("name") or "Service")}</strong>'
            f'<span class="schedule__duration">{esc(s.get("duration") or "")} min</span>'
            f'<span class="schedule__price">{"Free" if not s.get("price") else esc(format_price(s["price"], currency))}</span>'
            f"</div>"
            for s in schedule_services(c)
        )
        slots = "".join(
            f'<button type="button"{class_attr("schedule__slot", None if s.get("available", True) else "schedule__slot--taken")}'
            f'{"" if s.get("available", True) else " disabled"}>{esc(s["time"])}</button>'
            for s in schedule_slots(c)
        )
        timezone = f'<p class="schedule__tz">Times shown in {esc(c["timezone"])}</p>' if c.get("timezone") else ""
        body = f"""<div class="schedule__services">{services}</div>
  <div class="schedule__slots"{style_attr(("--bc-accent", style.accent_color))}>{slots}</div>
  {timezone}"""

    return f"""<section class="schedule"{style_attr(("font-family", style.body_font))}>
  <h3 class="schedule__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>{text(c, "title", "Book an Appointment")}</h3>
  <p class="schedule__subtitle"{style_attr(("color", style.body_color))}>{subtitle}</p>
  {body}
</section>"""
