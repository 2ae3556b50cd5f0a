"""
Bloc countdown — temps restant jusqu'à `content.targetDate`.

Le calcul est pur (`time_remaining(target, now)`) ; l'horloge et le
rafraîchissement appartiennent au CountdownWidget.
"""
import datetime as dt
from dataclasses import dataclass
from typing import Optional

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, esc, style_attr, text

UNITS = (("days", "Days"), ("hours", "Hours"), ("minutes", "Minutes"), ("seconds", "Seconds"))


@dataclass(frozen=True)
class CountdownView:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    expired: bool = False
    configured: bool = True


def parse_target(value) -> Optional[dt.datetime]:
    """ISO 8601 (avec ou sans 'Z') → datetime UTC ; invalide → None."""
    if isinstance(value, dt.datetime):
        target = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            target = dt.datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if target.tzinfo is None:
        target = target.replace(tzinfo=dt.timezone.utc)
    return target


def time_remaining(target: Optional[dt.datetime], now: dt.datetime) -> CountdownView:
    if target is None:
        return CountdownView(configured=False)
    if now.tzinfo is None:
        now = now.replace(tzinfo=dt.timezone.utc)
    total = int((target - now).total_seconds())
    if total <= 0:
        return CountdownView(expired=True)
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return CountdownView(days=days, hours=hours, minutes=minutes, seconds=seconds)


def countdown_view(block: Block, now: Optional[dt.datetime] = None) -> CountdownView:
    now = now or dt.datetime.now(dt.timezone.utc)
    return time_remaining(parse_target(block.content.get("targetDate")), now)


def render_countdown(block: Block, style: ResolvedStyle, theme: PageTheme,
                     view: Optional[CountdownView] = None) -> str:
    c = block.content
    view = view or countdown_view(block)
    title = text(c, "title", "Launching soon")
    title_html = (
        f'<h3 class="countdown__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>'
        f"{title}</h3>"
    )

    if not view.configured:
        body = '<p class="countdown__hint">Set a target date to start the countdown</p>'
    elif view.expired:
        body = f'<p class="countdown__expired">{text(c, "expiredMessage", "The wait is over!")}</p>'
    else:
        cell = style_attr(("background", style.accent_color), ("color", style.text_color),
                          ("border-radius", f"{style.border_radius}px"))
        body = '<div class="countdown__units">' + "".join(
            f'<div class="countdown__unit"{cell}><span class="countdown__value">{getattr(view, key):02d}</span>'
            f'<span class="countdown__label">{label}</span></div>'
            for key, label in UNITS
        ) + "</div>"

    return f"""<div{class_attr("countdown", "countdown--expired" if view.expired else None)} data-target="{esc(c.get("targetDate") or "")}"{style_attr(("text-align", style.alignment))}>
  {title_html}
  {body}
</div>"""
