"""
Bloc form — formulaires préconfigurés par `formType`.

Le rendu dépend d'une vue (`FormView`) : statut idle/submitting/submitted,
valeurs saisies et erreurs. L'état vit dans le FormWidget, jamais dans le bloc.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..core.design_system import light_tint
from ..core.schemas import Block, CamelModel, PageTheme, ResolvedStyle
from .base import class_attr, esc, style_attr

FORM_TYPES = ("contact", "newsletter", "waitlist", "survey", "feedback", "rsvp", "booking", "custom")
log = logging.getLogger(__name__)

INPUT_RADII = {"rounded": "0.75rem", "pill": "9999px", "square": "0.375rem"}


class FormField(CamelModel):
    type: str = "text"
    label: str = ""
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[str] = None  # une option par ligne
    rows: Optional[int] = None

    @property
    def name(self) -> str:
        return self.label

    def option_list(self) -> List[str]:
        return [o for o in (self.options or "").split("\n") if o]


def _f(type_: str, label: str, placeholder: Optional[str] = None, required: bool = False, **kw) -> dict:
    return {"type": type_, "label": label, "placeholder": placeholder, "required": required, **kw}


DEFAULT_TITLES = {
    "contact": "Get in Touch",
    "newsletter": "Subscribe to Our Newsletter",
    "waitlist": "Join the Waitlist",
    "survey": "Quick Survey",
    "feedback": "Share Your Feedback",
    "rsvp": "RSVP to Event",
    "booking": "Book an Appointment",
    "custom": "Contact Form",
}
DEFAULT_SUBTITLES = {
    "contact": "We'd love to hear from you. Send us a message!",
    "newsletter": "Get updates, tips, and exclusive content delivered to your inbox.",
    "waitlist": "Be the first to know when we launch. No spam, ever.",
    "survey": "Help us improve by answering a few quick questions.",
    "feedback": "Your opinion matters to us. Let us know what you think!",
    "rsvp": "Let us know if you can make it to the event.",
    "booking": "Schedule a time that works for you.",
    "custom": "",
}
DEFAULT_SUBMIT_LABELS = {
    "contact": "Send Message",
    "newsletter": "Subscribe",
    "waitlist": "Join Waitlist",
    "survey": "Submit Survey",
    "feedback": "Submit Feedback",
    "rsvp": "Confirm RSVP",
    "booking": "Book Now",
    "custom": "Submit",
}
DEFAULT_SUCCESS = {
    "contact": "Message sent successfully!",
    "newsletter": "You're subscribed!",
    "waitlist": "You're on the list!",
    "survey": "Survey submitted!",
    "feedback": "Thanks for your feedback!",
    "rsvp": "RSVP confirmed!",
    "booking": "Booking confirmed!",
    "custom": "Form submitted!",
}
DEFAULT_FIELDS: Dict[str, List[dict]] = {
    "contact": [
        _f("text", "Name", "Your full name", True),
        _f("email", "Email", "your@email.com", True),
        _f("text", "Subject", "How can we help?"),
        _f("textarea", "Message", "Your message...", True, rows=4),
    ],
    "newsletter": [_f("email", "Email Address", "your@email.com", True)],
    "waitlist": [
        _f("text", "Name", "Your name", True),
        _f("email", "Email", "your@email.com", True),
    ],
    "survey": [
        _f("rating", "How would you rate your experience?", required=True),
        _f("select", "How did you hear about us?", required=True,
           options="Social Media\nSearch Engine\nFriend/Family\nOther"),
        _f("textarea", "Any additional comments?", "Tell us more...", rows=3),
    ],
    "feedback": [
        _f("thumbs", "Was this helpful?", required=True),
        _f("textarea", "Tell us more", "What can we improve?", rows=3),
    ],
    "rsvp": [
        _f("text", "Name", "Your name", True),
        _f("email", "Email", "your@email.com", True),
        _f("radio", "Will you attend?", required=True, options="Yes, I'll be there\nNo, can't make it\nMaybe"),
        _f("select", "Number of Guests", options="1\n2\n3\n4+"),
    ],
    "booking": [
        _f("text", "Name", "Your name", True),
        _f("email", "Email", "your@email.com", True),
        _f("phone", "Phone", "+1 (555) 000-0000", True),
        _f("date", "Preferred Date", required=True),
        _f("time", "Preferred Time", required=True),
        _f("textarea", "Notes", "Any special requests?", rows=2),
    ],
    "custom": [
        _f("text", "Name", "Your name", True),
        _f("email", "Email", "your@email.com", True),
        _f("textarea", "Message", "Your message...", rows=4),
    ],
}


def form_type(block: Block) -> str:
    kind = block.content.get("formType")
    return kind if kind in FORM_TYPES else "contact"


def form_fields(block: Block) -> List[FormField]:
    """Champs personnalisés du bloc, sinon jeu par défaut du formType."""
    raw = block.content.get("fields")
    if isinstance(raw, list) and raw:
        fields = []
        for item in raw:
            try:
                fields.append(FormField.model_validate(item))
            except ValidationError:
                log.warning("Champ de formulaire ignoré (bloc %s) : %r", block.id, item)
        if fields:
            return fields
    return [FormField.model_validate(f) for f in DEFAULT_FIELDS[form_type(block)]]


@dataclass(frozen=True)
class FormView:
    status: str = "idle"  # idle | submitting | submitted
    values: Dict[str, str] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)


def _input(f: FormField, value: str, radius: str) -> str:
    name = esc(f.name)
    req = " required" if f.required else ""
    placeholder = f' placeholder="{esc(f.placeholder)}"' if f.placeholder else ""
    box = style_attr(("border-radius", radius))
    if f.type == "textarea":
        return f'<textarea name="{name}" rows="{f.rows or 4}"{placeholder}{req}{box}>{esc(value)}</textarea>'
    if f.type == "select":
        opts = "".join(
            f'<option{" selected" if o == value else ""}>{esc(o)}</option>' for o in f.option_list()
        )
        return f'<select name="{name}"{req}{box}><option value="">Select...</option>{opts}</select>'
    if f.type == "radio":
        return "".join(
            f'<label class="form-block__choice"><input type="radio" name="{name}" value="{esc(o)}"'
            f'{" checked" if o == value else ""}{req}> {esc(o)}</label>'
            for o in f.option_list()
        )
    if f.type == "rating":
        return "".join(
            f'<button type="button" class="form-block__star{" form-block__star--on" if str(value).isdigit() and int(value) >= n else ""}" '
            f'data-value="{n}">★</button>'
            for n in range(1, 6)
        )
    if f.type == "thumbs":
        return (
            f'<button type="button" class="form-block__thumb{" form-block__thumb--on" if value == "up" else ""}" data-value="up">👍</button>'
            f'<button type="button" class="form-block__thumb{" form-block__thumb--on" if value == "down" else ""}" data-value="down">👎</button>'
        )
    input_type = "tel" if f.type == "phone" else f.type
    return f'<input type="{esc(input_type)}" name="{name}" value="{esc(value)}"{placeholder}{req}{box}>'


def render_form(block: Block, style: ResolvedStyle, theme: PageTheme, view: Optional[FormView] = None) -> str:
    view = view or FormView()
    c = block.content
    kind = form_type(block)
    variant = c.get("style") or "default"
    accent = c.get("accentColor") or style.accent_color
    radius = INPUT_RADII.get(c.get("inputStyle") or "rounded", INPUT_RADII["rounded"])
    container = style_attr(
        ("background-color", None if variant == "gradient" else (c.get("backgroundColor") or "#ffffff")),
        ("font-family", style.body_font),
    )
    title_style = style_attr(("font-family", style.title_font))

    if view.status == "submitted":
        message = c.get("successMessage") or DEFAULT_SUCCESS[kind]
        return f"""<div{class_attr("form-block", f"form-block--{variant}", "form-block--submitted")}{container}>
  <div class="form-block__check"{style_attr(("background-color", light_tint(accent, 0.12)), ("color", accent))}>✓</div>
  <h3 class="form-block__title"{title_style}>{esc(message)}</h3>
  <p class="form-block__subtitle">We'll be in touch soon.</p>
  <button type="button" class="form-block__again"{style_attr(("color", accent))}>Submit another response</button>
</div>"""

    title = c.get("title") or DEFAULT_TITLES[kind]
    subtitle = c.get("subtitle") or DEFAULT_SUBTITLES[kind]
    sub_html = f'<p class="form-block__subtitle">{esc(subtitle)}</p>' if subtitle else ""

    rows = []
    for f in form_fields(block):
        error = view.errors.get(f.name)
        err_html = f'<p class="form-block__error">{esc(error)}</p>' if error else ""
        star = '<span class="form-block__required">*</span>' if f.required else ""
        rows.append(
            f'<div class="form-block__field form-block__field--{esc(f.type)}{" form-block__field--invalid" if error else ""}">'
            f"<label>{esc(f.label)}{star}</label>{_input(f, view.values.get(f.name, ''), radius)}{err_html}</div>"
        )

    busy = view.status == "submitting"
    submit_label = "Sending…" if busy else esc(c.get("submitLabel") or DEFAULT_SUBMIT_LABELS[kind])
    button = style_attr(
        ("background-color", "rgba(255,255,255,0.2)" if variant == "gradient" else accent),
        ("border-radius", radius),
    )
    return f"""<form{class_attr("form-block", f"form-block--{variant}", f"form-block--{kind}")}{container} onsubmit="return false" novalidate>
  <h3 class="form-block__title"{title_style}>{esc(title)}</h3>
  {sub_html}
  <div class="form-block__fields">{"".join(rows)}</div>
  <button type="submit" class="form-block__submit"{button}{" disabled" if busy else ""}>{submit_label}</button>
</form>"""
