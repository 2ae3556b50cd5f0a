"""
Contenu par défaut des blocs créés depuis la palette.
Chaque appel retourne une copie profonde : deux blocs ne partagent jamais
les mêmes listes/dicts.
"""
import copy
from typing import Any, Dict

from .errors import UnknownBlockTypeError
from .schemas import KNOWN_BLOCK_TYPES

DEFAULT_CONTENT: Dict[str, Dict[str, Any]] = {
    "profile": {
        "displayName": "Your Name",
        "bio": "Tell the world about yourself",
        "avatar": "",
        "location": "",
    },
    "linkButton": {"label": "My Link", "url": "https://", "description": ""},
    "header": {"title": "My Site", "links": []},
    "footer": {"text": "", "links": [], "showSocial": False},
    "heading": {"text": "Heading", "level": 1},
    "text": {"html": "<p>Your text here...</p>"},
    "button": {"label": "Click me", "url": "", "actionType": "url", "useThemeColors": True},
    "image": {"url": "", "alt": "", "caption": ""},
    "spacer": {"height": 40, "mobileHeight": 20},
    "divider": {"style": "solid", "thickness": 2, "width": "100%", "color": "#e5e7eb"},
    "video": {"url": "", "aspectRatio": "16:9"},
    "gallery": {"images": [], "layout": "grid", "columns": 3, "enableLightbox": True},
    "form": {"formType": "contact"},
    "countdown": {"title": "Launching soon", "targetDate": "", "expiredMessage": "The wait is over!"},
    "calendar": {"title": "Upcoming events", "events": []},
    "events": {"title": "Upcoming events", "events": []},
    "testimonial": {"title": "What people say", "testimonials": [], "layout": "grid"},
    "faq": {"title": "Frequently asked questions", "items": []},
    "pricing": {"title": "Pricing", "plans": []},
    "features": {"title": "Features", "features": [], "columns": 3},
    "stats": {"title": "", "stats": []},
    "map": {"address": "", "zoom": 14, "height": 300},
    "hero": {"title": "Welcome", "subtitle": "", "ctaLabel": "", "ctaUrl": "", "backgroundImage": ""},
    "payment": {"title": "Support my work", "amounts": [5, 10, 25], "currency": "USD", "allowCustom": True},
    "product": {"name": "Product", "price": 0, "currency": "USD", "image": "", "description": ""},
    "shop": {"title": "Shop", "products": [], "currency": "USD"},
    "real-estate": {"title": "Listings", "properties": []},
    "menu": {"title": "Menu", "sections": []},
    "artist": {"name": "Artist", "releases": [], "streamingLinks": []},
    "deals": {"title": "Deals", "deals": []},
    "schedule": {"title": "Book a time", "slots": [], "timezone": "UTC"},
    "social": {"links": [], "style": "icons"},
}


def default_content(block_type: str) -> Dict[str, Any]:
    """Contenu initial d'un nouveau bloc ; lève UnknownBlockTypeError hors énumération."""
    if block_type not in KNOWN_BLOCK_TYPES:
        raise UnknownBlockTypeError(block_type)
    return copy.deepcopy(DEFAULT_CONTENT.get(block_type, {}))
