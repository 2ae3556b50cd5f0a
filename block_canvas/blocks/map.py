"""Bloc map — carte Google Maps embarquée + lien d'itinéraire."""
from urllib.parse import quote_plus, urlencode

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, empty_placeholder, esc, number, style_attr

MAP_STYLES = ("classic", "card", "minimal")
MAP_TYPES = {"roadmap": "m", "satellite": "k", "hybrid": "h", "terrain": "p"}


def map_location(content: dict) -> str:
    """Coordonnées si présentes, sinon adresse."""
    lat, lng = content.get("latitude"), content.get("longitude")
    if lat not in (None, "") and lng not in (None, ""):
        return f"{lat},{lng}"
    return (content.get("address") or "").strip()


def embed_url(content: dict) -> str:
    params = {
        "q": map_location(content),
        "z": int(number(content, "zoom", 15)),
        "t": MAP_TYPES.get(content.get("mapType") or "roadmap", "m"),
        "output": "embed",
    }
    return "https://maps.google.com/maps?" + urlencode(params)


def directions_url(content: dict) -> str:
    return "https://www.google.com/maps/dir/?api=1&destination=" + quote_plus(map_location(content))


def render_map(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    location = map_location(c)
    if not location:
        return empty_placeholder("Add a location", "Enter an address to show the map")
    variant = c.get("style") if c.get("style") in MAP_STYLES else "classic"
    height = int(number(c, "height", 300))
    address = f'<p class="map-block__address">{esc(c["address"])}</p>' if c.get("address") else ""
    return f"""<div{class_attr("map-block", f"map-block--{variant}")}{style_attr(("font-family", style.body_font))}>
  <iframe src="{esc(embed_url(c))}" title="Map of {esc(location)}" loading="lazy"
    referrerpolicy="no-referrer-when-downgrade" allowfullscreen{style_attr(("height", f"{height}px"), ("border", "0"), ("width", "100%"))}></iframe>
  <div class="map-block__footer">
    {address}
    <a href="{esc(directions_url(c))}" class="map-block__directions" target="_blank" rel="noopener noreferrer"{style_attr(("color", style.accent_color))}>Get directions</a>
  </div>
</div>"""
