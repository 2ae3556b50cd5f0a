"""
Tests blocs de section — marketing, commerce, agenda, carte, rendez-vous,
blocs métier.
"""
import datetime as dt

import pytest

from block_canvas.blocks.commerce import format_price, render_payment, render_product, render_shop
from block_canvas.blocks.events import render_events, sorted_events
from block_canvas.blocks.map import directions_url, embed_url, map_location, render_map
from block_canvas.blocks.marketing import (
    render_faq, render_features, render_hero, render_pricing, render_stats, render_testimonial,
)
from block_canvas.blocks.schedule import DEFAULT_SLOTS, render_schedule
from block_canvas.blocks.verticals import active_deals, render_artist, render_deals, render_menu, render_real_estate
from block_canvas.core.schemas import Block, PageTheme
from block_canvas.style.resolver import resolve


def _render(fn, type_, content=None):
    theme = PageTheme()
    block = Block(id="s1", type=type_, content=content or {})
    return fn(block, resolve(block, theme), theme)


# ── Prix ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("amount,currency,expected", [
    (12, "USD", "$12.00"),
    (1234.5, "EUR", "€1,234.50"),
    (1500, "JPY", "¥1,500"),
    (12, "CHF", "12.00 CHF"),
    (-5, "GBP", "-£5.00"),
    (None, "USD", "$0.00"),
    ("9.9", "usd", "$9.90"),
    ("free", "USD", "free"),
])
def test_format_price(amount, currency, expected):
    assert format_price(amount, currency) == expected


# ── Marketing ───────────────────────────────────────────────────────────────

class TestMarketing:
    def test_hero_with_image_and_cta(self):
        html = _render(render_hero, "hero", {
            "title": "Bienvenue", "backgroundImage": "/img/bg.jpg", "ctaLabel": "Go", "ctaUrl": "#",
        })
        assert "hero--image" in html
        assert "hero__overlay" in html
        assert 'href="#"' in html
        assert "Bienvenue" in html

    def test_features_empty(self):
        assert "bc-placeholder--empty" in _render(render_features, "features", {"features": []})

    def test_features_columns(self):
        html = _render(render_features, "features", {"columns": 2, "features": [{"title": "Rapide"}]})
        assert "--bc-columns:2" in html
        assert "Rapide" in html

    def test_stats_prefix_suffix(self):
        html = _render(render_stats, "stats", {"stats": [{"value": 98, "prefix": "+", "suffix": "%", "label": "Clients"}]})
        assert "+98%" in html

    def test_testimonial_single_layout(self):
        html = _render(render_testimonial, "testimonial", {"layout": "single", "testimonials": [
            {"quote": "Top", "name": "Ada", "rating": 4},
            {"quote": "Bof", "name": "Bob"},
        ]})
        assert "Top" in html
        assert "Bof" not in html
        assert "★★★★☆" in html

    def test_testimonial_anonymous(self):
        assert "Anonymous" in _render(render_testimonial, "testimonial", {"testimonials": [{"quote": "x"}]})

    def test_faq_open_first(self):
        html = _render(render_faq, "faq", {"openFirst": True, "items": [
            {"question": "Q1", "answer": "A1"}, {"question": "Q2", "answer": "A2"}, {"answer": "orphan"},
        ]})
        assert html.count("<details") == 2
        assert html.count(" open>") == 1
        assert "Frequently asked questions" in html

    def test_pricing_highlighted(self):
        html = _render(render_pricing, "pricing", {"currency": "EUR", "plans": [
            {"name": "Pro", "price": 19, "period": "mo", "popular": True, "features": ["A", 3, "B"]},
        ]})
        assert "Most popular" in html
        assert "€19.00" in html
        assert "<li>A</li><li>B</li>" in html


# ── Commerce ────────────────────────────────────────────────────────────────

class TestCommerce:
    def test_payment_filters_amounts(self):
        html = _render(render_payment, "payment", {"amounts": [5, 0, "x", True, 20], "currency": "USD"})
        assert html.count('class="payment__amount"') == 2
        assert "payment__custom" in html

    def test_product_sold_out(self):
        html = _render(render_product, "product", {"name": "Tasse", "price": 12, "inStock": False, "compareAtPrice": 15})
        assert "Sold out" in html
        assert "<s class=\"product__compare\">$15.00</s>" in html
        assert "commerce__buy" not in html

    def test_shop_empty(self):
        assert "Your shop is empty" in _render(render_shop, "shop", {"products": []})

    def test_shop_per_product_currency(self):
        html = _render(render_shop, "shop", {"currency": "USD", "products": [{"name": "A", "price": 3, "currency": "EUR"}]})
        assert "€3.00" in html


# ── Agenda ──────────────────────────────────────────────────────────────────

EVENTS = [
    {"title": "Later", "date": "2025-03-10"},
    {"title": "Past", "date": "2024-12-01"},
    {"title": "Undated"},
    {"title": "Soon", "date": "2025-01-15"},
]


def test_sorted_events_hides_past():
    block = Block(id="e", type="events", content={"events": EVENTS})
    titles = [e["title"] for e in sorted_events(block, today=dt.date(2025, 1, 1))]
    assert titles == ["Soon", "Later", "Undated"]


def test_sorted_events_show_past():
    block = Block(id="e", type="events", content={"events": EVENTS, "showPast": True})
    titles = [e["title"] for e in sorted_events(block, today=dt.date(2025, 1, 1))]
    assert titles[0] == "Past"


def test_events_empty():
    assert "No upcoming events" in _render(render_events, "events")


def test_events_badge_tba():
    assert "TBA" in _render(render_events, "events", {"events": [{"title": "Someday"}]})


# ── Carte ───────────────────────────────────────────────────────────────────

def test_map_location_prefers_coordinates():
    assert map_location({"address": "Paris", "latitude": 48.85, "longitude": 2.35}) == "48.85,2.35"
    assert map_location({"address": " Paris "}) == "Paris"


def test_map_urls():
    content = {"address": "10 rue de Rivoli, Paris", "zoom": 12, "mapType": "satellite"}
    assert embed_url(content) == "https://maps.google.com/maps?q=10+rue+de+Rivoli%2C+Paris&z=12&t=k&output=embed"
    assert directions_url(content).endswith("destination=10+rue+de+Rivoli%2C+Paris")


def test_map_render():
    assert "Add a location" in _render(render_map, "map")
    html = _render(render_map, "map", {"address": "Lyon", "height": 420})
    assert "height:420px" in html
    assert "Get directions" in html


# ── Rendez-vous ─────────────────────────────────────────────────────────────

def test_schedule_defaults():
    html = _render(render_schedule, "schedule")
    assert html.count("schedule__slot--taken") == 3
    assert html.count("<button") == len(DEFAULT_SLOTS)
    assert "Free" in html


def test_schedule_calendly():
    html = _render(render_schedule, "schedule", {"calendlyUrl": "https://calendly.com/ada"})
    assert 'src="https://calendly.com/ada"' in html
    assert "schedule__slot" not in html


# ── Blocs métier ────────────────────────────────────────────────────────────

def test_real_estate():
    assert "No listings yet" in _render(render_real_estate, "real-estate")
    html = _render(render_real_estate, "real-estate", {"properties": [
        {"address": "1 Main St", "price": 450000, "beds": 3, "status": "for-rent"},
    ]})
    assert "$450,000.00" in html
    assert "3 bd" in html
    assert "For Rent" in html


def test_menu_skips_empty_sections():
    assert "Your menu is empty" in _render(render_menu, "menu", {"sections": [{"name": "Vide", "items": []}]})
    html = _render(render_menu, "menu", {"currency": "EUR", "sections": [
        {"name": "Entrées", "items": [{"name": "Soupe", "price": 7, "tags": ["vegan"]}]},
    ]})
    assert "Soupe" in html
    assert "€7.00" in html
    assert "vegan" in html


def test_artist_streaming_links():
    html = _render(render_artist, "artist", {"name": "Nova", "streamingLinks": [
        {"platform": "spotify", "url": "https://open.spotify.com/artist/1"},
        {"platform": "youtube", "url": "#"},
    ]})
    assert "background:#1DB954" in html
    assert html.count('class="artist__stream"') == 1


def test_active_deals():
    block = Block(id="d", type="deals", content={"deals": [
        {"title": "Old", "expiresAt": "2024-12-31"},
        {"title": "Open"},
        {"title": "New", "expiresAt": "2025-02-01T00:00:00Z"},
    ]})
    assert [d["title"] for d in active_deals(block, dt.date(2025, 1, 1))] == ["Open", "New"]


def test_deals_render():
    assert "No active deals" in _render(render_deals, "deals")
    html = _render(render_deals, "deals", {"deals": [{"title": "Promo", "code": "SAVE10", "discount": "-10%"}]})
    assert "SAVE10" in html
