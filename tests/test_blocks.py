"""
Tests renderers de blocs simples — lien, bouton, titre, texte, image, spacer,
footer/social, profil, et détection de plateforme.
"""
import pytest

from block_canvas.blocks.base import IMAGE_FALLBACK, sanitize_rich_text
from block_canvas.blocks.button import build_href, render_button
from block_canvas.blocks.footer import copyright_text, render_footer, render_social
from block_canvas.blocks.heading import render_heading
from block_canvas.blocks.image import render_image
from block_canvas.blocks.layout import render_divider, render_spacer
from block_canvas.blocks.link_button import render_link_button
from block_canvas.blocks.platforms import EMAIL, SPOTIFY, X, build_profile_url, detect_link, detect_platform
from block_canvas.blocks.profile import render_profile
from block_canvas.blocks.text import render_text
from block_canvas.core.schemas import Block, PageTheme
from block_canvas.style.resolver import resolve


def _render(fn, type_, content=None, style=None, theme=None):
    theme = theme or PageTheme()
    block = Block(id="b1", type=type_, content=content or {}, style=style or {})
    return fn(block, resolve(block, theme), theme)


# ── Plateformes ─────────────────────────────────────────────────────────────

class TestPlatforms:
    def test_known_domain(self):
        assert detect_platform("https://open.spotify.com/artist/1") is SPOTIFY

    def test_www_prefix(self):
        assert detect_platform("https://www.x.com/someone") is X

    def test_suffix_is_not_a_match(self):
        assert detect_platform("https://dropbox.com/s/abc") is None

    def test_mailto(self):
        assert detect_platform("mailto:hello@example.com") is EMAIL

    def test_favicon_for_unknown_domain(self):
        link = detect_link("https://example.org/page")
        assert link.kind == "favicon"
        assert "domain=example.org" in link.url

    def test_globe_for_non_url(self):
        assert detect_link("pas une url").kind == "globe"

    @pytest.mark.parametrize("platform,value,expected", [
        ("tiktok", "@me", "https://tiktok.com/@me"),
        ("instagram", "me", "https://instagram.com/me"),
        ("instagram", "https://instagram.com/other", "https://instagram.com/other"),
        ("email", "a@b.c", "mailto:a@b.c"),
        ("nowhere", "raw", "raw"),
    ])
    def test_build_profile_url(self, platform, value, expected):
        assert build_profile_url(platform, value) == expected


# ── linkButton ──────────────────────────────────────────────────────────────

class TestLinkButton:
    def test_platform_link(self):
        html = _render(render_link_button, "linkButton", {"url": "https://open.spotify.com/x", "label": "Listen"})
        assert '<a href="https://open.spotify.com/x"' in html
        assert 'target="_blank"' in html
        assert "bc-icon--spotify" in html
        assert "Listen" in html

    def test_inert_without_destination(self):
        html = _render(render_link_button, "linkButton", {"url": "#", "label": "Soon"})
        assert "link-button--inert" in html
        assert "<a " not in html

    def test_same_tab(self):
        html = _render(render_link_button, "linkButton", {"url": "https://example.org"}, {"openInNewTab": False})
        assert 'target="_blank"' not in html
        assert "link-button__icon--favicon" in html

    def test_label_is_escaped(self):
        html = _render(render_link_button, "linkButton", {"url": "https://example.org", "label": "<b>x</b>"})
        assert "&lt;b&gt;x&lt;/b&gt;" in html

    def test_hover_vars_fall_back_to_base(self):
        html = _render(render_link_button, "linkButton", {"url": "https://example.org"})
        assert "--bc-hover-bg:#ffffff" in html
        assert "bc-hoverable" in html


# ── button ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("url,action,expected", [
    ("+33 6 12 34 56 78", "phone", "tel:+33612345678"),
    ("hello@example.com", "email", "mailto:hello@example.com"),
    ("https://example.com/f.pdf", "download", "https://example.com/f.pdf"),
    (None, "url", "#"),
])
def test_build_href(url, action, expected):
    assert build_href(url, action) == expected


def test_button_download_attribute():
    html = _render(render_button, "button", {"label": "Get it", "url": "https://example.com/f.pdf", "actionType": "download"})
    assert " download" in html
    assert "button-block--fill" in html


def test_button_alignment():
    html = _render(render_button, "button", {"label": "Go"}, {"alignment": "right"})
    assert "justify-content:flex-end" in html


# ── heading / text ──────────────────────────────────────────────────────────

def test_heading_level():
    html = _render(render_heading, "heading", {"text": "Bonjour", "level": 2})
    assert html.startswith("<h2")
    assert "heading--h2" in html
    assert html.endswith("</h2>")


def test_heading_gradient_text():
    html = _render(render_heading, "heading", {"text": "Wow", "gradient": "rainbow"})
    assert "background-clip:text" in html
    assert "color:transparent" in html


def test_heading_default_text():
    assert ">Heading</h1>" in _render(render_heading, "heading")


def test_text_is_sanitized():
    html = _render(render_text, "text", {"html": '<p onclick="x()">Hi</p><script>alert(1)</script>'})
    assert "<script" not in html
    assert "onclick" not in html
    assert "<p>Hi</p>" in html


def test_sanitize_javascript_urls():
    assert sanitize_rich_text('<a href="javascript:alert(1)">x</a>') == '<a href="#">x</a>'


def test_text_quote_style():
    html = _render(render_text, "text", {"html": "<p>q</p>", "textStyle": "quote", "authorName": "ada lovelace"})
    assert "font-style:italic" in html
    assert "text-block__author" in html


# ── image / layout ──────────────────────────────────────────────────────────

def test_image_without_url():
    html = _render(render_image, "image")
    assert "bc-placeholder--empty" in html
    assert "No image URL set" in html


def test_image_fallback_on_error():
    html = _render(render_image, "image", {"url": "https://cdn.example.com/a.jpg", "caption": "Légende"})
    assert 'src="https://cdn.example.com/a.jpg"' in html
    assert "onerror=" in html
    assert "image-block__caption" in html


def test_image_fallback_constant_is_inline_svg():
    assert IMAGE_FALLBACK.startswith("data:image/svg+xml")


def test_spacer_heights():
    html = _render(render_spacer, "spacer", {"height": 64, "mobileHeightEnabled": True, "mobileHeight": 12})
    assert "height:64px" in html
    assert "--bc-spacer-mobile:12px" in html


def test_spacer_hidden_on_mobile():
    assert "spacer--hide-mobile" in _render(render_spacer, "spacer", {"hideOnMobile": True})


def test_divider_double():
    html = _render(render_divider, "divider", {"style": "double", "thickness": 3})
    assert html.count("<hr") == 2


# ── footer / social / profile ───────────────────────────────────────────────

def test_copyright_generated():
    block = Block(id="f", type="footer")
    assert copyright_text(block, PageTheme(), year=2024) == "© 2024 Your Brand. All rights reserved."


def test_copyright_from_theme():
    theme = PageTheme.model_validate({"branding": {"copyrightText": "© ACME"}})
    assert copyright_text(Block(id="f", type="footer"), theme) == "© ACME"


def test_footer_links_and_contacts():
    html = _render(render_footer, "footer", {
        "links": [{"label": "About", "url": "/about"}],
        "email": "hi@example.com",
    })
    assert 'href="/about"' in html
    assert "mailto:hi@example.com" in html
    assert "footer--bordered" in html


def test_social_empty_placeholder():
    assert "No social profiles yet" in _render(render_social, "social")


def test_social_new_format_ordered():
    html = _render(render_social, "social", {"socialLinks": [
        {"platformId": "github", "value": "octo", "order": 2},
        {"platformId": "instagram", "value": "me", "order": 1},
    ]})
    assert html.index("instagram.com/me") < html.index("github.com/octo")


def test_social_legacy_twitter_is_x():
    html = _render(render_social, "social", {"links": {"twitter": "someone"}})
    assert "https://x.com/someone" in html
    assert "bc-icon--x" in html


def test_profile_initials():
    html = _render(render_profile, "profile", {"displayName": "ada lovelace"})
    assert ">AL</div>" in html
    assert "profile__avatar--initials" in html
