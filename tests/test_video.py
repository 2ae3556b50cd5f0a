"""
Tests reconnaissance d'URL vidéo → embed.
"""
import pytest

from block_canvas.blocks.video import EmbedOptions, aspect_padding, parse_video_url, render_video
from block_canvas.core.schemas import Block, PageTheme
from block_canvas.style.resolver import resolve


@pytest.mark.parametrize("url,provider,video_id,embed", [
    ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "youtube", "dQw4w9WgXcQ",
     "https://www.youtube.com/embed/dQw4w9WgXcQ"),
    ("https://youtu.be/abc123?t=4", "youtube", "abc123", "https://www.youtube.com/embed/abc123"),
    ("https://youtube.com/shorts/Short_1", "youtube", "Short_1", "https://www.youtube.com/embed/Short_1"),
    ("youtube.com/embed/xyz", "youtube", "xyz", "https://www.youtube.com/embed/xyz"),
    ("https://vimeo.com/76979871", "vimeo", "76979871", "https://player.vimeo.com/video/76979871"),
    ("https://player.vimeo.com/video/42", "vimeo", "42", "https://player.vimeo.com/video/42"),
    ("https://www.tiktok.com/@user/video/7234567890", "tiktok", "7234567890",
     "https://www.tiktok.com/embed/v2/7234567890"),
    ("https://www.instagram.com/reel/CxYz_12/", "instagram", "CxYz_12", "https://www.instagram.com/p/CxYz_12/embed"),
    ("https://www.loom.com/share/abc123def", "loom", "abc123def", "https://www.loom.com/embed/abc123def"),
    ("https://acme.wistia.com/medias/k9x8", "wistia", "k9x8", "https://fast.wistia.net/embed/iframe/k9x8"),
])
def test_parse_known_providers(url, provider, video_id, embed):
    result = parse_video_url(url)
    assert result.provider == provider
    assert result.video_id == video_id
    assert result.embed_url == embed


@pytest.mark.parametrize("url", [
    None,
    "",
    "   ",
    "https://example.com/video.mp4",
    "https://www.youtube.com/feed",
    "https://notyoutube.com/watch?v=dQw4w9WgXcQ",
    "https://evilvimeo.com/76979871",
    "https://myloom.com/share/0281766fa2d04bb788eaf19e65135184",
])
def test_unrecognised(url):
    assert parse_video_url(url) is None


def test_youtube_options():
    opts = EmbedOptions(autoplay=True, loop=True, muted=True, controls=False, start=30, privacy=True)
    result = parse_video_url("https://youtu.be/abc", opts)
    assert result.embed_url.startswith("https://www.youtube-nocookie.com/embed/abc?")
    for param in ("autoplay=1", "loop=1", "playlist=abc", "mute=1", "controls=0", "start=30"):
        assert param in result.embed_url


def test_vimeo_start_fragment():
    result = parse_video_url("https://vimeo.com/1", EmbedOptions(start=12))
    assert result.embed_url == "https://player.vimeo.com/video/1#t=12s"


def test_options_from_content():
    opts = EmbedOptions.from_content({"autoplay": True, "showControls": False, "startTime": "-5"})
    assert opts.autoplay
    assert not opts.controls
    assert opts.start == 0


@pytest.mark.parametrize("ratio,padding", [("16:9", "56.25%"), ("9:16", "177.78%"), ("62%", "62%"), (None, "56.25%"), ("5:4", "56.25%")])
def test_aspect_padding(ratio, padding):
    assert aspect_padding(ratio) == padding


# ── Rendu ───────────────────────────────────────────────────────────────────

def _render(content):
    theme = PageTheme()
    block = Block(id="v", type="video", content=content)
    return render_video(block, resolve(block, theme), theme)


def test_render_empty():
    assert "Add a Video" in _render({})


def test_render_invalid_url_shows_it():
    html = _render({"url": "https://example.com/clip"})
    assert "bc-placeholder--invalid" in html
    assert "<code>https://example.com/clip</code>" in html


def test_render_iframe():
    html = _render({"url": "https://youtu.be/abc", "aspectRatio": "1:1", "caption": "Démo"})
    assert 'src="https://www.youtube.com/embed/abc"' in html
    assert "padding-top:100%" in html
    assert "video-block--youtube" in html
    assert "Démo" in html
