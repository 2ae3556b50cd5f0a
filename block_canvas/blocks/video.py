"""
Bloc video — reconnaissance d'URL de plateforme → URL d'embed.

    parse_video_url("https://youtu.be/abc123?t=4")
        → VideoEmbed(provider="youtube", video_id="abc123", embed_url="https://www.youtube.com/embed/abc123")

Fournisseurs : YouTube (watch, youtu.be, embed, shorts ; mode privé
youtube-nocookie), Vimeo, TikTok, Instagram (reel/p), Loom, Wistia.
"""
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode, urlparse, parse_qs

from ..core.schemas import Block, PageTheme, ResolvedStyle
from ..style import recipes
from .base import esc, invalid_url_placeholder, empty_placeholder, number, style_attr

ASPECT_RATIOS = {
    "16:9": "56.25%",
    "9:16": "177.78%",
    "4:3": "75%",
    "1:1": "100%",
    "21:9": "42.86%",
}

_TIKTOK = re.compile(r"video/(\d+)")
_INSTAGRAM = re.compile(r"/(reel|reels|p)/([A-Za-z0-9_-]+)")
_LOOM = re.compile(r"/share/([a-zA-Z0-9]+)")
_WISTIA = re.compile(r"/medias/([a-zA-Z0-9]+)")
_YT_PATH = re.compile(r"/(embed|shorts|live)/([A-Za-z0-9_-]+)")


@dataclass(frozen=True)
class EmbedOptions:
    autoplay: bool = False
    loop: bool = False
    muted: bool = False
    controls: bool = True
    start: int = 0
    privacy: bool = False
    no_related: bool = False

    @classmethod
    def from_content(cls, content: dict) -> "EmbedOptions":
        return cls(
            autoplay=bool(content.get("autoplay")),
            loop=bool(content.get("loop")),
            muted=bool(content.get("muted")),
            controls=content.get("showControls", True) is not False,
            start=max(0, int(number(content, "startTime", 0))),
            privacy=bool(content.get("privacyMode")),
            no_related=bool(content.get("noRelated")),
        )


@dataclass(frozen=True)
class VideoEmbed:
    provider: str
    video_id: str
    embed_url: str


def _query(params: list) -> str:
    return "?" + urlencode(params) if params else ""


def _youtube_id(parsed) -> Optional[str]:
    if parsed.hostname and parsed.hostname.endswith("youtu.be"):
        video_id = parsed.path.lstrip("/").split("/")[0]
        return video_id or None
    match = _YT_PATH.search(parsed.path)
    if match:
        return match.group(2)
    return (parse_qs(parsed.query).get("v") or [None])[0]


def _youtube(parsed, opts: EmbedOptions) -> Optional[VideoEmbed]:
    video_id = _youtube_id(parsed)
    if not video_id:
        return None
    params = []
    if opts.autoplay:
        params.append(("autoplay", "1"))
    if opts.loop:
        # la boucle YouTube exige une playlist d'une vidéo
        params += [("loop", "1"), ("playlist", video_id)]
    if opts.muted:
        params.append(("mute", "1"))
    if not opts.controls:
        params.append(("controls", "0"))
    if opts.start > 0:
        params.append(("start", str(opts.start)))
    if opts.no_related:
        params.append(("rel", "0"))
    domain = "youtube-nocookie.com" if opts.privacy else "youtube.com"
    return VideoEmbed("youtube", video_id, f"https://www.{domain}/embed/{video_id}{_query(params)}")


def _vimeo(parsed, opts: EmbedOptions) -> Optional[VideoEmbed]:
    parts = [p for p in parsed.path.split("/") if p]
    if parsed.hostname == "player.vimeo.com" and len(parts) >= 2 and parts[0] == "video":
        video_id = parts[1]
    else:
        video_id = parts[0] if parts else ""
    if not video_id:
        return None
    params = []
    if opts.autoplay:
        params.append(("autoplay", "1"))
    if opts.loop:
        params.append(("loop", "1"))
    if opts.muted:
        params.append(("muted", "1"))
    if not opts.controls:
        params.append(("controls", "0"))
    url = f"https://player.vimeo.com/video/{video_id}{_query(params)}"
    if opts.start > 0:
        url += f"#t={opts.start}s"
    return VideoEmbed("vimeo", video_id, url)


def _by_pattern(provider: str, pattern: re.Pattern, template: str, url: str, group: int = 1) -> Optional[VideoEmbed]:
    match = pattern.search(url)
    if not match:
        return None
    video_id = match.group(group)
    return VideoEmbed(provider, video_id, template.format(id=video_id))


def _on(host: str, *domains: str) -> bool:
    return any(host == d or host.endswith("." + d) for d in domains)


def parse_video_url(url: Optional[str], options: Optional[EmbedOptions] = None) -> Optional[VideoEmbed]:
    """URL de partage → embed ; None si aucun fournisseur ne reconnaît l'URL."""
    if not url or not url.strip():
        return None
    opts = options or EmbedOptions()
    url = url.strip()
    parsed = urlparse(url if "://" in url else "https://" + url)
    host = (parsed.hostname or "").lower()

    if _on(host, "youtube.com", "youtu.be", "youtube-nocookie.com"):
        return _youtube(parsed, opts)
    if _on(host, "vimeo.com"):
        return _vimeo(parsed, opts)
    if _on(host, "tiktok.com"):
        return _by_pattern("tiktok", _TIKTOK, "https://www.tiktok.com/embed/v2/{id}", url)
    if _on(host, "instagram.com"):
        return _by_pattern("instagram", _INSTAGRAM, "https://www.instagram.com/p/{id}/embed", url, group=2)
    if _on(host, "loom.com"):
        return _by_pattern("loom", _LOOM, "https://www.loom.com/embed/{id}", url)
    if _on(host, "wistia.com", "wistia.net"):
        return _by_pattern("wistia", _WISTIA, "https://fast.wistia.net/embed/iframe/{id}", url)
    return None


def aspect_padding(ratio: Optional[str]) -> str:
    """'16:9' → '56.25%' ; un pourcentage (ancien format) passe tel quel."""
    if ratio and "%" in ratio:
        return ratio
    return ASPECT_RATIOS.get(ratio or "16:9", ASPECT_RATIOS["16:9"])


def render_video(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    url = (c.get("url") or "").strip()
    if not url:
        return empty_placeholder("Add a Video", "Paste a YouTube, Vimeo, or TikTok link")

    embed = parse_video_url(url, EmbedOptions.from_content(c))
    if embed is None:
        return invalid_url_placeholder(url, "Couldn't parse this video URL. Check the URL and try again.")

    radius = f"{int(number(c, 'borderRadius', 8))}px"
    align = {"left": "0 auto 0 0", "right": "0 0 0 auto"}.get(c.get("alignment"), "0 auto")
    loading = "lazy" if c.get("lazyLoad", True) is not False else "eager"
    caption = c.get("caption") or ""
    caption_html = f'<p class="video-block__caption">{esc(caption)}</p>' if caption else ""

    frame = style_attr(
        ("padding-top", aspect_padding(c.get("aspectRatio"))),
        ("border-radius", radius),
        ("box-shadow", recipes.pick(recipes.SHADOW_PRESETS, c.get("shadow"), "none")),
    )
    return f"""<div class="video-block video-block--{embed.provider}"{style_attr(("max-width", c.get("width") or "100%"), ("margin", align))}>
  <div class="video-block__frame"{frame}>
    <iframe src="{esc(embed.embed_url)}" title="{esc(caption or 'Embedded video')}" loading="{loading}"
      allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
      allowfullscreen frameborder="0"{style_attr(("border-radius", radius))}></iframe>
  </div>
  {caption_html}
</div>"""
