"""
Détection de plateforme pour les liens.

    detect_link("https://open.spotify.com/x")  →  LinkIcon(kind="platform", platform=SPOTIFY)
    detect_link("https://example.org")         →  LinkIcon(kind="favicon", url=".../favicons?domain=example.org&sz=64")
    detect_link("pas une url")                 →  LinkIcon(kind="globe")
"""
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlparse

from ..core.settings import get_settings


@dataclass(frozen=True)
class Platform:
    name: str
    color: str
    gradient: str
    icon: str  # identifiant d'icône (classe CSS bc-icon--{icon})


def _p(name: str, color: str, gradient: str, icon: str) -> Platform:
    return Platform(name=name, color=color, gradient=f"linear-gradient(135deg, {gradient})", icon=icon)


YOUTUBE = _p("YouTube", "#FF0000", "#FF0000, #CC0000", "youtube")
TWITCH = _p("Twitch", "#9146FF", "#9146FF, #6441A5", "twitch")
TIKTOK = _p("TikTok", "#000000", "#00F2EA, #FF0050", "tiktok")
SPOTIFY = _p("Spotify", "#1DB954", "#1DB954, #169544", "spotify")
APPLE_MUSIC = _p("Apple Music", "#FA243C", "#FA243C, #d91e34", "apple-music")
INSTAGRAM = _p("Instagram", "#E4405F", "#F58529, #DD2A7B, #8134AF", "instagram")
X = _p("X", "#000000", "#000000, #333333", "x")
THREADS = _p("Threads", "#000000", "#000000, #333333", "threads")
FACEBOOK = _p("Facebook", "#1877F2", "#1877F2, #0A59DA", "facebook")
LINKEDIN = _p("LinkedIn", "#0A66C2", "#0A66C2, #004182", "linkedin")
SNAPCHAT = _p("Snapchat", "#FFFC00", "#FFFC00, #F7F300", "snapchat")
PINTEREST = _p("Pinterest", "#E60023", "#E60023, #BD081C", "pinterest")
WHATSAPP = _p("WhatsApp", "#25D366", "#25D366, #128C7E", "whatsapp")
TELEGRAM = _p("Telegram", "#26A5E4", "#26A5E4, #0088cc", "telegram")
DISCORD = _p("Discord", "#5865F2", "#5865F2, #404EED", "discord")
GITHUB = _p("GitHub", "#181717", "#333333, #181717", "github")
SHOPIFY = _p("Shopify", "#96BF48", "#96BF48, #7AB02E", "shopify")
STRIPE = _p("Stripe", "#635BFF", "#635BFF, #5548E5", "stripe")
PAYPAL = _p("PayPal", "#00457C", "#00457C, #003366", "paypal")
EMAIL = _p("Email", "#EA4335", "#EA4335, #C5221F", "mail")
PHONE = _p("Téléphone", "#10B981", "#10B981, #059669", "phone")

# Domaine → plateforme. Correspondance sur le domaine ou un sous-domaine
# (dropbox.com ne doit pas tomber sur x.com) ; premier trouvé gagne.
PLATFORMS: Dict[str, Platform] = {
    "youtube.com": YOUTUBE,
    "youtu.be": YOUTUBE,
    "twitch.tv": TWITCH,
    "tiktok.com": TIKTOK,
    "spotify.com": SPOTIFY,
    "music.apple.com": APPLE_MUSIC,
    "apple.com": APPLE_MUSIC,
    "instagram.com": INSTAGRAM,
    "twitter.com": X,
    "x.com": X,
    "threads.net": THREADS,
    "facebook.com": FACEBOOK,
    "linkedin.com": LINKEDIN,
    "snapchat.com": SNAPCHAT,
    "pinterest.com": PINTEREST,
    "wa.me": WHATSAPP,
    "whatsapp.com": WHATSAPP,
    "t.me": TELEGRAM,
    "telegram.me": TELEGRAM,
    "discord.com": DISCORD,
    "discord.gg": DISCORD,
    "github.com": GITHUB,
    "shopify.com": SHOPIFY,
    "stripe.com": STRIPE,
    "paypal.com": PAYPAL,
}


@dataclass(frozen=True)
class LinkIcon:
    """Icône retenue pour un lien : plateforme connue, favicon, ou globe générique."""
    kind: str  # "platform" | "favicon" | "globe"
    platform: Optional[Platform] = None
    url: Optional[str] = None


def hostname(url: Optional[str]) -> Optional[str]:
    """Hôte sans `www.` ; None si l'URL n'est pas absolue."""
    if not url:
        return None
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return None
    host = parsed.hostname
    return host[4:] if host.startswith("www.") else host


def detect_platform(url: Optional[str]) -> Optional[Platform]:
    if not url:
        return None
    lowered = url.strip().lower()
    if lowered.startswith("mailto:"):
        return EMAIL
    if lowered.startswith("tel:"):
        return PHONE
    host = hostname(lowered)
    if host is None:
        return None
    for domain, platform in PLATFORMS.items():
        if host == domain or host.endswith("." + domain):
            return platform
    return None


def favicon_url(url: Optional[str]) -> Optional[str]:
    host = hostname(url)
    if host is None:
        return None
    return get_settings().favicon_service.format(domain=host)


def detect_link(url: Optional[str]) -> LinkIcon:
    platform = detect_platform(url)
    if platform is not None:
        return LinkIcon(kind="platform", platform=platform)
    favicon = favicon_url(url)
    if favicon is not None:
        return LinkIcon(kind="favicon", url=favicon)
    return LinkIcon(kind="globe")


# ── Profils sociaux (bloc social) ───────────────────────────────────────────

@dataclass(frozen=True)
class SocialPlatform:
    id: str
    name: str
    brand_color: str
    url_prefix: Optional[str] = None


SOCIAL_PLATFORMS: Dict[str, SocialPlatform] = {
    p.id: p for p in (
        SocialPlatform("instagram", "Instagram", "#E4405F", "https://instagram.com/"),
        SocialPlatform("tiktok", "TikTok", "#000000", "https://tiktok.com/@"),
        SocialPlatform("x", "X (Twitter)", "#000000", "https://x.com/"),
        SocialPlatform("twitter", "Twitter", "#1DA1F2", "https://twitter.com/"),
        SocialPlatform("facebook", "Facebook", "#1877F2", "https://facebook.com/"),
        SocialPlatform("threads", "Threads", "#000000", "https://threads.net/@"),
        SocialPlatform("snapchat", "Snapchat", "#FFFC00", "https://snapchat.com/add/"),
        SocialPlatform("reddit", "Reddit", "#FF4500", "https://reddit.com/"),
        SocialPlatform("pinterest", "Pinterest", "#E60023", "https://pinterest.com/"),
        SocialPlatform("bluesky", "Bluesky", "#0085ff", "https://bsky.app/profile/"),
        SocialPlatform("linkedin", "LinkedIn", "#0A66C2", "https://linkedin.com/"),
        SocialPlatform("github", "GitHub", "#181717", "https://github.com/"),
        SocialPlatform("behance", "Behance", "#1769FF", "https://behance.net/"),
        SocialPlatform("dribbble", "Dribbble", "#EA4C89", "https://dribbble.com/"),
        SocialPlatform("youtube", "YouTube", "#FF0000", "https://youtube.com/@"),
        SocialPlatform("twitch", "Twitch", "#9146FF", "https://twitch.tv/"),
        SocialPlatform("vimeo", "Vimeo", "#1AB7EA", "https://vimeo.com/"),
        SocialPlatform("spotify", "Spotify", "#1DB954", "https://open.spotify.com/"),
        SocialPlatform("soundcloud", "SoundCloud", "#FF5500", "https://soundcloud.com/"),
        SocialPlatform("patreon", "Patreon", "#FF424D", "https://patreon.com/"),
        SocialPlatform("medium", "Medium", "#000000", "https://medium.com/@"),
        SocialPlatform("kofi", "Ko-fi", "#FF5E5B", "https://ko-fi.com/"),
        SocialPlatform("buymeacoffee", "Buy Me a Coffee", "#FFDD00", "https://buymeacoffee.com/"),
        SocialPlatform("etsy", "Etsy", "#F45800", "https://etsy.com/"),
        SocialPlatform("whatsapp", "WhatsApp", "#25D366", "https://wa.me/"),
        SocialPlatform("telegram", "Telegram", "#0088CC", "https://t.me/"),
        SocialPlatform("discord", "Discord", "#5865F2", "https://discord.gg/"),
        SocialPlatform("calendly", "Calendly", "#006BFF", "https://calendly.com/"),
        SocialPlatform("email", "Email", "#EA4335", "mailto:"),
        SocialPlatform("phone", "Phone", "#34A853", "tel:"),
        SocialPlatform("sms", "SMS", "#FBBC04", "sms:"),
        SocialPlatform("paypal", "PayPal", "#00457C", "https://paypal.me/"),
        SocialPlatform("linktree", "Linktree", "#43E55E", "https://linktr.ee/"),
        SocialPlatform("website", "Website", "#6366F1"),
    )
}

DEFAULT_SOCIAL_COLOR = "#6366F1"


def build_profile_url(platform_id: str, value: str) -> str:
    """Identifiant saisi → URL du profil ; une URL complète passe telle quelle."""
    value = (value or "").strip()
    platform = SOCIAL_PLATFORMS.get(platform_id)
    if platform is None or value.startswith(("http://", "https://")):
        return value
    if platform.url_prefix:
        if platform.url_prefix.endswith("@"):
            value = value.lstrip("@")
        return platform.url_prefix + value
    return value
