"""
Effets globaux d'un thème : titre du document, favicon, polices Google.

Calculés une fois par changement de thème (empreinte), jamais par bloc.
C'est le seul endroit du moteur qui produit de l'état global de document.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..blocks.base import esc
from ..core.fonts import google_font_url
from ..core.schemas import PageTheme

log = logging.getLogger(__name__)

DEFAULT_TITLE = "My Page"


@dataclass(frozen=True)
class DocumentHead:
    title: str = DEFAULT_TITLE
    favicon_url: Optional[str] = None
    font_urls: Tuple[str, ...] = field(default_factory=tuple)

    def html(self) -> str:
        parts = [f"<title>{esc(self.title)}</title>"]
        if self.favicon_url:
            parts.append(f'<link rel="icon" href="{esc(self.favicon_url)}">')
        if self.font_urls:
            parts.append('<link rel="preconnect" href="https://fonts.googleapis.com">')
            parts.extend(f'<link rel="stylesheet" href="{esc(url)}">' for url in self.font_urls)
        return "\n  ".join(parts)


def document_head(theme: PageTheme) -> DocumentHead:
    fonts: List[str] = []
    for font_id in (theme.typography.title_font, theme.typography.body_font):
        url = google_font_url(font_id) if font_id else None
        if url and url not in fonts:
            fonts.append(url)
    return DocumentHead(
        title=theme.branding.site_name or DEFAULT_TITLE,
        favicon_url=theme.branding.favicon_url or None,
        font_urls=tuple(fonts),
    )


class ThemeSideEffects:
    def __init__(self):
        self._fingerprint: Optional[str] = None
        self.head = DocumentHead()
        self.applied = 0

    def apply(self, theme: PageTheme) -> DocumentHead:
        """Recalcule la tête de document si le thème a changé ; idempotent sinon."""
        fingerprint = theme.fingerprint()
        if fingerprint != self._fingerprint:
            self._fingerprint = fingerprint
            self.head = document_head(theme)
            self.applied += 1
            log.debug("Effets de thème appliqués : titre=%r, %d police(s)", self.head.title, len(self.head.font_urls))
        return self.head
