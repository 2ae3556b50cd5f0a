"""
Renderer HTML — document complet d'une Page (rendu public, lecture seule).

Le corps est produit par un Canvas en lecture seule : mêmes renderers,
même confinement des erreurs que dans l'éditeur. Les widgets sont montés
sur un scheduler non démarré puis démontés : aucun timer ne survit au rendu.
"""
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from ..blocks.base import esc
from ..blocks.registry import RendererRegistry, default_registry
from ..core.schemas import Block, Page, PageTheme, VideoBackground
from ..editor.canvas import Canvas
from ..editor.side_effects import document_head
from ..editor.store import BlockStore
from ..style.patterns import background_style, style_attr as css_props
from .css import generate_page_css

_registry: Optional[RendererRegistry] = None


def shared_registry() -> RendererRegistry:
    """Registry du rendu public, construit une fois (les modules lazy restent chargés)."""
    global _registry
    if _registry is None:
        _registry = default_registry()
    return _registry


def _video_background(theme: PageTheme) -> str:
    bg = theme.background
    if not isinstance(bg, VideoBackground) or not bg.video_url:
        return ""
    loop = " loop" if bg.video_loop is not False else ""
    muted = " muted" if bg.video_muted is not False else ""
    opacity = bg.video_opacity if bg.video_opacity is not None else 1
    return (
        f'<video class="bc-page__video" src="{esc(bg.video_url)}" autoplay playsinline{loop}{muted}'
        f' style="position:fixed;inset:0;width:100%;height:100%;object-fit:cover;z-index:-1;opacity:{opacity}"></video>'
    )


def render_body(page: Page, read_only: bool = True, registry: Optional[RendererRegistry] = None) -> str:
    canvas = Canvas(
        BlockStore(page.blocks),
        page.theme,
        registry=registry or shared_registry(),
        read_only=read_only,
        scheduler=BackgroundScheduler(timezone="UTC"),
    )
    try:
        return canvas.render()
    finally:
        canvas.close()


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(
    page: Page,
    read_only: bool = True,
    extra_head: str = "",
    extra_body_end: str = "",
    registry: Optional[RendererRegistry] = None,
) -> str:
    """Génère le HTML complet d'une page."""
    theme = page.theme
    head = document_head(theme)
    css = generate_page_css(theme)
    body_style = css_props(background_style(theme.background))
    body_attr = f' style="{esc(body_style)}"' if body_style else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  {head.html()}
  <style>{css}</style>
  {extra_head}
</head>
<body class="bc-page"{body_attr}>
{_video_background(theme)}
{render_body(page, read_only=read_only, registry=registry)}
{extra_body_end}
</body>
</html>"""


def render_block(block: Block, theme: Optional[PageTheme] = None, registry: Optional[RendererRegistry] = None) -> str:
    """Fragment HTML d'un seul bloc, dans son habillage lecture seule."""
    page = Page(blocks=[block], theme=theme or PageTheme())
    canvas = Canvas(
        BlockStore(page.blocks),
        page.theme,
        registry=registry or shared_registry(),
        read_only=True,
        scheduler=BackgroundScheduler(timezone="UTC"),
    )
    try:
        return canvas.render_block(block.id)
    finally:
        canvas.close()


class HtmlRenderer:
    """Implémentation du protocol Renderer."""

    def __init__(self, registry: Optional[RendererRegistry] = None):
        self.registry = registry or shared_registry()

    def render_page(self, page: Page) -> str:
        return render_page(page, registry=self.registry)

    def render_block(self, block: Block, theme: Optional[PageTheme] = None) -> str:
        return render_block(block, theme, registry=self.registry)
