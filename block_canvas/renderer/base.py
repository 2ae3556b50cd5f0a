"""
Contrat d'un renderer de pages : ce que le router attend (voir router.get_renderer).

HtmlRenderer est l'implémentation par défaut ; une application hôte peut en
substituer une autre via `app.dependency_overrides[get_renderer]`.
"""
from typing import Optional, Protocol, runtime_checkable

from ..core.schemas import Block, Page, PageTheme


@runtime_checkable
class Renderer(Protocol):
    def render_page(self, page: Page) -> str: ...

    def render_block(self, block: Block, theme: Optional[PageTheme] = None) -> str: ...
