"""
Block Canvas — moteur de composition et de rendu de pages à blocs.

Usage :
    >>> from block_canvas import BlockStore, Canvas, PageTheme
    >>> store = BlockStore()
    >>> store.add("profile")
    >>> html = Canvas(store, PageTheme()).render()

Rendu public :
    >>> from block_canvas import Page, render_page
    >>> html = render_page(Page.model_validate(payload))
"""
from .core import (
    Block,
    BlockType,
    Page,
    PageTheme,
    ResolvedStyle,
    CanvasError,
    UnknownBlockTypeError,
    DuplicateBlockIdError,
    RendererLoadError,
    UnknownPatternError,
    default_content,
    get_settings,
)
from .style import resolve, generate
from .blocks import RendererRegistry, LoadState, default_registry
from .widgets import KeyboardHub, IntervalTimer, GalleryWidget, CountdownWidget, FormWidget
from .editor import BlockStore, DragReorderController, Canvas, ThemeSideEffects
from .renderer import HtmlRenderer, render_page, render_block, generate_page_css

__version__ = "0.1.0"

__all__ = [
    # Modèle
    "Block", "BlockType", "Page", "PageTheme", "ResolvedStyle", "default_content", "get_settings",
    # Erreurs
    "CanvasError", "UnknownBlockTypeError", "DuplicateBlockIdError", "RendererLoadError", "UnknownPatternError",
    # Style
    "resolve", "generate",
    # Registry
    "RendererRegistry", "LoadState", "default_registry",
    # Widgets
    "KeyboardHub", "IntervalTimer", "GalleryWidget", "CountdownWidget", "FormWidget",
    # Éditeur
    "BlockStore", "DragReorderController", "Canvas", "ThemeSideEffects",
    # Rendu
    "HtmlRenderer", "render_page", "render_block", "generate_page_css",
]
