"""Renderer — document HTML complet + CSS de page."""
from .base import Renderer
from .css import generate_page_css, generate_css_variables, get_compiled_scss, invalidate_scss_cache
from .html import HtmlRenderer, render_page, render_block, shared_registry

__all__ = [
    "Renderer",
    "generate_page_css", "generate_css_variables", "get_compiled_scss", "invalidate_scss_cache",
    "HtmlRenderer", "render_page", "render_block", "shared_registry",
]
