"""
Blocs — registry des renderers + helpers.

Les modules de rendu lourds (gallery, video, commerce…) ne sont pas importés
ici : le registry les charge à la demande.
"""
from .base import (
    BlockRenderFn,
    IMAGE_FALLBACK,
    esc,
    unknown_placeholder,
    loading_placeholder,
    error_placeholder,
    empty_placeholder,
    sanitize_rich_text,
)
from .registry import (
    LoadState,
    RendererSlot,
    RendererRegistry,
    LAZY_RENDERERS,
    default_registry,
)
from .platforms import Platform, LinkIcon, detect_platform, detect_link, build_profile_url

__all__ = [
    # Base
    "BlockRenderFn", "IMAGE_FALLBACK", "esc", "sanitize_rich_text",
    "unknown_placeholder", "loading_placeholder", "error_placeholder", "empty_placeholder",
    # Registry
    "LoadState", "RendererSlot", "RendererRegistry", "LAZY_RENDERERS", "default_registry",
    # Plateformes
    "Platform", "LinkIcon", "detect_platform", "detect_link", "build_profile_url",
]
