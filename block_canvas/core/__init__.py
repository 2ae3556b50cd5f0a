"""Core module pour block_canvas."""
from .schemas import (
    BlockType,
    KNOWN_BLOCK_TYPES,
    Block,
    PageTheme,
    SolidBackground,
    GradientBackground,
    PatternBackground,
    ImageBackground,
    VideoBackground,
    TypographyTheme,
    ButtonTheme,
    BrandingTheme,
    LayoutTheme,
    HeaderTheme,
    FooterTheme,
    Page,
    HoverRecipe,
    ResolvedStyle,
)
from .errors import (
    CanvasError,
    UnknownBlockTypeError,
    DuplicateBlockIdError,
    RendererLoadError,
    UnknownPatternError,
)
from .defaults import default_content
from .settings import Settings, get_settings

__all__ = [
    "BlockType",
    "KNOWN_BLOCK_TYPES",
    "Block",
    "PageTheme",
    "SolidBackground",
    "GradientBackground",
    "PatternBackground",
    "ImageBackground",
    "VideoBackground",
    "TypographyTheme",
    "ButtonTheme",
    "BrandingTheme",
    "LayoutTheme",
    "HeaderTheme",
    "FooterTheme",
    "Page",
    "HoverRecipe",
    "ResolvedStyle",
    "CanvasError",
    "UnknownBlockTypeError",
    "DuplicateBlockIdError",
    "RendererLoadError",
    "UnknownPatternError",
    "default_content",
    "Settings",
    "get_settings",
]
