"""Style — résolution en cascade, recettes visuelles, motifs de fond."""
from .resolver import resolve
from .patterns import ImageDescriptor, PATTERN_SIZES, PATTERN_TYPES, generate, background_style
from .recipes import border_radius, normalize_variant, variant_recipe

__all__ = [
    "resolve",
    "ImageDescriptor",
    "PATTERN_SIZES",
    "PATTERN_TYPES",
    "generate",
    "background_style",
    "border_radius",
    "normalize_variant",
    "variant_recipe",
]
