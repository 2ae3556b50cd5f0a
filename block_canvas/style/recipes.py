"""
Tables de recettes visuelles — mot-clé énuméré → valeurs concrètes.

Chaque table est exhaustive sur ses valeurs énumérées et expose un défaut
explicite : `pick(table, value, default_key)` ne retourne jamais None.
Les états hover sont des données dérivées (HoverRecipe), pas du CSS généré.
"""
from typing import Any, Dict, Mapping, Optional

from ..core.design_system import create_gradient, light_tint, shift_hue


def pick(table: Mapping[str, Any], value: Optional[str], default_key: str) -> Any:
    """Valeur de la table pour `value`, sinon celle de `default_key`."""
    if value is not None and value in table:
        return table[value]
    return table[default_key]


# ── Rayons / ombres ─────────────────────────────────────────────────────────

RADIUS_PRESETS: Dict[str, int] = {
    "none": 0,
    "sm": 4,
    "md": 8,
    "lg": 12,
    "xl": 16,
    "full": 9999,
}

SHADOW_PRESETS: Dict[str, str] = {
    "none": "none",
    "sm": "0 1px 2px 0 rgba(0,0,0,0.05)",
    "md": "0 4px 6px -1px rgba(0,0,0,0.1), 0 2px 4px -2px rgba(0,0,0,0.1)",
    "lg": "0 10px 15px -3px rgba(0,0,0,0.1), 0 4px 6px -4px rgba(0,0,0,0.1)",
    "xl": "0 20px 25px -5px rgba(0,0,0,0.1), 0 8px 10px -6px rgba(0,0,0,0.1)",
}


def border_radius(radius, fallback: int = 8) -> int:
    """Preset (`none|sm|md|lg|xl|full`), entier ou chaîne numérique → px."""
    if isinstance(radius, bool):
        return fallback
    if isinstance(radius, (int, float)):
        return int(radius)
    if isinstance(radius, str):
        if radius in RADIUS_PRESETS:
            return RADIUS_PRESETS[radius]
        stripped = radius.removesuffix("px").strip()
        if stripped.isdigit():
            return int(stripped)
    return fallback


# ── Variantes de bouton ─────────────────────────────────────────────────────

BUTTON_VARIANTS = ("fill", "outline", "soft", "shadow", "glass", "gradient")
VARIANT_ALIASES = {"solid": "fill", "filled": "fill"}
DEFAULT_VARIANT = "fill"


def normalize_variant(variant: Optional[str]) -> str:
    variant = VARIANT_ALIASES.get(variant, variant)
    return variant if variant in BUTTON_VARIANTS else DEFAULT_VARIANT


def variant_recipe(variant: Optional[str], bg: str, text: str, secondary: Optional[str] = None) -> Dict[str, Any]:
    """
    Recette {background, color, border, box_shadow, backdrop_filter, hover}
    pour une variante. Variante inconnue → `fill`.
    """
    variant = normalize_variant(variant)
    recipes = {
        "fill": {
            "background": bg,
            "color": text,
            "border": f"2px solid {bg}",
            "box_shadow": "none",
            "hover": {"opacity": 0.9, "filter": "brightness(1.1)"},
        },
        "outline": {
            "background": "transparent",
            "color": bg,
            "border": f"2px solid {bg}",
            "box_shadow": "none",
            "hover": {"background": bg, "color": text},
        },
        "soft": {
            "background": light_tint(bg, 0.15),
            "color": bg,
            "border": f"2px solid {light_tint(bg, 0.3)}",
            "box_shadow": "none",
            "hover": {"background": bg, "color": text},
        },
        "shadow": {
            "background": "#ffffff",
            "color": "#1f2937",
            "border": "2px solid #e5e7eb",
            "box_shadow": SHADOW_PRESETS["md"],
            "hover": {"box_shadow": "0 10px 15px -3px rgba(0,0,0,0.1), 0 4px 6px -2px rgba(0,0,0,0.05)"},
        },
        "glass": {
            "background": "rgba(255, 255, 255, 0.1)",
            "color": "#1f2937",
            "border": "2px solid rgba(255, 255, 255, 0.2)",
            "box_shadow": "none",
            "backdrop_filter": "blur(12px)",
            "hover": {"background": "rgba(255, 255, 255, 0.2)"},
        },
        "gradient": {
            "background": create_gradient(bg, secondary or shift_hue(bg, 15), "135deg"),
            "color": text,
            "border": "2px solid transparent",
            "box_shadow": "none",
            "hover": {"filter": "brightness(1.1)"},
        },
    }
    return recipes[variant]


# ── Effets hover / animations ───────────────────────────────────────────────

HOVER_EFFECTS: Dict[str, Optional[str]] = {
    "none": None,
    "lift": "translateY(-4px)",
    "grow": "scale(1.05)",
    "scale": "scale(1.05)",
    "glow": None,  # ombre, pas de transform
    "pulse": None,
    "bounce": "scale(1.02)",
    "tilt": "rotateX(-2deg) rotateY(2deg) scale(1.02)",
}

HOVER_SHADOWS: Dict[str, Optional[str]] = {
    "glow": "0 0 40px {color}80",
    "lift": "0 20px 25px -5px rgba(0,0,0,0.1)",
}

ANIMATIONS: Dict[str, Optional[str]] = {
    "none": None,
    "fadeIn": "bc-fade-in 1s ease both",
    "slideUp": "bc-slide-up 0.7s ease both",
    "slideLeft": "bc-slide-left 0.7s ease both",
    "slideRight": "bc-slide-right 0.7s ease both",
    "bounce": "bc-bounce 1s infinite",
    "pulse": "bc-pulse 2s infinite",
}


# ── Titres / texte ──────────────────────────────────────────────────────────

HEADING_GRADIENTS: Dict[str, Optional[str]] = {
    "none": None,
    "primary": "linear-gradient(to right, {primary}, #9333ea)",
    "rainbow": "linear-gradient(to right, #ec4899, #a855f7, #3b82f6)",
    "sunset": "linear-gradient(to right, #f97316, #ef4444, #ec4899)",
    "ocean": "linear-gradient(to right, #3b82f6, #06b6d4, #14b8a6)",
    "forest": "linear-gradient(to right, #22c55e, #10b981, #14b8a6)",
}

TEXT_SHADOWS: Dict[str, str] = {
    "none": "none",
    "sm": "0 1px 2px rgba(0,0,0,0.1)",
    "md": "0 2px 4px rgba(0,0,0,0.2)",
    "lg": "0 4px 8px rgba(0,0,0,0.3)",
    "glow": "0 0 10px rgba(139, 92, 246, 0.5), 0 0 20px rgba(139, 92, 246, 0.3)",
    "neon": "0 0 5px rgba(139, 92, 246, 0.8), 0 0 10px rgba(139, 92, 246, 0.6), 0 0 20px rgba(139, 92, 246, 0.4)",
}

DECORATIONS: Dict[str, Optional[str]] = {
    "none": None,
    "underline": "text-decoration:underline;text-underline-offset:4px;text-decoration-thickness:2px",
    "wavy": "text-decoration:underline wavy;text-underline-offset:4px",
    "highlight": "background:rgba(254,240,138,0.5);padding:0.25rem 0.5rem;border-radius:4px",
}

HEADING_SIZES: Dict[int, Dict[str, str]] = {
    1: {"font_size": "clamp(1.875rem, 5vw, 3rem)", "font_weight": "700"},
    2: {"font_size": "clamp(1.5rem, 4vw, 2.25rem)", "font_weight": "600"},
    3: {"font_size": "clamp(1.25rem, 3vw, 1.875rem)", "font_weight": "500"},
}

TEXT_SIZES: Dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
}

TEXT_STYLES: Dict[str, Optional[str]] = {
    "normal": None,
    "quote": "border-left:4px solid {accent};padding-left:1rem;font-style:italic",
    "callout": "background:{tint};border-radius:12px;padding:1rem",
    "card": "background:#ffffff;border:1px solid #e5e7eb;border-radius:12px;padding:1.25rem",
    "highlight": "background:rgba(254,240,138,0.4);padding:0.75rem;border-radius:8px",
}

SPACING_DENSITY: Dict[str, int] = {
    "tight": 8,
    "compact": 12,
    "normal": 16,
    "relaxed": 24,
}

BUTTON_SIZES: Dict[str, str] = {
    "small": "padding:0.5rem 1rem;font-size:0.875rem",
    "medium": "padding:0.75rem 1.5rem;font-size:1rem",
    "large": "padding:1rem 2rem;font-size:1.125rem",
}
