"""
Schémas Pydantic du Block Canvas.
Structure plate : Page → Block[] + PageTheme

Le format d'échange (palette, templates, persistance, rendu public) est en
camelCase ; les champs Python sont en snake_case (alias générés).
Tous les champs du thème sont optionnels : l'absence retombe toujours sur un
défaut codé en dur (voir style.resolver).
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base camelCase — clés inconnues ignorées, jamais d'erreur."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ── Block ───────────────────────────────────────────────────────────────────

class BlockType(str, Enum):
    """Énumération fermée des types de blocs connus de la palette."""
    PROFILE = "profile"
    LINK_BUTTON = "linkButton"
    HEADER = "header"
    FOOTER = "footer"
    HEADING = "heading"
    TEXT = "text"
    BUTTON = "button"
    IMAGE = "image"
    SPACER = "spacer"
    DIVIDER = "divider"
    VIDEO = "video"
    GALLERY = "gallery"
    FORM = "form"
    COUNTDOWN = "countdown"
    CALENDAR = "calendar"
    TESTIMONIAL = "testimonial"
    FAQ = "faq"
    PRICING = "pricing"
    FEATURES = "features"
    STATS = "stats"
    MAP = "map"
    HERO = "hero"
    PAYMENT = "payment"
    PRODUCT = "product"
    SHOP = "shop"
    REAL_ESTATE = "real-estate"
    MENU = "menu"
    ARTIST = "artist"
    DEALS = "deals"
    SCHEDULE = "schedule"
    SOCIAL = "social"
    EVENTS = "events"


KNOWN_BLOCK_TYPES = frozenset(t.value for t in BlockType)


class Block(BaseModel):
    """
    Unité atomique de la page.

    `type` accepte n'importe quelle chaîne : un type inconnu doit atteindre le
    placeholder du registry, pas échouer à la validation.
    `content`/`style` ne sont interprétés que par le renderer du type.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: str
    content: Dict[str, Any] = Field(default_factory=dict)
    style: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("style", "styles"),
    )

    @field_validator("content", "style", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return {} if v is None else v

    @property
    def is_known_type(self) -> bool:
        return self.type in KNOWN_BLOCK_TYPES


# ── Thème : background (union discriminée par `type`) ───────────────────────

class SolidBackground(CamelModel):
    type: Literal["solid"] = "solid"
    color: Optional[str] = None


class GradientBackground(CamelModel):
    type: Literal["gradient"] = "gradient"
    gradient_from: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("gradientFrom", "from", "gradient_from"),
    )
    gradient_to: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("gradientTo", "to", "gradient_to"),
    )
    gradient_via: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("gradientVia", "via", "gradient_via"),
    )
    gradient_direction: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gradientDirection", "direction", "gradient_direction"),
    )


class PatternBackground(CamelModel):
    type: Literal["pattern"] = "pattern"
    color: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("baseColor", "color"),
    )
    pattern: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("pattern", "patternType"),
    )
    pattern_color: Optional[str] = None
    pattern_opacity: Optional[float] = None
    pattern_size: Optional[str] = None


class ImageBackground(CamelModel):
    type: Literal["image"] = "image"
    image_url: Optional[str] = None
    image_opacity: Optional[float] = None
    image_position: Optional[str] = None
    image_fit: Optional[str] = None
    color: Optional[str] = None


class VideoBackground(CamelModel):
    type: Literal["video"] = "video"
    video_url: Optional[str] = None
    video_opacity: Optional[float] = None
    video_loop: Optional[bool] = None
    video_muted: Optional[bool] = None
    color: Optional[str] = None


BackgroundUnion = Annotated[
    Union[
        SolidBackground,
        GradientBackground,
        PatternBackground,
        ImageBackground,
        VideoBackground,
    ],
    Field(discriminator="type"),
]


# ── Thème : autres sections ─────────────────────────────────────────────────

class TypographyTheme(CamelModel):
    title_font: Optional[str] = None
    title_color: Optional[str] = None
    title_size: Optional[str] = None
    title_weight: Optional[str] = None
    title_align: Optional[str] = None
    body_font: Optional[str] = None
    body_color: Optional[str] = None
    body_size: Optional[str] = None
    body_weight: Optional[str] = None
    body_align: Optional[str] = None
    link_color: Optional[str] = None
    link_hover_color: Optional[str] = None


class ButtonTheme(CamelModel):
    size: Optional[str] = None
    style: Optional[str] = None
    variant: Optional[str] = None  # déprécié, `style` prioritaire
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    border_radius: Optional[Union[str, int]] = None
    border_width: Optional[str] = None
    border_color: Optional[str] = None
    shadow: Optional[str] = None
    hover_effect: Optional[str] = None


class BrandingTheme(CamelModel):
    logo_url: Optional[str] = None
    logo_position: Optional[str] = None
    logo_size: Optional[str] = None
    logo_link: Optional[str] = None
    logo_alt: Optional[str] = None
    favicon_url: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    site_name: Optional[str] = None
    tagline: Optional[str] = None
    copyright_text: Optional[str] = None


class LayoutTheme(CamelModel):
    max_width: Optional[Union[str, int]] = None
    padding: Optional[str] = None
    spacing: Optional[str] = None


class HeaderTheme(CamelModel):
    style: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    avatar_size: Optional[str] = None
    avatar_shape: Optional[str] = None
    alignment: Optional[str] = None


class FooterTheme(CamelModel):
    style: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    show_branding: Optional[bool] = None
    custom_text: Optional[str] = None
    alignment: Optional[str] = None
    border_top: Optional[bool] = None


class PageTheme(CamelModel):
    """
    Défauts en cascade pour toute la page.
    Remplacé en bloc (jamais fusionné au stockage) — la fusion n'a lieu que
    dans le Style Resolver, au rendu.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    background: Optional[BackgroundUnion] = None
    typography: TypographyTheme = Field(default_factory=TypographyTheme)
    button: ButtonTheme = Field(default_factory=ButtonTheme)
    branding: BrandingTheme = Field(default_factory=BrandingTheme)
    layout: LayoutTheme = Field(default_factory=LayoutTheme)
    header: HeaderTheme = Field(default_factory=HeaderTheme)
    footer: FooterTheme = Field(default_factory=FooterTheme)

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_layout(cls, data: Any) -> Any:
        """Les anciens thèmes portent maxWidth/padding/spacing à la racine."""
        if not isinstance(data, dict) or "layout" in data:
            return data
        flat = {k: data[k] for k in ("maxWidth", "padding", "spacing") if k in data}
        if flat:
            data = {**data, "layout": flat}
        return data

    def fingerprint(self) -> str:
        """Empreinte stable du thème (clé de mémoïsation)."""
        return self.model_dump_json(exclude_none=True)


# ── Page ────────────────────────────────────────────────────────────────────

class Page(BaseModel):
    """Page complète : séquence ordonnée de blocs + thème."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    blocks: List[Block] = Field(default_factory=list)
    theme: PageTheme = Field(default_factory=PageTheme)

    @field_validator("blocks")
    @classmethod
    def _unique_ids(cls, blocks: List[Block]) -> List[Block]:
        seen = set()
        for b in blocks:
            if b.id in seen:
                raise ValueError(f"id de bloc dupliqué : {b.id!r}")
            seen.add(b.id)
        return blocks


# ── ResolvedStyle ───────────────────────────────────────────────────────────

class HoverRecipe(BaseModel):
    """État hover dérivé (donnée, pas de CSS généré à la volée)."""
    model_config = ConfigDict(frozen=True)

    background: Optional[str] = None
    color: Optional[str] = None
    box_shadow: Optional[str] = None
    filter: Optional[str] = None
    opacity: Optional[float] = None
    transform: Optional[str] = None


class ResolvedStyle(BaseModel):
    """
    Spécification visuelle finale d'un bloc pour un rendu.
    Plate, concrète, sans référence au thème ni aux overrides.
    Éphémère : recalculée à chaque changement, jamais stockée sur le Block.
    """
    model_config = ConfigDict(frozen=True)

    variant: str = "fill"
    background: str = "#8b5cf6"
    text_color: str = "#ffffff"
    border: str = "2px solid #8b5cf6"
    border_radius: int = 8
    box_shadow: str = "none"
    backdrop_filter: Optional[str] = None
    hover: HoverRecipe = HoverRecipe()
    hover_transform: Optional[str] = None
    animation: Optional[str] = None
    alignment: str = "center"
    title_font: str = "'Inter', sans-serif"
    body_font: str = "'Inter', sans-serif"
    title_color: str = "#1f2937"
    body_color: str = "#4b5563"
    accent_color: str = "#8b5cf6"
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    letter_spacing: Optional[str] = None
    text_shadow: str = "none"
    gradient_text: Optional[str] = None
    decoration: Optional[str] = None
    block_spacing: int = 16

    def css(self, *pairs: tuple) -> str:
        """Concatène des paires (propriété, valeur) non vides en style inline."""
        return ";".join(f"{k}:{v}" for k, v in pairs if v not in (None, ""))
