"""
Registry des renderers : type de bloc → fonction de rendu.

Deux sortes de slots :
  - eager : fonction importée au démarrage (blocs légers, fréquents)
  - lazy  : chemin "module:fonction" chargé par importlib à la première demande

    registry = default_registry()
    registry.render(block, resolve(block, theme), theme)             # charge si besoin
    registry.render(block, style, theme, load=False)                 # placeholder tant que non chargé

Un type inconnu rend le placeholder "type inconnu" ; un échec de chargement
est journalisé une fois et dégradé vers ce même placeholder.
"""
import importlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

from ..core.errors import RendererLoadError
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import loading_placeholder, unknown_placeholder

log = logging.getLogger(__name__)

_PKG = __name__.rpartition(".")[0]

DEFAULT_MIN_HEIGHT = 40


class LoadState(str, Enum):
    PENDING = "pending"
    READY = "ready"
    ERROR = "error"


@dataclass
class RendererSlot:
    block_type: str
    fn: Optional[Callable] = None
    target: Optional[str] = None  # "paquet.module:fonction"
    min_height: int = DEFAULT_MIN_HEIGHT
    state: LoadState = LoadState.PENDING
    error: Optional[RendererLoadError] = None

    def __post_init__(self):
        if self.fn is not None:
            self.state = LoadState.READY
        elif not self.target:
            raise ValueError(f"Slot {self.block_type!r} : fonction ou cible requise")

    @property
    def lazy(self) -> bool:
        return self.target is not None

    def load(self) -> Optional[Callable]:
        """Importe la cible une seule fois ; None si le chargement a échoué."""
        if self.state is LoadState.READY:
            return self.fn
        if self.state is LoadState.ERROR:
            return None
        module_name, _, attr = self.target.partition(":")
        try:
            self.fn = getattr(importlib.import_module(module_name), attr)
        except Exception as e:
            self.state = LoadState.ERROR
            self.error = RendererLoadError(self.block_type, self.target, e)
            log.warning("Renderer %s non chargé (%s) : %s", self.block_type, self.target, e)
            return None
        self.state = LoadState.READY
        log.debug("Renderer %s chargé depuis %s", self.block_type, self.target)
        return self.fn


class RendererRegistry:
    def __init__(self):
        self._slots: Dict[str, RendererSlot] = {}

    # ── Enregistrement ──────────────────────────────────────────────────────

    def register(self, block_type: str, fn: Callable, min_height: int = DEFAULT_MIN_HEIGHT) -> None:
        self._slots[block_type] = RendererSlot(block_type, fn=fn, min_height=min_height)

    def register_lazy(self, block_type: str, target: str, min_height: int = DEFAULT_MIN_HEIGHT) -> None:
        self._slots[block_type] = RendererSlot(block_type, target=target, min_height=min_height)

    # ── Lecture ─────────────────────────────────────────────────────────────

    def __contains__(self, block_type: str) -> bool:
        return block_type in self._slots

    def types(self) -> list:
        return list(self._slots)

    def slot(self, block_type: str) -> Optional[RendererSlot]:
        return self._slots.get(block_type)

    def is_lazy(self, block_type: str) -> bool:
        slot = self._slots.get(block_type)
        return bool(slot and slot.lazy)

    def state(self, block_type: str) -> Optional[LoadState]:
        slot = self._slots.get(block_type)
        return slot.state if slot else None

    # ── Chargement ──────────────────────────────────────────────────────────

    def load(self, block_type: str) -> bool:
        slot = self._slots.get(block_type)
        return bool(slot and slot.load())

    def load_all(self, block_types: Optional[Iterable[str]] = None) -> Dict[str, LoadState]:
        """Charge les slots demandés (tous par défaut) ; retourne leur état."""
        wanted = self._slots if block_types is None else set(block_types)
        states = {}
        for block_type in wanted:
            slot = self._slots.get(block_type)
            if slot is None:
                continue
            slot.load()
            states[block_type] = slot.state
        return states

    # ── Rendu ───────────────────────────────────────────────────────────────

    def render(self, block: Block, style: ResolvedStyle, theme: PageTheme, load: bool = True, view=None) -> str:
        """
        Fragment HTML du bloc. Les exceptions levées par le renderer lui-même
        remontent : c'est le Canvas qui les confine bloc par bloc.
        """
        slot = self._slots.get(block.type)
        if slot is None:
            return unknown_placeholder(block.type)
        if slot.state is LoadState.PENDING and not load:
            return loading_placeholder(block.type, slot.min_height)
        fn = slot.load()
        if fn is None:
            return unknown_placeholder(block.type)
        if view is not None:
            return fn(block, style, theme, view)
        return fn(block, style, theme)


# ── Table par défaut ────────────────────────────────────────────────────────

# type → (module relatif, fonction, hauteur du placeholder de chargement)
LAZY_RENDERERS = {
    "gallery":     ("gallery", "render_gallery", 240),
    "video":       ("video", "render_video", 240),
    "countdown":   ("countdown", "render_countdown", 120),
    "calendar":    ("events", "render_calendar", 160),
    "events":      ("events", "render_events", 160),
    "testimonial": ("marketing", "render_testimonial", 160),
    "pricing":     ("marketing", "render_pricing", 240),
    "map":         ("map", "render_map", 300),
    "schedule":    ("schedule", "render_schedule", 320),
    "shop":        ("commerce", "render_shop", 240),
    "product":     ("commerce", "render_product", 200),
    "payment":     ("commerce", "render_payment", 160),
    "real-estate": ("verticals", "render_real_estate", 240),
    "menu":        ("verticals", "render_menu", 200),
    "artist":      ("verticals", "render_artist", 200),
    "deals":       ("verticals", "render_deals", 160),
}


def default_registry() -> RendererRegistry:
    """Table complète : blocs légers eager, blocs lourds/rares lazy."""
    from .button import render_button
    from .footer import render_footer, render_social
    from .form import render_form
    from .heading import render_heading
    from .image import render_image
    from .layout import render_divider, render_spacer
    from .link_button import render_link_button
    from .marketing import render_faq, render_features, render_hero, render_stats
    from .profile import render_header, render_profile
    from .text import render_text

    registry = RendererRegistry()
    registry.register("profile", render_profile, min_height=60)
    registry.register("linkButton", render_link_button)
    registry.register("header", render_header)
    registry.register("footer", render_footer)
    registry.register("heading", render_heading)
    registry.register("text", render_text)
    registry.register("button", render_button)
    registry.register("image", render_image)
    registry.register("spacer", render_spacer)
    registry.register("divider", render_divider)
    registry.register("form", render_form)
    registry.register("faq", render_faq)
    registry.register("features", render_features)
    registry.register("stats", render_stats)
    registry.register("hero", render_hero)
    registry.register("social", render_social)
    for block_type, (module, attr, min_height) in LAZY_RENDERERS.items():
        registry.register_lazy(block_type, f"{_PKG}.{module}:{attr}", min_height=min_height)
    return registry
