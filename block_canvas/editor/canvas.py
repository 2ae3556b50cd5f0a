"""
Canvas — racine de composition.

Pour chaque bloc du store, dans l'ordre :
  1. style résolu (mémoïsé par génération de thème + empreinte du bloc)
  2. widget interactif monté si le type en a un (gallery, countdown, form)
  3. renderer du registry (placeholder si inconnu / en chargement)
  4. habillage éditeur : sélection, suppression, poignée de drag

L'échec d'un bloc est confiné à ce bloc (placeholder d'erreur) ; ses voisins
rendent normalement. En lecture seule, aucun habillage éditeur.
"""
import logging
from typing import Dict, Iterable, Optional, Tuple

from apscheduler.schedulers.background import BackgroundScheduler

from ..blocks.base import error_placeholder, esc, style_attr
from ..blocks.registry import LoadState, RendererRegistry, default_registry
from ..core.schemas import Block, PageTheme, ResolvedStyle
from ..core.settings import Settings, get_settings
from ..style import recipes
from ..style.resolver import resolve
from ..widgets import WIDGETS, KeyboardHub, Widget
from .drag import DragReorderController
from .side_effects import DocumentHead, ThemeSideEffects
from .store import BlockStore, Snapshot

log = logging.getLogger(__name__)

EMPTY_STATE = """<div class="bc-empty">
  <h2 class="bc-empty__title">Get Started</h2>
  <p class="bc-empty__hint">Add your first block from the palette to start building your page.</p>
</div>"""


class Canvas:
    def __init__(
        self,
        store: BlockStore,
        theme: Optional[PageTheme] = None,
        registry: Optional[RendererRegistry] = None,
        read_only: bool = False,
        scheduler: Optional[BackgroundScheduler] = None,
        keyboard: Optional[KeyboardHub] = None,
        side_effects: Optional[ThemeSideEffects] = None,
        settings: Optional[Settings] = None,
    ):
        self.store = store
        self.theme = theme or PageTheme()
        self.registry = registry or default_registry()
        self.read_only = read_only
        self.scheduler = scheduler
        self.keyboard = keyboard or KeyboardHub()
        self.settings = settings or get_settings()
        self.side_effects = side_effects or ThemeSideEffects()
        self.drag = DragReorderController(store)

        self._generation = 0
        self._styles: Dict[str, Tuple[int, str, ResolvedStyle]] = {}
        self._widgets: Dict[str, Widget] = {}
        self._unsubscribe = store.subscribe(self._on_blocks_changed)
        self.side_effects.apply(self.theme)

    # ── Thème / blocs ───────────────────────────────────────────────────────

    @property
    def head(self) -> DocumentHead:
        return self.side_effects.head

    @property
    def generation(self) -> int:
        return self._generation

    def set_theme(self, theme: PageTheme) -> None:
        """Remplacement complet ; les styles mémoïsés de l'ancien thème tombent."""
        self.theme = theme
        self._invalidate()
        self.side_effects.apply(theme)

    def replace_blocks(self, blocks: Iterable[Block]) -> Snapshot:
        snapshot = self.store.replace_all(blocks)
        self._invalidate()
        return snapshot

    def _invalidate(self) -> None:
        self._generation += 1
        self._styles.clear()
        log.debug("Cache de styles invalidé (génération %d)", self._generation)

    def resolved_style(self, block: Block) -> ResolvedStyle:
        fingerprint = block.model_dump_json(include={"type", "content", "style"})
        cached = self._styles.get(block.id)
        if cached and cached[0] == self._generation and cached[1] == fingerprint:
            return cached[2]
        style = resolve(block, self.theme)
        self._styles[block.id] = (self._generation, fingerprint, style)
        return style

    # ── Widgets ─────────────────────────────────────────────────────────────

    def widget(self, block_id: str) -> Optional[Widget]:
        return self._widgets.get(block_id)

    def _widget_for(self, block: Block) -> Optional[Widget]:
        widget = self._widgets.get(block.id)
        if widget is None:
            cls = WIDGETS.get(block.type)
            if cls is None:
                return None
            widget = cls(block, scheduler=self.scheduler, keyboard=self.keyboard, settings=self.settings)
            self._widgets[block.id] = widget
            widget.mount()
        return widget

    def _on_blocks_changed(self, snapshot: Snapshot) -> None:
        current = {b.id: b for b in snapshot}
        for block_id in list(self._widgets):
            block = current.get(block_id)
            widget = self._widgets[block_id]
            if block is None or block.type != widget.block_type:
                widget.unmount()
                del self._widgets[block_id]
            elif block is not widget.block:
                widget.sync(block)
        for block_id in list(self._styles):
            if block_id not in current:
                del self._styles[block_id]

    def close(self) -> None:
        """Démonte tous les widgets (timers annulés, listeners détachés)."""
        for widget in self._widgets.values():
            widget.unmount()
        self._widgets.clear()
        self._unsubscribe()
        self.drag.cancel()

    # ── Rendu ───────────────────────────────────────────────────────────────

    def load_pending(self) -> Dict[str, LoadState]:
        """Charge les renderers lazy utilisés par la page."""
        lazy = {b.type for b in self.store if self.registry.is_lazy(b.type)}
        return self.registry.load_all(lazy)

    def render_block(self, block_id: str, load: bool = True) -> str:
        block = self.store.get(block_id)
        if block is None:
            return ""
        return self._render_one(block, load)

    def render(self, load: bool = True) -> str:
        blocks = self.store.blocks
        if blocks:
            body = "\n".join(self._render_one(b, load) for b in blocks)
        else:
            body = EMPTY_STATE
        spacing = recipes.pick(recipes.SPACING_DENSITY, self.theme.layout.spacing, "normal")
        max_width = self.theme.layout.max_width
        if isinstance(max_width, int):
            max_width = f"{max_width}px"
        attrs = style_attr(("max-width", max_width or "680px"), ("gap", f"{spacing}px"))
        mode = "bc-canvas--readonly" if self.read_only else "bc-canvas--editing"
        return f'<main class="bc-canvas {mode}"{attrs}>\n{body}\n</main>'

    def _render_one(self, block: Block, load: bool) -> str:
        try:
            style = self.resolved_style(block)
            widget = self._widget_for(block)
            view = widget.view() if widget is not None else None
            inner = self.registry.render(block, style, self.theme, load=load, view=view)
        except Exception:
            log.exception("Rendu du bloc %s (%s) en échec", block.id, block.type)
            inner = error_placeholder(block.type)
        return self._wrap(block, inner)

    def _wrap(self, block: Block, inner: str) -> str:
        attrs = f'data-block-id="{esc(block.id)}" data-block-type="{esc(block.type)}"'
        if self.read_only:
            return f'<div class="bc-block" {attrs}>{inner}</div>'
        classes = ["bc-block", "bc-block--editable"]
        if self.store.selected_id == block.id:
            classes.append("bc-block--selected")
        if self.drag.is_dragging(block.id):
            classes.append("bc-block--dragging")
        return f"""<div class="{" ".join(classes)}" {attrs} tabindex="0">
  <div class="bc-block__toolbar">
    <button type="button" class="bc-block__handle" data-action="drag" aria-label="Drag to reorder">⋮⋮</button>
    <button type="button" class="bc-block__delete" data-action="delete" aria-label="Delete block">×</button>
  </div>
  {inner}
</div>"""

    # ── Interactions éditeur ────────────────────────────────────────────────

    def select(self, block_id: Optional[str]) -> None:
        if not self.read_only:
            self.store.select(block_id)

    def delete(self, block_id: str) -> None:
        if not self.read_only:
            self.store.remove(block_id)

    def dispatch_key(self, key: str) -> bool:
        """Clavier global : d'abord les widgets (lightbox), puis le drag clavier."""
        if self.keyboard.dispatch(key):
            return True
        if self.read_only:
            return False
        return self.drag.handle_key(key, self.store.selected_id)
