"""
GalleryWidget — machine d'états grille / carrousel / lightbox.

    Grid ──click(i)──▶ LightboxOpen(i, return_to=Grid)
    CarouselBrowsing(i) ──next/prev──▶ CarouselBrowsing((i ± 1) mod n)
    CarouselBrowsing(i) ──click(i)──▶ LightboxOpen(i, return_to=CarouselBrowsing(i))
    LightboxOpen ──Escape / fond──▶ return_to

Le clavier n'est écouté que pendant LightboxOpen. L'autoplay ne tourne que
monté, visible, en carrousel, avec plus d'une image et hors lightbox.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..blocks.gallery import (
    GalleryView,
    carousel_autoplay,
    gallery_images,
    gallery_layout,
    lightbox_enabled,
    render_gallery,
)
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import Widget
from .timers import IntervalTimer

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    pass


@dataclass(frozen=True)
class CarouselBrowsing:
    index: int = 0


@dataclass(frozen=True)
class LightboxOpen:
    index: int
    return_to: Union[Grid, CarouselBrowsing]


GalleryState = Union[Grid, CarouselBrowsing, LightboxOpen]


class GalleryWidget(Widget):
    block_type = "gallery"

    def __init__(self, block: Block, **kwargs):
        super().__init__(block, **kwargs)
        self.state: GalleryState = self._initial_state()
        self.autoplay = carousel_autoplay(block)
        self.visible = True
        self._timer = IntervalTimer(f"gallery-{block.id}", self.scheduler)
        self._key_token: Optional[int] = None

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def count(self) -> int:
        return len(gallery_images(self.block))

    @property
    def index(self) -> Optional[int]:
        return getattr(self.state, "index", None)

    @property
    def autoplay_active(self) -> bool:
        return self._timer.active

    @property
    def listening(self) -> bool:
        return self._key_token is not None

    def view(self) -> GalleryView:
        state = self.state
        base = state.return_to if isinstance(state, LightboxOpen) else state
        return GalleryView(
            carousel_index=base.index if isinstance(base, CarouselBrowsing) else 0,
            lightbox_index=state.index if isinstance(state, LightboxOpen) else None,
            autoplay=self.autoplay_active,
        )

    def render(self, style: ResolvedStyle, theme: PageTheme) -> str:
        return render_gallery(self.block, style, theme, self.view())

    # ── Cycle de vie ────────────────────────────────────────────────────────

    def mount(self) -> None:
        with self._lock:
            super().mount()
            self._refresh_autoplay()

    def unmount(self) -> None:
        with self._lock:
            self._timer.cancel()
            self._stop_listening()
            if isinstance(self.state, LightboxOpen):
                self.state = self.state.return_to
            super().unmount()

    def set_visible(self, visible: bool) -> None:
        with self._lock:
            self.visible = visible
            self._refresh_autoplay()

    def set_autoplay(self, enabled: bool) -> None:
        with self._lock:
            self.autoplay = enabled
            self._refresh_autoplay()

    def sync(self, block: Block) -> None:
        """Nouveau contenu : repart de l'état initial quand le layout change
        ou que la liste passe par zéro image ; borne l'index sinon."""
        with self._lock:
            old_layout, old_count = gallery_layout(self.block), self.count
            super().sync(block)
            self.autoplay = carousel_autoplay(block)
            n = self.count
            if n == 0 or old_count == 0 or gallery_layout(block) != old_layout:
                self._leave_lightbox()
                self.state = self._initial_state()
            else:
                self.state = self._clamped(self.state, n)
            self._refresh_autoplay()

    # ── Transitions ─────────────────────────────────────────────────────────

    def click_image(self, index: int) -> bool:
        """Ouvre la lightbox ; ignoré si désactivée, hors bornes ou image liée."""
        with self._lock:
            images = gallery_images(self.block)
            if not lightbox_enabled(self.block) or not 0 <= index < len(images):
                return False
            if images[index].get("link") or isinstance(self.state, LightboxOpen):
                return False
            self.state = LightboxOpen(index, return_to=self.state)
            self._start_listening()
            self._refresh_autoplay()
            return True

    def next(self) -> None:
        self._step(1)

    def previous(self) -> None:
        self._step(-1)

    def close(self) -> None:
        """Escape ou clic sur le fond : retour à l'état d'avant la lightbox."""
        with self._lock:
            if self._leave_lightbox():
                self._refresh_autoplay()

    def handle_key(self, key: str) -> bool:
        if not isinstance(self.state, LightboxOpen):
            return False
        if key == "ArrowRight":
            self.next()
        elif key == "ArrowLeft":
            self.previous()
        elif key == "Escape":
            self.close()
        else:
            return False
        return True

    def tick(self) -> None:
        """Avance automatique du carrousel (callback du timer)."""
        with self._lock:
            n = self.count
            if isinstance(self.state, CarouselBrowsing) and n > 1:
                self.state = CarouselBrowsing((self.state.index + 1) % n)

    # ── Interne ─────────────────────────────────────────────────────────────

    def _initial_state(self) -> Union[Grid, CarouselBrowsing]:
        if gallery_layout(self.block) == "carousel" and gallery_images(self.block):
            return CarouselBrowsing(0)
        return Grid()

    def _clamped(self, state: GalleryState, n: int) -> GalleryState:
        if isinstance(state, CarouselBrowsing):
            return CarouselBrowsing(min(state.index, n - 1))
        if isinstance(state, LightboxOpen):
            return LightboxOpen(min(state.index, n - 1), self._clamped(state.return_to, n))
        return state

    def _step(self, delta: int) -> None:
        with self._lock:
            n = self.count
            if n == 0:
                return
            state = self.state
            if isinstance(state, LightboxOpen):
                self.state = LightboxOpen((state.index + delta) % n, state.return_to)
            elif isinstance(state, CarouselBrowsing):
                self.state = CarouselBrowsing((state.index + delta) % n)
                # navigation manuelle : l'intervalle repart de zéro
                self._timer.cancel()
                self._refresh_autoplay()

    def _leave_lightbox(self) -> bool:
        if not isinstance(self.state, LightboxOpen):
            return False
        self.state = self.state.return_to
        self._stop_listening()
        return True

    def _start_listening(self) -> None:
        if self._key_token is None:
            self._key_token = self.keyboard.attach(self.handle_key)

    def _stop_listening(self) -> None:
        if self._key_token is not None:
            self.keyboard.detach(self._key_token)
            self._key_token = None

    def _refresh_autoplay(self) -> None:
        wanted = (
            self.mounted
            and self.visible
            and self.autoplay
            and isinstance(self.state, CarouselBrowsing)
            and self.count > 1
        )
        if wanted and not self._timer.active:
            self._timer.start(self.settings.autoplay_seconds, self.tick)
            log.debug("Autoplay galerie %s : toutes les %.1fs", self.block_id, self.settings.autoplay_seconds)
        elif not wanted and self._timer.active:
            self._timer.cancel()
