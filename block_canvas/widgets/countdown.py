"""CountdownWidget — temps restant rafraîchi chaque seconde tant que monté."""
import datetime as dt
import logging
from typing import Callable, Optional

from ..blocks.countdown import CountdownView, countdown_view, render_countdown
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import Widget
from .timers import IntervalTimer

log = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class CountdownWidget(Widget):
    block_type = "countdown"

    def __init__(self, block: Block, clock: Optional[Clock] = None, **kwargs):
        super().__init__(block, **kwargs)
        self.clock = clock or utc_now
        self._timer = IntervalTimer(f"countdown-{block.id}", self.scheduler)
        self._view = countdown_view(block, self.clock())

    @property
    def ticking(self) -> bool:
        return self._timer.active

    def view(self) -> CountdownView:
        return self._view

    def render(self, style: ResolvedStyle, theme: PageTheme) -> str:
        return render_countdown(self.block, style, theme, self.view())

    def mount(self) -> None:
        with self._lock:
            super().mount()
            self.tick()

    def unmount(self) -> None:
        with self._lock:
            self._timer.cancel()
            super().unmount()

    def sync(self, block: Block) -> None:
        with self._lock:
            super().sync(block)
            self.tick()

    def tick(self) -> None:
        """Recalcule la vue ; le timer s'arrête une fois la date atteinte."""
        with self._lock:
            self._view = countdown_view(self.block, self.clock())
            running = self.mounted and self._view.configured and not self._view.expired
            if running and not self._timer.active:
                self._timer.start(self.settings.countdown_tick_seconds, self.tick)
            elif not running and self._timer.active:
                self._timer.cancel()
                if self._view.expired:
                    log.debug("Compte à rebours %s terminé", self.block_id)
