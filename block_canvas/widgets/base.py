"""
Widget — état transitoire d'un bloc interactif.

Le widget lit le bloc (jamais ne l'écrit) et expose une vue immuable que le
renderer du type consomme. Cycle de vie explicite :

    widget.mount()        # timers / listeners autorisés
    widget.sync(block)    # contenu modifié dans le store
    widget.unmount()      # tout timer annulé, tout listener détaché
"""
import threading
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from ..core.schemas import Block, PageTheme, ResolvedStyle
from ..core.settings import Settings, get_settings
from .keyboard import KeyboardHub


class Widget:
    block_type: str = ""

    def __init__(
        self,
        block: Block,
        scheduler: Optional[BackgroundScheduler] = None,
        keyboard: Optional[KeyboardHub] = None,
        settings: Optional[Settings] = None,
    ):
        self.block = block
        self.scheduler = scheduler
        self.keyboard = keyboard or KeyboardHub()
        self.settings = settings or get_settings()
        self.mounted = False
        # les callbacks de timer tournent dans un thread du scheduler
        self._lock = threading.RLock()

    @property
    def block_id(self) -> str:
        return self.block.id

    def mount(self) -> None:
        self.mounted = True

    def unmount(self) -> None:
        self.mounted = False

    def sync(self, block: Block) -> None:
        self.block = block

    def view(self):
        raise NotImplementedError

    def render(self, style: ResolvedStyle, theme: PageTheme) -> str:
        raise NotImplementedError
