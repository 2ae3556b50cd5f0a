"""
KeyboardHub — écouteur clavier global de la page.

Les widgets s'y abonnent le temps d'un état (lightbox ouverte) et s'en
détachent en le quittant : aucun listener ne survit à l'état qui l'a posé.
Le dernier attaché est servi en premier ; il retourne True s'il a consommé
la touche.
"""
import itertools
import logging
from typing import Callable, Dict

log = logging.getLogger(__name__)

KeyListener = Callable[[str], bool]


class KeyboardHub:
    def __init__(self):
        self._listeners: Dict[int, KeyListener] = {}
        self._tokens = itertools.count(1)

    def attach(self, listener: KeyListener) -> int:
        token = next(self._tokens)
        self._listeners[token] = listener
        log.debug("Listener clavier %d attaché (%d actif(s))", token, len(self._listeners))
        return token

    def detach(self, token: int) -> None:
        """Idempotent : détacher deux fois le même jeton est sans effet."""
        if self._listeners.pop(token, None) is not None:
            log.debug("Listener clavier %d détaché", token)

    def dispatch(self, key: str) -> bool:
        for token in sorted(self._listeners, reverse=True):
            listener = self._listeners.get(token)
            if listener is not None and listener(key):
                return True
        return False

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
