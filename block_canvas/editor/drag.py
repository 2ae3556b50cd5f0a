"""
DragReorderController — geste de glisser-déposer → BlockStore.reorder.

Pendant le drag le store n'est pas touché : `preview()` donne l'ordre
prospectif (retrait de l'id puis insertion à la position de la cible).
Seul `drop()` sur une cible valide commet ; tout le reste annule.

Capteur clavier (bloc focalisé) :
    Espace / Entrée   prendre, puis déposer
    ↑ / ↓             déplacer la cible d'un cran
    Échap             annuler
"""
import logging
from typing import List, Optional

from .store import BlockStore

log = logging.getLogger(__name__)

PICK_KEYS = (" ", "Space", "Enter")


def array_move(ids: List[str], old_index: int, new_index: int) -> List[str]:
    moved = list(ids)
    moved.insert(new_index, moved.pop(old_index))
    return moved


class DragReorderController:
    def __init__(self, store: BlockStore):
        self.store = store
        self.active_id: Optional[str] = None
        self.over_id: Optional[str] = None

    @property
    def dragging(self) -> bool:
        return self.active_id is not None

    def is_dragging(self, block_id: str) -> bool:
        return self.active_id == block_id

    # ── Geste ───────────────────────────────────────────────────────────────

    def start(self, block_id: str) -> bool:
        if block_id not in self.store:
            log.debug("drag ignoré : id inconnu %s", block_id)
            return False
        self.active_id = block_id
        self.over_id = block_id
        return True

    def over(self, target_id: Optional[str]) -> None:
        if self.dragging:
            self.over_id = target_id

    def preview(self) -> List[str]:
        """Ordre des ids si l'on déposait maintenant ; ordre courant sinon."""
        ids = [b.id for b in self.store]
        move = self._move(ids, self.over_id)
        return array_move(ids, *move) if move else ids

    def drop(self, target_id: Optional[str] = None) -> bool:
        """Commet le déplacement ; cible absente ou inconnue → annulation."""
        if not self.dragging:
            return False
        target = target_id if target_id is not None else self.over_id
        ids = [b.id for b in self.store]
        move = self._move(ids, target)
        active = self.active_id
        self.cancel()
        if move is None:
            return False
        self.store.reorder(active, move[1])
        log.debug("Bloc %s déplacé en position %d", active, move[1])
        return True

    def cancel(self) -> None:
        self.active_id = None
        self.over_id = None

    # ── Clavier ─────────────────────────────────────────────────────────────

    def handle_key(self, key: str, focused_id: Optional[str] = None) -> bool:
        if not self.dragging:
            if key in PICK_KEYS and focused_id is not None:
                return self.start(focused_id)
            return False
        if key in PICK_KEYS:
            self.drop()
        elif key == "Escape":
            self.cancel()
        elif key in ("ArrowUp", "ArrowDown"):
            ids = [b.id for b in self.store]
            if self.over_id not in ids:
                self.over_id = self.active_id
            if self.over_id in ids:
                step = -1 if key == "ArrowUp" else 1
                position = max(0, min(ids.index(self.over_id) + step, len(ids) - 1))
                self.over_id = ids[position]
        else:
            return False
        return True

    # ── Interne ─────────────────────────────────────────────────────────────

    def _move(self, ids: List[str], target_id: Optional[str]):
        """(ancien, nouvel) index, ou None si le drag ne peut pas aboutir."""
        if self.active_id not in ids or target_id not in ids:
            return None
        return ids.index(self.active_id), ids.index(target_id)
