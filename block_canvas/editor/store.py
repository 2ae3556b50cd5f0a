"""
BlockStore — séquence ordonnée des blocs, seule source de vérité.

Toute mutation passe par les opérations du store et publie exactement un
nouvel instantané (tuple immuable) aux abonnés :

    store = BlockStore()
    unsubscribe = store.subscribe(lambda blocks: ...)
    block = store.add("heading")
    store.patch(block.id, content={"text": "Bonjour"})
    store.reorder(block.id, 0)

Les ids (uuid4 hex) ne sont jamais réutilisés, même après suppression.
Un id inconnu est un no-op (journalisé en debug), jamais une erreur.
"""
import logging
import threading
import uuid
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..core.defaults import default_content
from ..core.errors import DuplicateBlockIdError, UnknownBlockTypeError
from ..core.schemas import Block, KNOWN_BLOCK_TYPES

log = logging.getLogger(__name__)

Snapshot = Tuple[Block, ...]
Listener = Callable[[Snapshot], None]


class BlockStore:
    def __init__(self, blocks: Optional[Iterable[Block]] = None):
        self._lock = threading.RLock()
        self._blocks: Snapshot = ()
        self._retired: Set[str] = set()
        self._listeners: Dict[int, Listener] = {}
        self._next_token = 0
        self._selected: Optional[str] = None
        if blocks is not None:
            self._blocks = self._checked(blocks)

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def blocks(self) -> Snapshot:
        return self._blocks

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __contains__(self, block_id: str) -> bool:
        return self.index_of(block_id) is not None

    def get(self, block_id: str) -> Optional[Block]:
        for b in self._blocks:
            if b.id == block_id:
                return b
        return None

    def index_of(self, block_id: str) -> Optional[int]:
        for i, b in enumerate(self._blocks):
            if b.id == block_id:
                return i
        return None

    # ── Abonnement ──────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    # ── Mutations ───────────────────────────────────────────────────────────

    def add(self, block_type: str, index: Optional[int] = None) -> Block:
        """Nouveau bloc au contenu par défaut, en fin de page (ou à `index`)."""
        if block_type not in KNOWN_BLOCK_TYPES:
            raise UnknownBlockTypeError(block_type)
        with self._lock:
            block = Block(id=self._new_id(), type=block_type, content=default_content(block_type), style={})
            blocks = list(self._blocks)
            position = len(blocks) if index is None else max(0, min(index, len(blocks)))
            blocks.insert(position, block)
            self._commit(blocks)
            log.debug("Bloc %s ajouté (%s) en position %d", block.id, block_type, position)
            return block

    def remove(self, block_id: str) -> Snapshot:
        with self._lock:
            blocks = [b for b in self._blocks if b.id != block_id]
            if len(blocks) == len(self._blocks):
                log.debug("remove : id inconnu %s", block_id)
                return self._blocks
            self._retired.add(block_id)
            if self._selected == block_id:
                self._selected = None
            return self._commit(blocks)

    def reorder(self, block_id: str, new_index: int) -> Snapshot:
        """Retire le bloc et le réinsère à `new_index` (borné à [0, n-1])."""
        with self._lock:
            old_index = self.index_of(block_id)
            if old_index is None:
                log.debug("reorder : id inconnu %s", block_id)
                return self._blocks
            new_index = max(0, min(new_index, len(self._blocks) - 1))
            if new_index == old_index:
                return self._blocks
            blocks = list(self._blocks)
            blocks.insert(new_index, blocks.pop(old_index))
            return self._commit(blocks)

    def patch(self, block_id: str, content: Optional[dict] = None, style: Optional[dict] = None) -> Snapshot:
        """Fusion superficielle des clés fournies ; les autres restent intactes."""
        with self._lock:
            index = self.index_of(block_id)
            if index is None:
                log.debug("patch : id inconnu %s", block_id)
                return self._blocks
            if not content and not style:
                return self._blocks
            current = self._blocks[index]
            updated = current.model_copy(update={
                "content": {**current.content, **(content or {})},
                "style": {**current.style, **(style or {})},
            })
            blocks = list(self._blocks)
            blocks[index] = updated
            return self._commit(blocks)

    def replace_all(self, blocks: Iterable[Block]) -> Snapshot:
        """Remplacement en masse (template, chargement) ; ids dupliqués refusés."""
        with self._lock:
            checked = self._checked(blocks)
            kept = {b.id for b in checked}
            self._retired.update(b.id for b in self._blocks if b.id not in kept)
            if self._selected not in kept:
                self._selected = None
            return self._commit(list(checked))

    def select(self, block_id: Optional[str]) -> None:
        if block_id is not None and block_id not in self:
            log.debug("select : id inconnu %s", block_id)
            return
        self._selected = block_id

    # ── Interne ─────────────────────────────────────────────────────────────

    def _new_id(self) -> str:
        taken = {b.id for b in self._blocks} | self._retired
        while True:
            block_id = uuid.uuid4().hex
            if block_id not in taken:
                return block_id

    @staticmethod
    def _checked(blocks: Iterable[Block]) -> Snapshot:
        seen: Set[str] = set()
        result: List[Block] = []
        for b in blocks:
            if b.id in seen:
                raise DuplicateBlockIdError(b.id)
            seen.add(b.id)
            result.append(b)
        return tuple(result)

    def _commit(self, blocks: List[Block]) -> Snapshot:
        self._blocks = tuple(blocks)
        snapshot = self._blocks
        for listener in list(self._listeners.values()):
            listener(snapshot)
        return snapshot
