"""Éditeur — store des blocs, drag-reorder, canvas."""
from .store import BlockStore
from .drag import DragReorderController, array_move
from .side_effects import DocumentHead, ThemeSideEffects, document_head
from .canvas import Canvas, EMPTY_STATE

__all__ = [
    "BlockStore",
    "DragReorderController", "array_move",
    "DocumentHead", "ThemeSideEffects", "document_head",
    "Canvas", "EMPTY_STATE",
]
