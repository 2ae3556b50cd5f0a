"""
Taxonomie d'erreurs du Block Canvas.

Seules les erreurs de programmation (type inconnu ajouté depuis la palette,
ids dupliqués dans un remplacement en masse) remontent à l'appelant.
Les erreurs de rendu sont traitées localement et dégradées en placeholder.
"""


class CanvasError(Exception):
    """Erreur de base du Block Canvas."""


class UnknownBlockTypeError(CanvasError, ValueError):
    """Type de bloc hors de l'énumération BlockType."""

    def __init__(self, block_type: str):
        super().__init__(f"Type de bloc inconnu : {block_type!r}")
        self.block_type = block_type


class DuplicateBlockIdError(CanvasError, ValueError):
    """Deux blocs partagent le même id dans une séquence."""

    def __init__(self, block_id: str):
        super().__init__(f"id de bloc dupliqué : {block_id!r}")
        self.block_id = block_id


class RendererLoadError(CanvasError):
    """Échec du chargement à la demande d'un module de rendu."""

    def __init__(self, block_type: str, target: str, cause: Exception):
        super().__init__(f"Renderer {block_type!r} ({target}) non chargé : {cause}")
        self.block_type = block_type
        self.target = target
        self.cause = cause


class UnknownPatternError(CanvasError, ValueError):
    """Type de motif de fond hors de la liste supportée."""
