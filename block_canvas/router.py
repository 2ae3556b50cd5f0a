"""
Router FastAPI — aperçu public du Block Canvas (lecture seule).

POST /canvas/render                  → Page JSON → HTMLResponse
POST /canvas/validate                → Page JSON → {"valid": bool, "error"?}
GET  /canvas/catalog                 → types de blocs + contenu par défaut + lazy
POST /canvas/blocks/{block_id}/render → fragment HTML d'un bloc de la page
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from .blocks.registry import LAZY_RENDERERS
from .core.defaults import default_content
from .core.schemas import BlockType, Page
from .renderer.base import Renderer
from .renderer.html import HtmlRenderer

log = logging.getLogger(__name__)

router = APIRouter(prefix="/canvas", tags=["block_canvas"])


def get_renderer() -> Renderer:
    """Renderer utilisé par les routes ; surchargeable via dependency_overrides."""
    return HtmlRenderer()


@router.post("/render", response_class=HTMLResponse, summary="Rend une page en HTML")
def render(page: Page, renderer: Renderer = Depends(get_renderer)) -> HTMLResponse:
    """Reçoit une Page JSON (blocs + thème), retourne le document HTML complet."""
    return HTMLResponse(content=renderer.render_page(page))


@router.post("/validate", summary="Valide une page sans la rendre")
def validate(payload: Dict[str, Any] = Body(...)) -> dict:
    """Valide la structure (ids uniques, thème) ; les types inconnus sont signalés."""
    try:
        page = Page.model_validate(payload)
    except ValidationError as e:
        return {"valid": False, "error": str(e)}
    unknown = sorted({b.type for b in page.blocks if not b.is_known_type})
    if unknown:
        return {"valid": True, "warnings": [f"Type de bloc inconnu : {t}" for t in unknown]}
    return {"valid": True}


@router.get("/catalog", summary="Liste les types de blocs disponibles")
def catalog() -> JSONResponse:
    """Catalogue de la palette : type, contenu par défaut, chargement à la demande."""
    blocks = [
        {
            "type": t.value,
            "default_content": default_content(t.value),
            "lazy": t.value in LAZY_RENDERERS,
        }
        for t in BlockType
    ]
    return JSONResponse({"blocks": blocks})


@router.post("/blocks/{block_id}/render", response_class=HTMLResponse, summary="Rend un bloc seul")
def render_single_block(block_id: str, page: Page, renderer: Renderer = Depends(get_renderer)) -> HTMLResponse:
    block = next((b for b in page.blocks if b.id == block_id), None)
    if block is None:
        raise HTTPException(status_code=404, detail=f"Bloc '{block_id}' introuvable")
    return HTMLResponse(content=renderer.render_block(block, page.theme))
