"""
Router FastAPI : endpoints du panel.

GET /panel/{kind}/{id}/view      → payload de vue (champs lazy évalués)
GET /panel/{kind}/{id}/picker    → ligne de picker
GET /panel/{kind}/{id}/options   → actions permises (tenant compte du verrou)
GET /panel/{kind}/{id}/dropdown  → option de dropdown

Les ids de pages utilisent "+" à la place de "/" (pages/blog+article).
"""
import logging
from typing import Callable, List, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from .core.contracts import ContentModel
from .core.options import PanelOptions
from .panel import PanelModel, panel_for, resolve_lazy, variant_for

log = logging.getLogger(__name__)

ModelResolver = Callable[[str, str], Optional[ContentModel]]


def create_panel_router(resolve_model: ModelResolver, options: Optional[PanelOptions] = None) -> APIRouter:
    """
    Crée le router du panel.

    Args:
        resolve_model: (kind, id) → modèle ou None
        options: Configuration du panel (défaut : PanelOptions.from_env())

    Example:
        >>> app.include_router(create_panel_router(lambda kind, id: site.find(id)))
    """
    router = APIRouter(prefix="/panel", tags=["panel"])
    config = options or PanelOptions.from_env()

    def _panel(kind: str, model_id: str, request: Request) -> PanelModel:
        try:
            variant_for(kind)
        except ValueError as e:
            raise HTTPException(404, str(e))

        model = resolve_model(kind, model_id.replace("+", "/"))
        if model is None:
            raise HTTPException(404, f"Modèle introuvable : {kind}/{model_id}")

        return panel_for(model, options=config, request=request.query_params)

    @router.get("/{kind}/{model_id}/view", summary="Payload de la vue d'édition")
    def view(kind: str, model_id: str, request: Request) -> JSONResponse:
        return JSONResponse(resolve_lazy(_panel(kind, model_id, request).view()))

    @router.get("/{kind}/{model_id}/picker", summary="Ligne de picker")
    def picker(
        kind: str,
        model_id: str,
        request: Request,
        layout: str = "list",
        info: Optional[str] = None,
        text: Optional[str] = None,
    ) -> JSONResponse:
        params = {"layout": layout}
        if info is not None:
            params["info"] = info
        if text is not None:
            params["text"] = text
        return JSONResponse(_panel(kind, model_id, request).picker_data(params))

    @router.get("/{kind}/{model_id}/options", summary="Actions permises")
    def options_(
        kind: str,
        model_id: str,
        request: Request,
        unlock: List[str] = Query(default=[]),
    ) -> JSONResponse:
        return JSONResponse(_panel(kind, model_id, request).options(unlock))

    @router.get("/{kind}/{model_id}/dropdown", summary="Option de dropdown")
    def dropdown(kind: str, model_id: str, request: Request) -> JSONResponse:
        return JSONResponse(_panel(kind, model_id, request).dropdown_option())

    log.debug("router panel créé (url=%s)", config.url)
    return router
