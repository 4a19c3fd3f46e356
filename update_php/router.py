"""
Router FastAPI — endpoints du bloc update-php.

GET  /update-php/render?php_version=7.2 → HTML (attributs par défaut)
POST /update-php/render                 → {attributes, php_version?} (JSON ou formulaire) → HTML
POST /update-php/preview                → {attributes} → HTML aperçu éditeur
POST /update-php/validate               → {attributes} → {"valid": bool, "error"?}
GET  /update-php/blocks                 → catalogue des blocs enregistrés
GET  /update-php/i18n/{lang}            → libellés éditeur pour une langue
"""
import json
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .blocks.version_detector import BLOCK_NAME
from .bootstrap import Plugin
from .core.i18n import load_catalog
from .detection import detect_php_version
from .errors import UnknownBlockType

log = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class RenderRequest(BaseModel):
    block: str = BLOCK_NAME
    attributes: Dict[str, Any] = Field(default_factory=dict)
    php_version: Optional[str] = None


class PreviewRequest(BaseModel):
    block: str = BLOCK_NAME
    attributes: Dict[str, Any] = Field(default_factory=dict)


def _unknown_block(e: UnknownBlockType) -> JSONResponse:
    return JSONResponse({"error": str(e)}, status_code=404)


def create_router(plugin: Plugin) -> APIRouter:
    """Router branché sur un Plugin construit par build_plugin()."""
    router = APIRouter(prefix="/update-php", tags=["update_php"])
    param = plugin.settings.version_param

    def _request_params(request: Request, body_version: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = dict(request.query_params)
        if body_version is not None:
            params[param] = body_version
        return params

    @router.get("/render", response_class=HTMLResponse, summary="Rend le bloc avec ses attributs par défaut")
    def render_default(request: Request, block: str = BLOCK_NAME):
        try:
            blk = plugin.registry.get(block)
        except UnknownBlockType as e:
            return _unknown_block(e)
        version = detect_php_version(_request_params(request), param)
        return HTMLResponse(blk.render({}, version))

    async def _read_render_request(request: Request) -> RenderRequest:
        """Corps JSON ou formulaire (urlencoded / multipart) → RenderRequest."""
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(_FORM_TYPES):
            form = await request.form()
            data: Dict[str, Any] = {k: form[k] for k in ("block", "php_version") if k in form}
            if param in form:
                data["php_version"] = form[param]
            if "attributes" in form:
                data["attributes"] = json.loads(form["attributes"])
            return RenderRequest.model_validate(data)
        body = await request.body()
        return RenderRequest.model_validate(json.loads(body) if body else {})

    @router.post("/render", response_class=HTMLResponse, summary="Rend le bloc pour des attributs donnés")
    async def render(request: Request):
        try:
            payload = await _read_render_request(request)
        except ValidationError as e:
            return JSONResponse({"detail": e.errors(include_url=False, include_context=False)}, status_code=422)
        except ValueError as e:
            return JSONResponse({"detail": f"Corps invalide : {e}"}, status_code=422)
        try:
            blk = plugin.registry.get(payload.block)
        except UnknownBlockType as e:
            return _unknown_block(e)
        version = detect_php_version(_request_params(request, payload.php_version), param)
        html = blk.render(payload.attributes, version)
        log.info("Rendu %s (php_version=%.40r, %d octets)", payload.block, version, len(html))
        return HTMLResponse(html)

    @router.post("/preview", response_class=HTMLResponse, summary="Aperçu éditeur du bloc")
    def preview(payload: PreviewRequest):
        try:
            blk = plugin.registry.get(payload.block)
        except UnknownBlockType as e:
            return _unknown_block(e)
        return HTMLResponse(blk.render_preview(payload.attributes))

    @router.post("/validate", summary="Valide des attributs sans rendre le bloc")
    def validate(payload: PreviewRequest) -> dict:
        try:
            blk = plugin.registry.get(payload.block)
            blk.check_attributes(payload.attributes)
            blk.configuration(payload.attributes)
            return {"valid": True}
        except (ValidationError, ValueError, UnknownBlockType) as e:
            return {"valid": False, "error": str(e)}

    @router.get("/blocks", summary="Liste les blocs enregistrés et leurs schémas")
    def blocks(lang: Optional[str] = None) -> JSONResponse:
        return JSONResponse({"blocks": plugin.registry.catalog(lang or plugin.settings.default_lang)})

    @router.get("/i18n/{lang}", summary="Retourne les libellés éditeur pour une langue")
    def i18n_catalog(lang: str) -> JSONResponse:
        data = load_catalog(lang)
        if data is None:
            return JSONResponse({"error": f"Langue '{lang}' non disponible"}, status_code=404)
        return JSONResponse(data)

    return router
