"""
Router FastAPI — endpoints blog.

POST /blog/render           → {"blocks": [...]} → fragments JSON (un par bloc)
POST /blog/render.html      → {"blocks": [...]} → HTMLResponse
POST /blog/validate         → {"valid": bool, "errors": [...], "warnings": [...]}
GET  /blog/catalog          → tags connus + JSON schemas
GET  /blog/articles/{slug}  → page article complète (via Strapi)
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from .blocks import BLOCK_REGISTRY, validate_blocks
from .cms.client import StrapiClient
from .core.errors import ArticleNotFound, BlockError, CMSError
from .renderer.html import render, render_blocks_html
from .renderer.page import render_article_page

log = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])


class RenderRequest(BaseModel):
    blocks: List[Dict[str, Any]] = Field(default_factory=list)
    strict: bool = False


def get_client() -> StrapiClient:
    return StrapiClient()


@router.post("/render", summary="Rend une séquence de blocs en fragments HTML")
def render_fragments(req: RenderRequest) -> dict:
    try:
        rendered = render(req.blocks, strict=req.strict)
    except BlockError as e:
        raise HTTPException(422, e.to_info().model_dump())
    return {"blocks": [r.model_dump() for r in rendered]}


@router.post("/render.html", response_class=HTMLResponse, summary="Rend les blocs en HTML")
def render_html(req: RenderRequest) -> HTMLResponse:
    try:
        html = render_blocks_html(req.blocks, strict=req.strict)
    except BlockError as e:
        raise HTTPException(422, e.to_info().model_dump())
    return HTMLResponse(content=html)


@router.post("/validate", summary="Valide des blocs sans les rendre")
def validate(req: RenderRequest) -> dict:
    errors, warnings = validate_blocks(req.blocks)
    return {
        "valid":    not errors,
        "errors":   [e.model_dump() for e in errors],
        "warnings": [w.model_dump() for w in warnings],
    }


@router.get("/catalog", summary="Liste les types de blocs et leurs schemas")
def catalog() -> JSONResponse:
    catalog_data = [
        {"component": tag, "schema": cls.model_json_schema(by_alias=True)}
        for tag, cls in BLOCK_REGISTRY.items()
    ]
    return JSONResponse({"blocks": catalog_data})


@router.get("/articles/{slug}", response_class=HTMLResponse, summary="Page article")
def article_page(slug: str, client: StrapiClient = Depends(get_client)) -> HTMLResponse:
    try:
        article = client.get_article_by_slug(slug).data
    except ArticleNotFound:
        raise HTTPException(404, f"Article introuvable : {slug}")
    except CMSError as e:
        log.error("Article %s : %s", slug, e)
        raise HTTPException(502, "CMS indisponible")

    # Global optionnel : la page se rend sans SEO par défaut ni nom de site
    try:
        global_settings = client.get_global().data
    except CMSError as e:
        log.warning("Global non chargé : %s", e)
        global_settings = None

    return HTMLResponse(render_article_page(article, global_settings, base_url=client.base_url))
