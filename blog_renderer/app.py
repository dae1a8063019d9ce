"""
Blog renderer — app FastAPI
Démarrer : uvicorn blog_renderer.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI

from . import __version__
from .config import get_settings
from .router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Blog renderer", version=__version__, docs_url="/docs")
app.include_router(router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "strapi_url": get_settings().strapi_url}
