"""
Configuration — lue depuis l'environnement à chaque appel (pas de cache,
les tests peuvent surcharger via monkeypatch.setenv).

STRAPI_URL                 URL de base du CMS (défaut http://localhost:1337)
STRAPI_API_TOKEN           token Bearer optionnel
STRAPI_TIMEOUT             timeout HTTP en secondes (défaut 10)
BLOG_DEFAULT_IMAGE_FORMAT  format demandé par les blocs media (défaut medium)
"""
import os
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    strapi_url: str = "http://localhost:1337"
    api_token: Optional[str] = None
    timeout: float = 10.0
    default_image_format: str = "medium"

    @property
    def api_url(self) -> str:
        return f"{self.strapi_url.rstrip('/')}/api"


def get_settings() -> Settings:
    return Settings(
        strapi_url=os.getenv("STRAPI_URL", "http://localhost:1337"),
        api_token=os.getenv("STRAPI_API_TOKEN") or None,
        timeout=float(os.getenv("STRAPI_TIMEOUT", "10")),
        default_image_format=os.getenv("BLOG_DEFAULT_IMAGE_FORMAT", "medium"),
    )
