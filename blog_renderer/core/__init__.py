"""Core — erreurs, images, embeds, enveloppes Strapi."""
from .errors import (
    BlockError,
    BlockErrorInfo,
    UnknownBlockType,
    InvalidEnumValue,
    MissingRequiredField,
    MalformedAsset,
    InvalidBlock,
    CMSError,
    CMSRequestError,
    CMSResponseError,
    ArticleNotFound,
)
from .images import IMAGE_FORMATS, ImageFormat, ImageReference, resolve_image_url
from .embeds import resolve_embed_url

__all__ = [
    "BlockError",
    "BlockErrorInfo",
    "UnknownBlockType",
    "InvalidEnumValue",
    "MissingRequiredField",
    "MalformedAsset",
    "InvalidBlock",
    "CMSError",
    "CMSRequestError",
    "CMSResponseError",
    "ArticleNotFound",
    "IMAGE_FORMATS",
    "ImageFormat",
    "ImageReference",
    "resolve_image_url",
    "resolve_embed_url",
]
