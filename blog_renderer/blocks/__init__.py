"""
Blocs de contenu — exports publics + BlockUnion discriminé sur `__component`.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, UnknownBlock
from .rich_text import RichTextBlock
from .media import MediaBlock
from .quote import QuoteBlock
from .slider import SliderBlock
from .code import CodeBlock, CodeLanguage
from .cta import CallToActionBlock, CTAStyle
from .embed import EmbedBlock, AspectRatio
from .table import TableBlock
from .parser import BLOCK_REGISTRY, parse_block, validate_blocks

# Union discriminée : les 8 variantes connues, UnknownBlock hors union
BlockUnion = Annotated[
    Union[
        RichTextBlock,
        MediaBlock,
        QuoteBlock,
        SliderBlock,
        CodeBlock,
        CallToActionBlock,
        EmbedBlock,
        TableBlock,
    ],
    Field(discriminator="component"),
]

__all__ = [
    "BaseBlock", "UnknownBlock",
    "RichTextBlock", "MediaBlock", "QuoteBlock", "SliderBlock",
    "CodeBlock", "CodeLanguage",
    "CallToActionBlock", "CTAStyle",
    "EmbedBlock", "AspectRatio",
    "TableBlock",
    "BlockUnion",
    "BLOCK_REGISTRY", "parse_block", "validate_blocks",
]
