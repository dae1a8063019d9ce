"""
Sortie de rendu + protocole Renderer (HTML aujourd'hui, autre format demain).
"""
from typing import Optional, Protocol, Sequence, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict

from ..blocks.base import BaseBlock
from ..core.errors import BlockErrorInfo


class RenderedBlock(BaseModel):
    """Fragment rendu pour un bloc d'entrée (même position, même id)."""
    model_config = ConfigDict(frozen=True)

    block_id: Union[int, str, None] = None
    component: Optional[str] = None
    html: str
    error: Optional[BlockErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class Renderer(Protocol):
    def render_block(self, block: BaseBlock) -> str: ...
    def render(self, blocks: Sequence, strict: bool = False) -> list: ...
