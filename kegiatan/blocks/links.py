"""Blocs lien — bookmark, embed, plus le séparateur et le bloc inconnu."""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict

from .base import BaseBlock, RichText


class BookmarkPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    caption: List[RichText] = []


class EmbedPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None


class BookmarkBlock(BaseBlock):
    type: Literal["bookmark"] = "bookmark"
    bookmark: BookmarkPayload = BookmarkPayload()


class EmbedBlock(BaseBlock):
    type: Literal["embed"] = "embed"
    embed: EmbedPayload = EmbedPayload()


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"


class UnknownBlock(BaseBlock):
    """Type non géré — conservé pour le log, jamais rendu."""
    payload: Dict[str, Any] = {}
