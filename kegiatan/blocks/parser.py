"""
Parser — bloc Notion brut (dict JSON) → bloc typé.
Type absent du registry → UnknownBlock (payload conservé pour diagnostic).
"""
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from .base import BaseBlock
from .text import ParagraphBlock, Heading1Block, Heading2Block, Heading3Block, QuoteBlock, CodeBlock
from .media import ImageBlock, VideoBlock, FileBlock
from .links import BookmarkBlock, EmbedBlock, DividerBlock, UnknownBlock

# ── Registry des blocs gérés ────────────────────────────────────────────────

_BLOCK_REGISTRY: Dict[str, type] = {
    "paragraph": ParagraphBlock,
    "heading_1": Heading1Block,
    "heading_2": Heading2Block,
    "heading_3": Heading3Block,
    "quote":     QuoteBlock,
    "code":      CodeBlock,
    "image":     ImageBlock,
    "video":     VideoBlock,
    "file":      FileBlock,
    "bookmark":  BookmarkBlock,
    "embed":     EmbedBlock,
    "divider":   DividerBlock,
}


class BlockParseError(ValueError):
    """Payload d'un type connu invalide (champ du mauvais type, etc.)."""

    def __init__(self, block_type: str, reason: str):
        super().__init__(f"Bloc {block_type!r} invalide : {reason}")
        self.block_type = block_type


def parse_block(raw: Mapping[str, Any]) -> BaseBlock:
    """Instancie le bloc typé correspondant à `raw["type"]`."""
    block_type = str(raw.get("type") or "")
    block_cls = _BLOCK_REGISTRY.get(block_type)
    if block_cls is None:
        return UnknownBlock(
            type=block_type or "?",
            id=raw.get("id"),
            payload=dict(raw),
        )

    data = dict(raw)
    # Notion renvoie parfois `"image": null` — équivalent à un payload absent
    if data.get(block_type) is None:
        data.pop(block_type, None)
    try:
        return block_cls.model_validate(data)
    except ValidationError as e:
        raise BlockParseError(block_type, str(e)) from e
