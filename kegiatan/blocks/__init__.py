"""
Blocs Notion — exports publics + union discriminée par `type`.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import (
    Annotations, RichText,
    HostedAsset, ExternalAsset, AssetRef,
    FileLink, MediaPayload, BaseBlock,
)
from .text import (
    TextPayload, CodePayload,
    ParagraphBlock, Heading1Block, Heading2Block, Heading3Block, QuoteBlock, CodeBlock,
)
from .media import FilePayload, ImageBlock, VideoBlock, FileBlock
from .links import BookmarkPayload, EmbedPayload, BookmarkBlock, EmbedBlock, DividerBlock, UnknownBlock
from .parser import BlockParseError, parse_block

# Union discriminée des blocs gérés — UnknownBlock reste hors union (type libre)
KnownBlock = Annotated[
    Union[
        ParagraphBlock,
        Heading1Block,
        Heading2Block,
        Heading3Block,
        QuoteBlock,
        CodeBlock,
        ImageBlock,
        VideoBlock,
        FileBlock,
        BookmarkBlock,
        EmbedBlock,
        DividerBlock,
    ],
    Field(discriminator="type"),
]

Block = Union[KnownBlock, UnknownBlock]

__all__ = [
    # Base
    "Annotations", "RichText", "HostedAsset", "ExternalAsset", "AssetRef",
    "FileLink", "MediaPayload", "BaseBlock",
    # Texte
    "TextPayload", "CodePayload",
    "ParagraphBlock", "Heading1Block", "Heading2Block", "Heading3Block", "QuoteBlock", "CodeBlock",
    # Média
    "FilePayload", "ImageBlock", "VideoBlock", "FileBlock",
    # Liens
    "BookmarkPayload", "EmbedPayload", "BookmarkBlock", "EmbedBlock", "DividerBlock", "UnknownBlock",
    # Union
    "KnownBlock", "Block",
    # Parser
    "BlockParseError", "parse_block",
]
