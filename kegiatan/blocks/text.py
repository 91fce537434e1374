"""Blocs texte — paragraphe, titres, citation, code."""
from typing import List, Literal
from pydantic import BaseModel, ConfigDict

from .base import BaseBlock, RichText


class TextPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rich_text: List[RichText] = []


class CodePayload(TextPayload):
    language: str = ""


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    paragraph: TextPayload = TextPayload()


class Heading1Block(BaseBlock):
    type: Literal["heading_1"] = "heading_1"
    heading_1: TextPayload = TextPayload()


class Heading2Block(BaseBlock):
    type: Literal["heading_2"] = "heading_2"
    heading_2: TextPayload = TextPayload()


class Heading3Block(BaseBlock):
    type: Literal["heading_3"] = "heading_3"
    heading_3: TextPayload = TextPayload()


class QuoteBlock(BaseBlock):
    type: Literal["quote"] = "quote"
    quote: TextPayload = TextPayload()


class CodeBlock(BaseBlock):
    type: Literal["code"] = "code"
    code: CodePayload = CodePayload()
