"""
Renderer Notion → HTML.

Usage:
    >>> from kegiatan.renderer import assemble
    >>> html = assemble(notion_blocks)   # dicts bruts de l'API ou blocs typés
"""
from .assets import PROXY_PATH, proxy_url, resolve_asset
from .rich_text import format_rich_text, format_span, plain_text
from .html import render_block
from .document import EMPTY_PLACEHOLDER, assemble

__all__ = [
    "PROXY_PATH", "proxy_url", "resolve_asset",
    "format_rich_text", "format_span", "plain_text",
    "render_block",
    "EMPTY_PLACEHOLDER", "assemble",
]
