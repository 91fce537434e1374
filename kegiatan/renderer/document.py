"""Assemblage — séquence de blocs d'une page → fragment HTML unique."""
import logging
from typing import Any, Iterable, Mapping, Union

from ..blocks import Block
from .html import render_block

log = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = '<p class="text-gray-500 italic">Tidak ada konten yang dapat ditampilkan.</p>'


def assemble(blocks: Iterable[Union[Block, Mapping[str, Any]]]) -> str:
    """
    Rend chaque bloc dans l'ordre Notion, ignore les rendus vides,
    concatène sans séparateur. Rien de visible → EMPTY_PLACEHOLDER.
    """
    parts = [html for html in (render_block(b) for b in blocks or []) if html.strip()]
    if not parts:
        log.info("Aucun contenu HTML généré")
        return EMPTY_PLACEHOLDER
    return "".join(parts)
