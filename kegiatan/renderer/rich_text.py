"""
Rich text Notion → HTML inline.
Ordre d'imbrication fixe : bold → italic → strikethrough → underline → code
(chaque wrapper englobe le précédent).
"""
from html import escape
from typing import Iterable, Optional

from ..blocks.base import RichText

LINK_CLASS = "text-blue-600 hover:text-blue-800 underline"
CODE_CLASS = "bg-gray-100 px-1 py-0.5 rounded text-sm"


def format_span(span: RichText) -> str:
    text = escape(span.plain_text or "")

    if span.href:
        text = (f'<a href="{escape(span.href)}" target="_blank" rel="noopener noreferrer" '
                f'class="{LINK_CLASS}">{text}</a>')

    a = span.annotations
    if a.bold:          text = f"<strong>{text}</strong>"
    if a.italic:        text = f"<em>{text}</em>"
    if a.strikethrough: text = f"<del>{text}</del>"
    if a.underline:     text = f"<u>{text}</u>"
    if a.code:          text = f'<code class="{CODE_CLASS}">{text}</code>'

    return text


def format_rich_text(spans: Optional[Iterable[RichText]]) -> str:
    """Spans → HTML inline échappé. Vide ou None → ""."""
    if not spans:
        return ""
    return "".join(format_span(s) for s in spans)


def plain_text(spans: Optional[Iterable[RichText]]) -> str:
    """Texte brut concaténé, sans échappement."""
    if not spans:
        return ""
    return "".join(s.plain_text or "" for s in spans)
