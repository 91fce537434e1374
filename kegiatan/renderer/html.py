"""
Renderer HTML — un bloc Notion → fragment HTML (classes Tailwind du front).
Dispatch par type via _RENDERERS. Un bloc invalide ou non géré rend "" :
un mauvais bloc ne doit jamais faire échouer la page entière.
"""
import logging
import re
from html import escape
from typing import Any, Callable, Dict, Mapping, Union, get_args

from pydantic import ValidationError

from ..blocks import (
    BaseBlock, Block, HostedAsset, KnownBlock, parse_block,
    ParagraphBlock, Heading1Block, Heading2Block, Heading3Block, QuoteBlock, CodeBlock,
    ImageBlock, VideoBlock, FileBlock, BookmarkBlock, EmbedBlock, DividerBlock, UnknownBlock,
)
from .assets import resolve_asset
from .rich_text import format_rich_text, plain_text

log = logging.getLogger(__name__)

_YOUTUBE_ID = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)")
_VIMEO_ID   = re.compile(r"vimeo\.com/(?:video/)?(\d+)")
_DRIVE_ID   = re.compile(r"/d/([a-zA-Z0-9_-]+)")

_FIGCAPTION_CLASS = "text-sm text-gray-600 text-center mt-2 italic"


def _figcaption(caption: str) -> str:
    return f'<figcaption class="{_FIGCAPTION_CLASS}">{caption}</figcaption>' if caption else ""


# ── Blocs texte ─────────────────────────────────────────────────────────────

def _wrap_text(tag: str, css: str, spans) -> str:
    text = format_rich_text(spans)
    return f'<{tag} class="{css}">{text}</{tag}>' if text else ""


def render_paragraph_block(b: ParagraphBlock) -> str:
    return _wrap_text("p", "mb-4", b.paragraph.rich_text)


def render_heading1_block(b: Heading1Block) -> str:
    return _wrap_text("h1", "text-3xl font-bold mb-4 mt-6", b.heading_1.rich_text)


def render_heading2_block(b: Heading2Block) -> str:
    return _wrap_text("h2", "text-2xl font-semibold mb-3 mt-5", b.heading_2.rich_text)


def render_heading3_block(b: Heading3Block) -> str:
    return _wrap_text("h3", "text-xl font-medium mb-2 mt-4", b.heading_3.rich_text)


def render_quote_block(b: QuoteBlock) -> str:
    return _wrap_text("blockquote", "border-l-4 border-gray-300 pl-4 italic my-4 text-gray-700",
                      b.quote.rich_text)


def render_code_block(b: CodeBlock) -> str:
    # Pas de mise en forme riche dans un bloc code : texte brut échappé
    text = plain_text(b.code.rich_text)
    if not text:
        return ""
    language = escape(b.code.language or "")
    return (f'<pre class="bg-gray-900 text-gray-100 p-4 rounded-lg overflow-x-auto my-4">'
            f'<code class="language-{language}">{escape(text)}</code></pre>')


# ── Blocs média ─────────────────────────────────────────────────────────────

def render_image_block(b: ImageBlock) -> str:
    src = resolve_asset(b.image.source)
    if not src:
        log.debug("Bloc image sans source — ignoré")
        return ""

    caption = format_rich_text(b.image.caption)
    alt = escape(plain_text(b.image.caption)) or "Gambar"
    fallback_caption = f'<p class="text-sm mt-2">{caption}</p>' if caption else ""

    # Fallback masqué, affiché par onerror si l'image (proxy ou externe) ne charge pas
    return f"""<figure class="my-6">
  <img src="{escape(src)}" alt="{alt}" class="w-full rounded-lg shadow-md" loading="lazy"
       onerror="this.style.display='none'; this.nextElementSibling.style.display='block';" />
  <div style="display:none;" class="bg-gray-100 border-2 border-dashed border-gray-300 rounded-lg p-8 text-center text-gray-500">
    <p>Gambar tidak dapat dimuat</p>
    {fallback_caption}
  </div>
  {_figcaption(caption)}
</figure>"""


def _video_embed_url(url: str) -> str:
    """URL du lecteur intégré si la vidéo vient d'une plateforme connue, sinon ""."""
    if "youtube.com" in url or "youtu.be" in url:
        m = _YOUTUBE_ID.search(url)
        if m:
            return f"https://www.youtube.com/embed/{m.group(1)}"
    if "vimeo.com" in url:
        m = _VIMEO_ID.search(url)
        if m:
            return f"https://player.vimeo.com/video/{m.group(1)}"
    return ""


def render_video_block(b: VideoBlock) -> str:
    # Jamais proxifiée : URL source utilisée telle quelle
    source = b.video.source
    url = source.url if source else ""
    if not url:
        return ""

    caption = format_rich_text(b.video.caption)
    embed_url = _video_embed_url(url)
    if embed_url:
        return f"""<figure class="my-6">
  <div class="relative pb-[56.25%] h-0 overflow-hidden rounded-lg">
    <iframe src="{escape(embed_url)}" class="absolute top-0 left-0 w-full h-full" frameborder="0" allowfullscreen></iframe>
  </div>
  {_figcaption(caption)}
</figure>"""

    return f"""<figure class="my-6">
  <video controls class="w-full rounded-lg shadow-md">
    <source src="{escape(url)}" type="video/mp4">
    Browser Anda tidak mendukung video.
  </video>
  {_figcaption(caption)}
</figure>"""


def render_file_block(b: FileBlock) -> str:
    source = b.file.source
    href = resolve_asset(source)
    if not href:
        log.debug("Bloc file sans source — ignoré")
        return ""

    default_name = "File" if isinstance(source, HostedAsset) else "File External"
    name = escape(b.file.name or default_name)
    return f"""<div class="my-4 p-4 border border-gray-300 rounded-lg bg-gray-50">
  <a href="{escape(href)}" target="_blank" rel="noopener noreferrer" class="flex items-center text-blue-600 hover:text-blue-800">
    📎 {name}
  </a>
</div>"""


# ── Blocs lien ──────────────────────────────────────────────────────────────

def render_bookmark_block(b: BookmarkBlock) -> str:
    url = b.bookmark.url
    if not url:
        log.debug("Bloc bookmark sans URL — ignoré")
        return ""
    label = format_rich_text(b.bookmark.caption) or escape(url)
    return f"""<div class="my-4 p-4 border border-gray-300 rounded-lg bg-blue-50">
  <a href="{escape(url)}" target="_blank" rel="noopener noreferrer" class="text-blue-600 hover:text-blue-800 font-medium">
    🔗 {label}
  </a>
</div>"""


def _drive_preview_url(url: str) -> str:
    """Lien Google Drive `/d/<id>/view` → `/file/d/<id>/preview`, sinon ""."""
    if "drive.google.com" not in url:
        return ""
    m = _DRIVE_ID.search(url)
    return f"https://drive.google.com/file/d/{m.group(1)}/preview" if m else ""


def render_embed_block(b: EmbedBlock) -> str:
    url = b.embed.url
    if not url:
        return ""
    src = _drive_preview_url(url) or url
    return f"""<div class="my-6 aspect-video">
  <iframe src="{escape(src)}" class="w-full h-full rounded-lg shadow" frameborder="0" allowfullscreen loading="lazy"></iframe>
</div>"""


def render_divider_block(b: DividerBlock) -> str:
    return '<hr class="my-6 border-gray-300">'


def render_unknown_block(b: UnknownBlock) -> str:
    log.info("Type de bloc non géré : %s %s", b.type, b.payload)
    return ""


# ── Dispatch ────────────────────────────────────────────────────────────────

_RENDERERS: Dict[type, Callable[[Any], str]] = {
    ParagraphBlock: render_paragraph_block,
    Heading1Block:  render_heading1_block,
    Heading2Block:  render_heading2_block,
    Heading3Block:  render_heading3_block,
    QuoteBlock:     render_quote_block,
    CodeBlock:      render_code_block,
    ImageBlock:     render_image_block,
    VideoBlock:     render_video_block,
    FileBlock:      render_file_block,
    BookmarkBlock:  render_bookmark_block,
    EmbedBlock:     render_embed_block,
    DividerBlock:   render_divider_block,
    UnknownBlock:   render_unknown_block,
}

_missing = (set(get_args(get_args(KnownBlock)[0])) | {UnknownBlock}) - set(_RENDERERS)
if _missing:
    raise RuntimeError(f"Blocs sans renderer : {sorted(c.__name__ for c in _missing)}")

# Erreurs traitées comme "payload invalide" → bloc rendu vide
_DEGRADE_ERRORS = (ValidationError, ValueError, AttributeError, KeyError, TypeError)


def _kind(block: Any) -> str:
    if isinstance(block, Mapping):
        return str(block.get("type", "?"))
    return str(getattr(block, "type", "?"))


def render_block(block: Union[Block, Mapping[str, Any]]) -> str:
    """
    Bloc typé ou dict Notion brut → HTML. Ne lève jamais :
    tout payload invalide dégrade en "" (avec un warning).
    """
    try:
        if not isinstance(block, BaseBlock):
            block = parse_block(block)
        renderer = _RENDERERS.get(type(block))
        if renderer is None:
            log.warning("Aucun renderer pour %s", type(block).__name__)
            return ""
        return renderer(block)
    except _DEGRADE_ERRORS as e:
        log.warning("Bloc %s ignoré : %s", _kind(block), e)
        return ""
