"""
Résumé de page — projection d'une page de la base Notion pour le listing.
Clés JSON attendues par le front : id, name, hari, tanggal, embed, image.
Une propriété mal formée retombe sur sa valeur par défaut (warning) :
une page abîmée ne doit pas faire échouer tout le listing.
"""
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from .blocks import MediaPayload
from .renderer.assets import resolve_asset

log = logging.getLogger(__name__)

DEFAULT_NAME = "Tanpa Nama"

# Erreurs d'une propriété de forme inattendue
_FIELD_ERRORS = (AttributeError, TypeError, KeyError, IndexError, ValidationError)


class PageSummary(BaseModel):
    id:        str
    name:      str = DEFAULT_NAME
    day:       str = Field("", serialization_alias="hari")
    date:      str = Field("", serialization_alias="tanggal")
    embed_url: Optional[str] = Field(None, serialization_alias="embed")
    image:     Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True)
        # `image` absent plutôt que null quand la page n'en a pas
        if data.get("image") is None:
            data.pop("image", None)
        return data


# ── Extracteurs de propriétés ──────────────────────────────────────────────

def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _first_text(prop: Optional[dict], key: str) -> str:
    items = (prop or {}).get(key) or []
    if not items:
        return ""
    return _str(items[0].get("plain_text"))


def _date(prop: Optional[dict]) -> str:
    return _str(((prop or {}).get("date") or {}).get("start"))


def _embed(prop: Optional[dict]) -> Optional[str]:
    prop = prop or {}
    return _str(prop.get("url")) or _first_text(prop, "rich_text") or None


def _image(prop: Optional[dict]) -> Optional[str]:
    files = (prop or {}).get("files") or []
    if not files:
        return None
    url = resolve_asset(MediaPayload.model_validate(files[0]).source)
    return url or None


def _field(page_id: str, name: str, extract: Callable[[], Any], default: Any) -> Any:
    try:
        return extract()
    except _FIELD_ERRORS as e:
        log.warning("Propriété %s invalide sur la page %s : %s", name, page_id, e)
        return default


# ── Projection ─────────────────────────────────────────────────────────────

def summarize_page(page: Dict[str, Any]) -> PageSummary:
    page_id = _str(page.get("id"))
    props = page.get("properties") or {}
    if not isinstance(props, dict):
        log.warning("Propriétés invalides sur la page %s", page_id)
        props = {}
    return PageSummary(
        id=page_id,
        name=_field(page_id, "Name", lambda: _first_text(props.get("Name"), "title"), "") or DEFAULT_NAME,
        day=_field(page_id, "Hari", lambda: _first_text(props.get("Hari"), "rich_text"), ""),
        date=_field(page_id, "Tanggal", lambda: _date(props.get("Tanggal")), ""),
        embed_url=_field(page_id, "Embed", lambda: _embed(props.get("Embed")), None),
        image=_field(page_id, "Image", lambda: _image(props.get("Image")), None),
    )
