"""
Proxy image — GET /api/image-proxy?url=<url Notion encodée>
Récupère l'asset avec le token du service et le renvoie en streaming.
Seuls les hôtes de fichiers Notion (settings.asset_hosts) sont acceptés.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, StreamingResponse

from ...notion import NotionClient
from ..deps import get_notion

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Assets"])

DEFAULT_CONTENT_TYPE = "image/jpeg"
CACHE_CONTROL        = "public, max-age=3600"   # 1 h
CHUNK_SIZE           = 64 * 1024


@router.get("/image-proxy")
def image_proxy(url: Optional[str] = Query(None), notion: NotionClient = Depends(get_notion)):
    if not url:
        return JSONResponse({"error": "URL gambar tidak ditemukan"}, status_code=400)
    if not notion.is_asset_url(url):
        log.warning("Proxy image refusé, hôte hors liste : %s", url)
        return JSONResponse({"error": "URL gambar tidak diizinkan"}, status_code=400)

    try:
        upstream = notion.fetch_asset(url)
    except Exception as e:
        log.error("Erreur proxy image : %s", e)
        return JSONResponse({"error": "Gagal mengambil gambar"}, status_code=500)

    def stream():
        try:
            for chunk in upstream.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    yield chunk
        finally:
            upstream.close()

    return StreamingResponse(
        stream(),
        media_type=upstream.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
        headers={"Cache-Control": CACHE_CONTROL},
    )
