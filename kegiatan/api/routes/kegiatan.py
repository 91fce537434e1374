"""
Kegiatan — pages de la base Notion.
GET /api/kegiatan        → liste des résumés de pages
GET /api/kegiatan/{id}   → {"html": contenu de la page rendu}
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...notion import NotionAPIError, NotionClient, OBJECT_NOT_FOUND, UNAUTHORIZED
from ...renderer import assemble
from ...summary import summarize_page
from ..deps import get_notion

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Kegiatan"])

# Longueur d'un identifiant Notion sans tirets
MIN_PAGE_ID_LENGTH = 32


@router.get("/kegiatan")
def list_kegiatan(notion: NotionClient = Depends(get_notion)):
    log.info("Récupération des kegiatan — base %s", notion.database_id)
    try:
        pages = notion.query_database()
    except Exception as e:
        log.error("Erreur listing kegiatan : %s", e)
        return JSONResponse(
            {"error": "Gagal mengambil data dari Notion", "details": str(e)},
            status_code=500,
        )

    results = [summarize_page(p).to_json() for p in pages]
    log.info("%d kegiatan récupérés", len(results))
    return results


@router.get("/kegiatan/{page_id}")
def get_kegiatan(page_id: str, notion: NotionClient = Depends(get_notion)):
    """
    Contenu d'une page rendu en HTML.

    Erreurs : 400 id invalide (avant tout appel Notion), 404 page introuvable,
    401 token refusé, 500 autre.
    """
    if not page_id or len(page_id) < MIN_PAGE_ID_LENGTH:
        return JSONResponse({"error": "ID halaman tidak valid", "pageId": page_id}, status_code=400)

    log.info("Détail de la page %s", page_id)
    try:
        blocks = notion.list_block_children(page_id)
        log.info("%d blocs trouvés", len(blocks))
        html = assemble(blocks)
    except NotionAPIError as e:
        log.error("Erreur Notion pour la page %s : %s (%s)", page_id, e, e.code)
        if e.code == OBJECT_NOT_FOUND:
            return JSONResponse({"error": "Halaman tidak ditemukan", "pageId": page_id}, status_code=404)
        if e.code == UNAUTHORIZED:
            return JSONResponse(
                {"error": "Token Notion tidak valid atau tidak memiliki akses ke halaman ini", "pageId": page_id},
                status_code=401,
            )
        return _detail_error(page_id, e)
    except Exception as e:
        log.exception("Erreur inattendue pour la page %s", page_id)
        return _detail_error(page_id, e)

    log.info("HTML généré — %d caractères", len(html))
    return {"html": html}


def _detail_error(page_id: str, e: Exception) -> JSONResponse:
    return JSONResponse(
        {"error": "Gagal mengambil detail dari Notion", "details": str(e), "pageId": page_id},
        status_code=500,
    )
