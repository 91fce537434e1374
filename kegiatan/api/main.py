"""
KEGIATAN — FastAPI app (pages Notion → JSON/HTML pour le front)
Démarrer : uvicorn kegiatan.api.main:app --reload --port 3000
"""
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from .deps import get_settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

ROOT_DIR   = Path(__file__).parent.parent.parent
VIEWS_DIR  = ROOT_DIR / "views"
PUBLIC_DIR = ROOT_DIR / "public"

app = FastAPI(title="KEGIATAN — Notion API", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=get_settings().origins,
                   allow_methods=["*"], allow_headers=["*"])


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    log.error("Erreur non gérée sur %s : %s", request.url.path, exc)
    return JSONResponse({"error": "Internal server error", "details": str(exc)}, status_code=500)


@app.on_event("startup")
def startup():
    settings = get_settings()
    log.info("KEGIATAN %s démarré", __version__)
    log.info("Database ID : %s", settings.notion_database_id or "—")
    log.info("Token Notion disponible : %s", bool(settings.notion_token))
    if not settings.notion_token or not settings.notion_database_id:
        log.warning("NOTION_TOKEN ou NOTION_DATABASE_ID manquant — les appels Notion échoueront")


@app.get("/health")
def health():
    return {"status": "ok", "service": "kegiatan", "version": __version__}


@app.get("/", include_in_schema=False)
def root():
    return FileResponse(str(VIEWS_DIR / "index.html"), media_type="text/html")


# ── Routes ──
from .routes import kegiatan, image_proxy

app.include_router(kegiatan.router)
app.include_router(image_proxy.router)

# Fichiers statiques du front (CSS, JS) — monté en dernier pour ne pas masquer les routes
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=str(PUBLIC_DIR)), name="public")
