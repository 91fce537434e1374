"""
Client NOTION — API REST v1 (requests)
  POST /databases/{id}/query     → pages de la base kegiatan
  GET  /blocks/{id}/children     → blocs d'une page (un seul appel, pas de pagination)
  GET  <url fichier Notion>      → asset hébergé, pour le proxy image
"""
import logging
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

import requests

from .config import Settings

log = logging.getLogger(__name__)

# Codes d'erreur Notion exploités par les routes
OBJECT_NOT_FOUND = "object_not_found"
UNAUTHORIZED     = "unauthorized"
REQUEST_FAILED   = "request_failed"


class NotionAPIError(Exception):
    """Erreur renvoyée par Notion (ou échec réseau, code=request_failed)."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status  = status
        self.code    = code

    @classmethod
    def from_response(cls, resp: requests.Response) -> "NotionAPIError":
        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(
            body.get("message") or f"HTTP {resp.status_code}",
            status=resp.status_code,
            code=body.get("code"),
        )


class NotionClient:
    """Accès Notion avec le token du service. Une instance par application."""

    def __init__(self, token: str, database_id: str = "", version: str = "2022-06-28",
                 api_url: str = "https://api.notion.com/v1", timeout: float = 10.0,
                 asset_hosts: Optional[Iterable[str]] = None,
                 session: Optional[requests.Session] = None):
        self.token       = token
        self.database_id = database_id
        self.version     = version
        self.api_url     = api_url.rstrip("/")
        self.timeout     = timeout
        self.asset_hosts = [h.lower() for h in asset_hosts] if asset_hosts is not None else Settings().hosts
        self.session     = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "NotionClient":
        return cls(
            token=settings.notion_token,
            database_id=settings.notion_database_id,
            version=settings.notion_version,
            api_url=settings.notion_api_url,
            timeout=settings.notion_timeout,
            asset_hosts=settings.hosts,
        )

    @property
    def auth_headers(self) -> Dict[str, str]:
        return {
            "Authorization":  f"Bearer {self.token}",
            "Notion-Version": self.version,
        }

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.api_url}/{path.lstrip('/')}"
        try:
            resp = self.session.request(method, url, headers=self.auth_headers,
                                        timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise NotionAPIError(str(e), code=REQUEST_FAILED) from e
        if not resp.ok:
            err = NotionAPIError.from_response(resp)
            log.error("Notion %s %s → %s %s", method, path, err.status, err.code)
            raise err
        return resp.json()

    # ── Endpoints ─────────────────────────────────────────────────────────

    def query_database(self) -> List[Dict[str, Any]]:
        """Pages de la base (premier lot renvoyé par Notion uniquement)."""
        data = self._request("POST", f"databases/{self.database_id}/query", json={})
        return data.get("results", [])

    def list_block_children(self, block_id: str) -> List[Dict[str, Any]]:
        """Blocs enfants d'une page, dans l'ordre Notion."""
        data = self._request("GET", f"blocks/{block_id}/children", params={"page_size": 100})
        return data.get("results", [])

    def is_asset_url(self, url: str) -> bool:
        """URL https vers un hôte de fichiers Notion (seuls destinataires du token)."""
        try:
            parsed = urlparse(url or "")
            host = (parsed.hostname or "").lower()
        except ValueError:
            return False
        if parsed.scheme != "https" or not host:
            return False
        for allowed in self.asset_hosts:
            if allowed.startswith("."):
                if host == allowed[1:] or host.endswith(allowed):
                    return True
            elif host == allowed:
                return True
        return False

    def fetch_asset(self, url: str) -> requests.Response:
        """
        Récupère un fichier hébergé par Notion, en streaming.
        L'appelant doit fermer la réponse. Pas de retry : le navigateur rechargera.
        """
        if not self.is_asset_url(url):
            raise NotionAPIError("Asset host not allowed")
        try:
            resp = self.session.get(url, headers=self.auth_headers, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            raise NotionAPIError(str(e), code=REQUEST_FAILED) from e
        if not resp.ok:
            resp.close()
            raise NotionAPIError(f"Failed to fetch image: {resp.status_code}", status=resp.status_code)
        return resp
