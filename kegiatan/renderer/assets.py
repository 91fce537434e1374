"""
Résolution des URLs d'assets.
Externe → URL inchangée. Hébergé Notion → /api/image-proxy?url=… (le navigateur
n'a pas le token Bearer nécessaire pour la récupérer directement).
"""
from typing import Optional
from urllib.parse import quote

from ..blocks.base import AssetRef, HostedAsset

PROXY_PATH = "/api/image-proxy"

# Caractères laissés tels quels par encodeURIComponent (en plus de A-Z a-z 0-9 - _ . ~)
_URI_COMPONENT_SAFE = "!*'()"


def proxy_url(url: str) -> str:
    return f"{PROXY_PATH}?url={quote(url or '', safe=_URI_COMPONENT_SAFE)}"


def resolve_asset(ref: Optional[AssetRef]) -> str:
    """AssetRef → URL exposable au client. Pur, ne lève jamais."""
    if ref is None:
        return ""
    if isinstance(ref, HostedAsset):
        return proxy_url(ref.url)
    return ref.url or ""
