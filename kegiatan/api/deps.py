"""Dépendances FastAPI — settings + client Notion (surchargeables en test)."""
from functools import lru_cache

from ..config import Settings, load_settings
from ..notion import NotionClient


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=1)
def _client() -> NotionClient:
    return NotionClient.from_settings(get_settings())


def get_notion() -> NotionClient:
    return _client()
