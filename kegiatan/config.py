"""Configuration — variables d'environnement."""
import os
from typing import List

from pydantic import BaseModel

NOTION_API_URL = "https://api.notion.com/v1"

# Hôtes des fichiers hébergés par Notion ; ".x" = x et ses sous-domaines
NOTION_ASSET_HOSTS = "prod-files-secure.s3.us-west-2.amazonaws.com,file.notion.so,.notion.so"


def _split(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings(BaseModel):
    notion_token:       str = ""
    notion_database_id: str = ""
    notion_version:     str = "2022-06-28"
    notion_api_url:     str = NOTION_API_URL
    notion_timeout:     float = 10.0
    asset_hosts:        str = NOTION_ASSET_HOSTS
    allow_origins:      str = "*"

    @property
    def origins(self) -> List[str]:
        return _split(self.allow_origins) or ["*"]

    @property
    def hosts(self) -> List[str]:
        return [h.lower() for h in _split(self.asset_hosts)]


def load_settings() -> Settings:
    return Settings(
        notion_token=os.getenv("NOTION_TOKEN", ""),
        notion_database_id=os.getenv("NOTION_DATABASE_ID", ""),
        notion_version=os.getenv("NOTION_VERSION", "2022-06-28"),
        notion_api_url=os.getenv("NOTION_API_URL", NOTION_API_URL),
        notion_timeout=float(os.getenv("NOTION_TIMEOUT", "10")),
        asset_hosts=os.getenv("NOTION_ASSET_HOSTS", NOTION_ASSET_HOSTS),
        allow_origins=os.getenv("ALLOW_ORIGINS", "*"),
    )
