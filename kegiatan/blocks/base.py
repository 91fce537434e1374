"""
Blocs Notion — types de base partagés.
RichText (span annoté), AssetRef (hébergé Notion / externe), BaseBlock.
"""
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class Annotations(BaseModel):
    """Drapeaux de mise en forme d'un span (color ignoré)."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False


class RichText(BaseModel):
    """Span de texte riche, tel que renvoyé par Notion. Jamais modifié."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    plain_text: str = ""
    href: Optional[str] = None
    annotations: Annotations = Annotations()


# ── Assets ──────────────────────────────────────────────────────────────────

class HostedAsset(BaseModel):
    """Fichier stocké par Notion — URL signée, accessible avec le token uniquement."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["hosted"] = "hosted"
    url: str = ""


class ExternalAsset(BaseModel):
    """Fichier référencé par une URL publique."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["external"] = "external"
    url: str = ""


AssetRef = Annotated[Union[HostedAsset, ExternalAsset], Field(discriminator="kind")]


class FileLink(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = ""


class MediaPayload(BaseModel):
    """Payload commun image / video / file : `file` (Notion) ou `external`."""
    model_config = ConfigDict(extra="ignore")

    file: Optional[FileLink] = None
    external: Optional[FileLink] = None
    caption: List[RichText] = []

    @property
    def source(self) -> Optional[AssetRef]:
        # `file` prioritaire, comme dans l'API Notion un seul des deux est rempli
        if self.file and self.file.url:
            return HostedAsset(url=self.file.url)
        if self.external and self.external.url:
            return ExternalAsset(url=self.external.url)
        return None


# ── Bloc ────────────────────────────────────────────────────────────────────

class BaseBlock(BaseModel):
    """Bloc de base (classe parente de tous les blocs Notion)."""
    model_config = ConfigDict(extra="ignore")

    type: str
    id: Optional[str] = None
    has_children: bool = False
