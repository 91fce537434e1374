"""Blocs média — image, vidéo, fichier joint."""
from typing import Literal, Optional

from .base import BaseBlock, MediaPayload


class FilePayload(MediaPayload):
    name: Optional[str] = None


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    image: MediaPayload = MediaPayload()


class VideoBlock(BaseBlock):
    type: Literal["video"] = "video"
    video: MediaPayload = MediaPayload()


class FileBlock(BaseBlock):
    type: Literal["file"] = "file"
    file: FilePayload = FilePayload()
