######## models.py
########

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class ArtifactFormat(str, Enum):
    TEMPLATE = "template"
    PDF = "pdf"
    DOCX = "docx"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]


_EXTENSIONS = {
    ArtifactFormat.TEMPLATE: "html",
    ArtifactFormat.PDF: "pdf",
    ArtifactFormat.DOCX: "docx",
}


@dataclass(frozen=True)
class StoredArtifact:
    path: Path
    format: ArtifactFormat


@dataclass(frozen=True)
class SavedPaths:
    template: Path
    pdf: Path
    docx: Path

    def to_dict(self) -> dict[str, str]:
        return {
            "template": str(self.template),
            "pdf": str(self.pdf),
            "docx": str(self.docx),
        }


@dataclass(frozen=True)
class PolicyListingEntry:
    name: str
    path: Path
    created: datetime           # file mtime, UTC
    type: str = "pdf"

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "type": self.type,
            "path": str(self.path),
            "created": self.created.isoformat(),
        }
