from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from policy_docs.domain.errors import StorageError
from policy_docs.domain.models import ArtifactFormat, StoredArtifact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageLayout:
    """
    Owns the three flat output stores and the naming of files inside them.
    Directories are created lazily and repeatedly; mkdir is idempotent.
    """
    template_dir: Path
    pdf_dir: Path
    docx_dir: Path

    def directory_for(self, fmt: ArtifactFormat) -> Path:
        if fmt is ArtifactFormat.TEMPLATE:
            return self.template_dir
        if fmt is ArtifactFormat.PDF:
            return self.pdf_dir
        return self.docx_dir

    def ensure_layout(self) -> None:
        for d in (self.template_dir, self.pdf_dir, self.docx_dir):
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(f"Failed to create directory {d}: {e}", path=d) from e

    def resolve_path(self, base: str, fmt: ArtifactFormat) -> Path:
        return self.directory_for(fmt) / f"{base}.{fmt.extension}"

    def write_text(self, path: Path, text: str, fmt: ArtifactFormat = ArtifactFormat.TEMPLATE) -> StoredArtifact:
        return self.write_bytes(path, text.encode("utf-8"), fmt)

    def write_bytes(self, path: Path, data: bytes, fmt: ArtifactFormat) -> StoredArtifact:
        try:
            path.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}", path=path) from e
        logger.debug("Wrote %s (%d bytes)", path, len(data))
        return StoredArtifact(path=path, format=fmt)
