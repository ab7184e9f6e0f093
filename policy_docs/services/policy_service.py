from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from policy_docs.domain.errors import InvalidInputError, PolicyDocsError
from policy_docs.domain.models import ArtifactFormat, SavedPaths
from policy_docs.repositories.storage_layout import StorageLayout
from policy_docs.services.converters import DocumentConverter
from policy_docs.services.filename_deriver import FilenameDeriver

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PolicyService:
    """
    Service layer: orchestrates one "save policy" operation.

    template -> PDF -> DOCX, strictly in that order. The first failure aborts
    the run and propagates unchanged; files written by earlier steps are left
    in place.
    """
    layout: StorageLayout
    filename_deriver: FilenameDeriver
    pdf_converter: DocumentConverter
    docx_converter: DocumentConverter
    clock: Callable[[], datetime] = field(default=_utcnow)

    async def save_policy(self, policy_data: Mapping[str, Any], html_content: str) -> SavedPaths:
        self.layout.ensure_layout()

        if not isinstance(policy_data, Mapping):
            raise InvalidInputError("policyData must be an object.")
        if not isinstance(html_content, str):
            raise InvalidInputError("htmlContent is required and must be text.")

        base = self.filename_deriver.derive(
            policy_data.get("companyName"),
            policy_data.get("title"),
            self.clock(),
        )
        template_path = self.layout.resolve_path(base, ArtifactFormat.TEMPLATE)
        pdf_path = self.layout.resolve_path(base, ArtifactFormat.PDF)
        docx_path = self.layout.resolve_path(base, ArtifactFormat.DOCX)
        logger.info("Saving policy documents as %s", base)

        try:
            template = self.layout.write_text(template_path, html_content)

            pdf_bytes = await self.pdf_converter.convert(html_content)
            pdf = self.layout.write_bytes(pdf_path, pdf_bytes, ArtifactFormat.PDF)

            docx_bytes = await self.docx_converter.convert(html_content)
            docx = self.layout.write_bytes(docx_path, docx_bytes, ArtifactFormat.DOCX)
        except PolicyDocsError:
            logger.debug("Saving %s stopped; earlier artifacts are kept", base)
            raise

        logger.info("Saved %s (template, pdf, docx)", base)
        return SavedPaths(template=template.path, pdf=pdf.path, docx=docx.path)
