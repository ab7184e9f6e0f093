from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass

from docx import Document
from htmldocx import HtmlToDocx

from policy_docs.domain.errors import ConversionError
from policy_docs.domain.models import ArtifactFormat

logger = logging.getLogger(__name__)


class DocumentConverter:
    """
    Strategy interface: one HTML string in, one complete document buffer out.
    Rendering is blocking, so it runs on a worker thread and callers await it.
    """
    format: ArtifactFormat

    def render(self, html: str) -> bytes:
        raise NotImplementedError

    async def convert(self, html: str) -> bytes:
        try:
            data = await asyncio.to_thread(self.render, html)
        except Exception as e:
            raise ConversionError(self.format.value, e) from e
        logger.debug("%s rendered (%d bytes)", self.format.value, len(data))
        return data


@dataclass(frozen=True)
class PdfConverter(DocumentConverter):
    page_size: str = "A4"
    margin: str = "1in"

    format = ArtifactFormat.PDF

    def page_css(self) -> str:
        return f"@page {{ size: {self.page_size}; margin: {self.margin}; }}"

    def render(self, html: str) -> bytes:
        # WeasyPrint loads Pango at import time; a host without it fails here as a PDF error.
        from weasyprint import CSS, HTML

        return HTML(string=html).write_pdf(stylesheets=[CSS(string=self.page_css())])


@dataclass(frozen=True)
class DocxConverter(DocumentConverter):
    format = ArtifactFormat.DOCX

    def render(self, html: str) -> bytes:
        document = Document()
        HtmlToDocx().add_html_to_document(html, document)
        buf = io.BytesIO()
        document.save(buf)
        return buf.getvalue()
