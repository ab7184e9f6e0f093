from .converters import DocumentConverter, DocxConverter, PdfConverter
from .filename_deriver import FilenameDeriver, TimestampFilenameDeriver
from .policy_service import PolicyService

__all__ = [
    "DocumentConverter",
    "DocxConverter",
    "FilenameDeriver",
    "PdfConverter",
    "PolicyService",
    "TimestampFilenameDeriver",
]
