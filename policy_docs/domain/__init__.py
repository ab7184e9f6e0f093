from .errors import ConversionError, InvalidInputError, PolicyDocsError, StorageError
from .models import ArtifactFormat, PolicyListingEntry, SavedPaths, StoredArtifact

__all__ = [
    "ArtifactFormat",
    "ConversionError",
    "InvalidInputError",
    "PolicyDocsError",
    "PolicyListingEntry",
    "SavedPaths",
    "StorageError",
    "StoredArtifact",
]
