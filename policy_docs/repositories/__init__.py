from .policy_repository import PolicyRepository
from .storage_layout import StorageLayout

__all__ = ["PolicyRepository", "StorageLayout"]
