from streambox.repositories.base import CatalogRepository
from streambox.repositories.memory import InMemoryCatalogRepository
from streambox.repositories.sql import SqlCatalogRepository

__all__ = ["CatalogRepository", "InMemoryCatalogRepository", "SqlCatalogRepository"]
