from streambox.services.catalog_service import CatalogStore
from streambox.services.recommendation_service import RecommendationService

__all__ = ["CatalogStore", "RecommendationService"]
