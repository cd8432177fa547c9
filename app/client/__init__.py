from app.client.api_client import WorkoutApiClient, ApiError
from app.client.catalog_browser import CatalogBrowser

__all__ = ["WorkoutApiClient", "ApiError", "CatalogBrowser"]
