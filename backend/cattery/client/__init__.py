from .api_client import ApiError, CatteryApiClient
from .gallery import GalleryClient, GalleryPage, ViewState

__all__ = [
    "ApiError",
    "CatteryApiClient",
    "GalleryClient",
    "GalleryPage",
    "ViewState",
]
