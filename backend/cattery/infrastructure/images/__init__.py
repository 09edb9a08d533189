from .cataas_image_resolver import CataasImageResolver

__all__ = ["CataasImageResolver"]
