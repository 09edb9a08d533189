"""Abstract interface (port) for picking a photo for a cat without one."""

from abc import ABC, abstractmethod


class ImageResolver(ABC):
    """Port for the external cat image service: implemented in the infrastructure layer."""

    @abstractmethod
    async def resolve_image_url(self) -> str | None:
        """Return a fresh image URL, or None when the service gave nothing usable.

        Implementations must not raise for network or HTTP failures; the
        caller substitutes a placeholder when None is returned.
        """
        ...
