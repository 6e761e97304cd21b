from abc import ABC, abstractmethod


class IImageStorage(ABC):
    """Object storage for movie poster images"""

    @abstractmethod
    async def upload(self, *, filename: str, content_type: str, content: bytes) -> str:
        """Store the image and return its public URL"""
        pass

    @abstractmethod
    async def delete(self, *, url: str) -> None:
        pass
