from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_image_storage import IImageStorage


class MovieImageUseCase:
    def __init__(self, *, image_storage: IImageStorage) -> None:
        self.image_storage = image_storage

    @classmethod
    @inject
    def depends(
        cls, image_storage: IImageStorage = Depends(Provide[Container.image_storage])
    ) -> Self:
        return cls(image_storage=image_storage)

    @Logger.io
    async def upload(self, *, filename: str, content_type: str, content: bytes) -> str:
        return await self.image_storage.upload(
            filename=filename, content_type=content_type, content=content
        )

    @Logger.io
    async def delete(self, *, url: str) -> None:
        await self.image_storage.delete(url=url)
