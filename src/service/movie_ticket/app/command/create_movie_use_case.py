from decimal import Decimal
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.domain.entity.movie_entity import Movie


class CreateMovieUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create(
        self,
        *,
        title: str,
        description: str,
        image_url: str,
        duration: int,
        genre: str,
        price: Decimal,
    ) -> Movie:
        movie = Movie.create(
            title=title,
            description=description,
            image_url=image_url,
            duration=duration,
            genre=genre,
            price=price,
        )

        async with self.uow:
            created = await self.uow.movie_command_repo.create(movie=movie)
            await self.uow.commit()

        return created
