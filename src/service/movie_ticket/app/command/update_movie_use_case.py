from decimal import Decimal
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.domain.entity.movie_entity import Movie


class UpdateMovieUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def update(
        self,
        *,
        movie_id: int,
        title: str,
        description: str,
        image_url: str,
        duration: int,
        genre: str,
        price: Decimal,
    ) -> Movie:
        async with self.uow:
            movie = await self.uow.movie_query_repo.get_enabled_by_id(movie_id=movie_id)
            if not movie:
                raise NotFoundError(f'Movie not found with id: {movie_id}')

            updated = await self.uow.movie_command_repo.update(
                movie=movie.update_details(
                    title=title,
                    description=description,
                    image_url=image_url,
                    duration=duration,
                    genre=genre,
                    price=price,
                )
            )
            await self.uow.commit()

        return updated
