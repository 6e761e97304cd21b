from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.domain.entity.movie_entity import Movie


class DisableMovieUseCase:
    """Removes a movie from the catalog; purchases that reference it are kept"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def disable(self, *, movie_id: int) -> Movie:
        async with self.uow:
            movie = await self.uow.movie_query_repo.get_enabled_by_id(movie_id=movie_id)
            if not movie:
                raise NotFoundError(f'Movie not found with id: {movie_id}')

            disabled = await self.uow.movie_command_repo.update(movie=movie.disable())
            await self.uow.commit()

        return disabled
