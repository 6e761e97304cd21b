from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.movie_ticket.domain.entity.movie_entity import Movie


class MovieQueryUseCase:
    """Catalog browsing - disabled movies are never returned"""

    def __init__(self, *, movie_query_repo: IMovieQueryRepo) -> None:
        self.movie_query_repo = movie_query_repo

    @classmethod
    @inject
    def depends(
        cls, movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo])
    ) -> Self:
        return cls(movie_query_repo=movie_query_repo)

    @Logger.io
    async def list_movies(self) -> List[Movie]:
        return await self.movie_query_repo.list_enabled()

    @Logger.io
    async def get_movie(self, *, movie_id: int) -> Movie:
        movie = await self.movie_query_repo.get_enabled_by_id(movie_id=movie_id)
        if not movie:
            raise NotFoundError(f'Movie not found with id: {movie_id}')
        return movie

    @Logger.io
    async def search_movies(
        self, *, title: Optional[str] = None, genre: Optional[str] = None
    ) -> List[Movie]:
        return await self.movie_query_repo.search(title=title, genre=genre)
