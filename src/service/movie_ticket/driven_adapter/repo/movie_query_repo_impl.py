from typing import List, Optional

from sqlalchemy import func, select

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.movie_ticket.domain.entity.movie_entity import Movie
from src.service.movie_ticket.driven_adapter.model.movie_model import MovieModel
from src.service.movie_ticket.driven_adapter.repo.model_mapper import movie_model_to_entity
from src.service.movie_ticket.driven_adapter.repo.session_aware_repo import SessionAwareRepo


class MovieQueryRepoImpl(SessionAwareRepo, IMovieQueryRepo):
    @Logger.io
    async def get_by_id(self, *, movie_id: int) -> Optional[Movie]:
        async with self._get_session() as session:
            movie_model = await session.get(MovieModel, movie_id)
            return movie_model_to_entity(movie_model) if movie_model else None

    @Logger.io
    async def get_enabled_by_id(self, *, movie_id: int) -> Optional[Movie]:
        async with self._get_session() as session:
            result = await session.execute(
                select(MovieModel).where(MovieModel.id == movie_id, MovieModel.enabled.is_(True))
            )
            movie_model = result.scalar_one_or_none()
            return movie_model_to_entity(movie_model) if movie_model else None

    @Logger.io
    async def get_by_ids(self, *, movie_ids: List[int]) -> dict[int, Movie]:
        if not movie_ids:
            return {}
        async with self._get_session() as session:
            result = await session.execute(
                select(MovieModel).where(MovieModel.id.in_(set(movie_ids)))
            )
            return {model.id: movie_model_to_entity(model) for model in result.scalars()}

    @Logger.io
    async def list_enabled(self) -> List[Movie]:
        return await self.search()

    @Logger.io
    async def search(
        self, *, title: Optional[str] = None, genre: Optional[str] = None
    ) -> List[Movie]:
        stmt = select(MovieModel).where(MovieModel.enabled.is_(True))
        if title and title.strip():
            stmt = stmt.where(MovieModel.title.icontains(title.strip(), autoescape=True))
        if genre and genre.strip():
            stmt = stmt.where(func.lower(MovieModel.genre) == genre.strip().lower())

        async with self._get_session() as session:
            result = await session.execute(stmt.order_by(MovieModel.id))
            return [movie_model_to_entity(model) for model in result.scalars()]
