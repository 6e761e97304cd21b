from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_movie_command_repo import IMovieCommandRepo
from src.service.movie_ticket.domain.entity.movie_entity import Movie
from src.service.movie_ticket.driven_adapter.model.movie_model import MovieModel
from src.service.movie_ticket.driven_adapter.repo.model_mapper import movie_model_to_entity
from src.service.movie_ticket.driven_adapter.repo.session_aware_repo import SessionAwareRepo


class MovieCommandRepoImpl(SessionAwareRepo, IMovieCommandRepo):
    @Logger.io
    async def create(self, *, movie: Movie) -> Movie:
        async with self._get_session() as session:
            movie_model = MovieModel(
                title=movie.title,
                description=movie.description,
                image_url=movie.image_url,
                duration=movie.duration,
                genre=movie.genre,
                price=movie.price,
                enabled=movie.enabled,
            )
            session.add(movie_model)
            await session.flush()
            await session.refresh(movie_model)

            return movie_model_to_entity(movie_model)

    @Logger.io
    async def update(self, *, movie: Movie) -> Movie:
        async with self._get_session() as session:
            movie_model = await session.get(MovieModel, movie.id)
            if movie_model is None:
                raise NotFoundError(f'Movie not found with id: {movie.id}')

            movie_model.title = movie.title
            movie_model.description = movie.description
            movie_model.image_url = movie.image_url
            movie_model.duration = movie.duration
            movie_model.genre = movie.genre
            movie_model.price = movie.price
            movie_model.enabled = movie.enabled
            await session.flush()
            await session.refresh(movie_model)

            return movie_model_to_entity(movie_model)
