from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import InvalidInputError, NotFoundError
from src.service.movie_ticket.app.command.create_movie_use_case import CreateMovieUseCase
from src.service.movie_ticket.app.command.disable_movie_use_case import DisableMovieUseCase
from src.service.movie_ticket.app.command.movie_image_use_case import MovieImageUseCase
from src.service.movie_ticket.app.command.update_movie_use_case import UpdateMovieUseCase
from src.service.movie_ticket.app.query.movie_query_use_case import MovieQueryUseCase
from test.service.movie_ticket.unit.helpers import FakeUnitOfWork, RepositoryMocks, build_movie


MOVIE_FIELDS = {
    'title': 'Inception',
    'description': 'A thief steals secrets through dream-sharing technology.',
    'image_url': 'https://example.com/inception.jpg',
    'duration': 148,
    'genre': 'Thriller',
    'price': Decimal('15.00'),
}


@pytest.mark.unit
class TestMovieCommandUseCases:
    @pytest.mark.asyncio
    async def test_create_movie(self) -> None:
        repos = RepositoryMocks()
        uow = FakeUnitOfWork(repos)

        movie = await CreateMovieUseCase(uow=uow).create(**MOVIE_FIELDS)

        assert movie.id == 10
        assert movie.enabled is True
        assert uow.commit_count == 1

    @pytest.mark.asyncio
    async def test_create_invalid_movie_is_not_persisted(self) -> None:
        repos = RepositoryMocks()

        with pytest.raises(InvalidInputError):
            await CreateMovieUseCase(uow=FakeUnitOfWork(repos)).create(
                **(MOVIE_FIELDS | {'duration': 0})
            )

        repos.movie_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_movie(self) -> None:
        repos = RepositoryMocks(movie=build_movie())

        movie = await UpdateMovieUseCase(uow=FakeUnitOfWork(repos)).update(
            movie_id=10, **MOVIE_FIELDS
        )

        assert movie.id == 10
        assert movie.title == 'Inception'
        assert movie.price == Decimal('15.00')

    @pytest.mark.asyncio
    async def test_update_missing_movie(self) -> None:
        repos = RepositoryMocks()

        with pytest.raises(NotFoundError):
            await UpdateMovieUseCase(uow=FakeUnitOfWork(repos)).update(movie_id=10, **MOVIE_FIELDS)

    @pytest.mark.asyncio
    async def test_disable_movie(self) -> None:
        repos = RepositoryMocks(movie=build_movie())

        movie = await DisableMovieUseCase(uow=FakeUnitOfWork(repos)).disable(movie_id=10)

        assert movie.enabled is False


@pytest.mark.unit
class TestMovieQueryUseCase:
    @pytest.mark.asyncio
    async def test_get_disabled_or_missing_movie(self) -> None:
        repos = RepositoryMocks()

        with pytest.raises(NotFoundError) as exc_info:
            await MovieQueryUseCase(movie_query_repo=repos.movie_query_repo).get_movie(movie_id=5)

        assert exc_info.value.message == 'Movie not found with id: 5'

    @pytest.mark.asyncio
    async def test_search_movies(self) -> None:
        repos = RepositoryMocks()
        repos.movie_query_repo.search = AsyncMock(return_value=[build_movie()])

        movies = await MovieQueryUseCase(movie_query_repo=repos.movie_query_repo).search_movies(
            title='matrix'
        )

        assert [movie.title for movie in movies] == ['The Matrix']
        repos.movie_query_repo.search.assert_awaited_once_with(title='matrix', genre=None)


@pytest.mark.unit
class TestMovieImageUseCase:
    @pytest.mark.asyncio
    async def test_upload_and_delete_delegate_to_storage(self) -> None:
        storage = AsyncMock()
        storage.upload = AsyncMock(return_value='https://bucket.s3.us-east-1.amazonaws.com/movies/a.png')
        use_case = MovieImageUseCase(image_storage=storage)

        url = await use_case.upload(filename='a.png', content_type='image/png', content=b'png')
        await use_case.delete(url=url)

        storage.upload.assert_awaited_once_with(
            filename='a.png', content_type='image/png', content=b'png'
        )
        storage.delete.assert_awaited_once_with(url=url)
