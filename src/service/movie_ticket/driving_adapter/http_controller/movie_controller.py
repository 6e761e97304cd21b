from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.command.create_movie_use_case import CreateMovieUseCase
from src.service.movie_ticket.app.command.disable_movie_use_case import DisableMovieUseCase
from src.service.movie_ticket.app.command.movie_image_use_case import MovieImageUseCase
from src.service.movie_ticket.app.command.update_movie_use_case import UpdateMovieUseCase
from src.service.movie_ticket.app.query.movie_query_use_case import MovieQueryUseCase
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.driving_adapter.http_controller.auth.role_auth import require_admin
from src.service.movie_ticket.driving_adapter.http_controller.schema.movie_schema import (
    ImageUploadResponse,
    MovieRequest,
    MovieResponse,
)


router = APIRouter()


# Image routes are declared before /{movie_id} so 'image' is not parsed as an id


@router.post('/image', response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def upload_movie_image(
    file: UploadFile = File(...),
    _: CustomerEntity = Depends(require_admin),
    use_case: MovieImageUseCase = Depends(MovieImageUseCase.depends),
) -> ImageUploadResponse:
    url = await use_case.upload(
        filename=file.filename or '',
        content_type=file.content_type or '',
        content=await file.read(),
    )
    return ImageUploadResponse(url=url)


@router.delete('/image', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_movie_image(
    url: str = Query(...),
    _: CustomerEntity = Depends(require_admin),
    use_case: MovieImageUseCase = Depends(MovieImageUseCase.depends),
) -> None:
    await use_case.delete(url=url)


@router.post('', response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_movie(
    request: MovieRequest,
    _: CustomerEntity = Depends(require_admin),
    use_case: CreateMovieUseCase = Depends(CreateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.create(**request.model_dump())
    return MovieResponse.from_entity(movie)


@router.get('', response_model=List[MovieResponse])
@Logger.io
async def list_movies(
    title: Optional[str] = None,
    genre: Optional[str] = None,
    use_case: MovieQueryUseCase = Depends(MovieQueryUseCase.depends),
) -> List[MovieResponse]:
    if title or genre:
        movies = await use_case.search_movies(title=title, genre=genre)
    else:
        movies = await use_case.list_movies()
    return [MovieResponse.from_entity(movie) for movie in movies]


@router.get('/{movie_id}', response_model=MovieResponse)
@Logger.io
async def get_movie(
    movie_id: int,
    use_case: MovieQueryUseCase = Depends(MovieQueryUseCase.depends),
) -> MovieResponse:
    return MovieResponse.from_entity(await use_case.get_movie(movie_id=movie_id))


@router.put('/{movie_id}', response_model=MovieResponse)
@Logger.io
async def update_movie(
    movie_id: int,
    request: MovieRequest,
    _: CustomerEntity = Depends(require_admin),
    use_case: UpdateMovieUseCase = Depends(UpdateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.update(movie_id=movie_id, **request.model_dump())
    return MovieResponse.from_entity(movie)


@router.delete('/{movie_id}', response_model=MovieResponse)
@Logger.io
async def disable_movie(
    movie_id: int,
    _: CustomerEntity = Depends(require_admin),
    use_case: DisableMovieUseCase = Depends(DisableMovieUseCase.depends),
) -> MovieResponse:
    return MovieResponse.from_entity(await use_case.disable(movie_id=movie_id))
