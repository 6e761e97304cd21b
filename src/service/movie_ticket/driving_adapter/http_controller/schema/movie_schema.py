from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from src.service.movie_ticket.domain.entity.movie_entity import Movie


class MovieRequest(BaseModel):
    """Body for both create and full update"""

    model_config = {
        'json_schema_extra': {
            'example': {
                'title': 'The Matrix',
                'description': 'A hacker learns the truth about his reality.',
                'image_url': 'https://movie-ticket-images.s3.us-east-1.amazonaws.com/movies/matrix.jpg',
                'duration': 136,
                'genre': 'Science Fiction',
                'price': '15000.00',
            }
        }
    }

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=10, max_length=2000)
    image_url: str
    duration: int = Field(..., ge=1, le=500)
    genre: str = Field(..., min_length=3, max_length=100)
    price: Decimal = Field(..., ge=Decimal('0.01'), max_digits=12, decimal_places=2)


class MovieResponse(BaseModel):
    id: int
    title: str
    description: str
    image_url: str
    duration: int
    genre: str
    price: Decimal
    enabled: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, movie: Movie) -> 'MovieResponse':
        return cls(
            id=movie.id or 0,
            title=movie.title,
            description=movie.description,
            image_url=movie.image_url,
            duration=movie.duration,
            genre=movie.genre,
            price=movie.price,
            enabled=movie.enabled,
            created_at=movie.created_at,
            updated_at=movie.updated_at,
        )


class ImageUploadResponse(BaseModel):
    url: str
