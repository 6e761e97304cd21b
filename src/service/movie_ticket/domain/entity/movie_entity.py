from datetime import datetime, timezone
from decimal import Decimal
import re
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.domain.pricing_domain import to_money


MIN_PRICE = Decimal('0.01')
_IMAGE_URL_PATTERN = re.compile(r'^https?://.+')


def _validate_length(field_name: str, value: str, min_length: int, max_length: int) -> None:
    if value is None or not (min_length <= len(value.strip()) <= max_length):
        raise InvalidInputError(
            f'{field_name} must be between {min_length} and {max_length} characters'
        )


@attrs.define
class Movie:
    title: str
    description: str
    image_url: str
    duration: int
    genre: str
    price: Decimal
    id: Optional[int] = None
    enabled: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @staticmethod
    def validate_fields(
        *,
        title: str,
        description: str,
        image_url: str,
        duration: int,
        genre: str,
        price: Decimal,
    ) -> None:
        _validate_length('title', title, 1, 255)
        _validate_length('description', description, 10, 2000)
        _validate_length('genre', genre, 3, 100)
        if not image_url or not _IMAGE_URL_PATTERN.match(image_url):
            raise InvalidInputError('image_url must be a valid http(s) URL')
        if not 1 <= duration <= 500:
            raise InvalidInputError('duration must be between 1 and 500 minutes')
        if to_money(price) < MIN_PRICE:
            raise InvalidInputError('price must be at least 0.01')

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        title: str,
        description: str,
        image_url: str,
        duration: int,
        genre: str,
        price: Decimal,
    ) -> 'Movie':
        cls.validate_fields(
            title=title,
            description=description,
            image_url=image_url,
            duration=duration,
            genre=genre,
            price=price,
        )
        now = datetime.now(timezone.utc)
        return cls(
            title=title,
            description=description,
            image_url=image_url,
            duration=duration,
            genre=genre,
            price=to_money(price),
            enabled=True,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def update_details(
        self,
        *,
        title: str,
        description: str,
        image_url: str,
        duration: int,
        genre: str,
        price: Decimal,
    ) -> 'Movie':
        """
        Replace the catalog fields of this movie

        Purchases already made keep the unit price they snapshotted.
        """
        self.validate_fields(
            title=title,
            description=description,
            image_url=image_url,
            duration=duration,
            genre=genre,
            price=price,
        )
        return attrs.evolve(
            self,
            title=title,
            description=description,
            image_url=image_url,
            duration=duration,
            genre=genre,
            price=to_money(price),
            updated_at=datetime.now(timezone.utc),
        )

    def disable(self) -> 'Movie':
        return attrs.evolve(self, enabled=False, updated_at=datetime.now(timezone.utc))
