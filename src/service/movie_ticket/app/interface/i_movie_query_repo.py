from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.movie_ticket.domain.entity.movie_entity import Movie


class IMovieQueryRepo(ABC):
    """Movie query repository - catalog reads"""

    @abstractmethod
    async def get_by_id(self, *, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_enabled_by_id(self, *, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_by_ids(self, *, movie_ids: List[int]) -> dict[int, Movie]:
        pass

    @abstractmethod
    async def list_enabled(self) -> List[Movie]:
        pass

    @abstractmethod
    async def search(
        self, *, title: Optional[str] = None, genre: Optional[str] = None
    ) -> List[Movie]:
        """Enabled movies whose title contains `title` and whose genre equals `genre` (case-insensitive)"""
        pass
