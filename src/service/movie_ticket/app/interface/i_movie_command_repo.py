from abc import ABC, abstractmethod

from src.service.movie_ticket.domain.entity.movie_entity import Movie


class IMovieCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, *, movie: Movie) -> Movie:
        pass
