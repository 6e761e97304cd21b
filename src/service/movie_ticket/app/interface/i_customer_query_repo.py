from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity


class ICustomerQueryRepo(ABC):
    """
    Customer query repository - handles read operations

    get_by_id / get_by_ids ignore the enabled flag and are meant for admin and
    history paths; everything customer-facing goes through the *_enabled methods.
    """

    @abstractmethod
    async def get_by_id(self, *, customer_id: int) -> Optional[CustomerEntity]:
        pass

    @abstractmethod
    async def get_enabled_by_id(self, *, customer_id: int) -> Optional[CustomerEntity]:
        pass

    @abstractmethod
    async def get_by_ids(self, *, customer_ids: List[int]) -> dict[int, CustomerEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, *, email: str) -> bool:
        pass

    @abstractmethod
    async def list_enabled(self) -> List[CustomerEntity]:
        pass
