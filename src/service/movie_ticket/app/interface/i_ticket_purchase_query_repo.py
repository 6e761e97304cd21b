from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase


class ITicketPurchaseQueryRepo(ABC):
    """Ticket purchase query repository - lists are ordered newest first"""

    @abstractmethod
    async def get_by_id(self, *, purchase_id: int) -> Optional[TicketPurchase]:
        pass

    @abstractmethod
    async def get_by_confirmation_code(self, *, confirmation_code: str) -> Optional[TicketPurchase]:
        pass

    @abstractmethod
    async def list_by_customer(self, *, customer_id: int) -> List[TicketPurchase]:
        pass

    @abstractmethod
    async def list_by_movie(self, *, movie_id: int) -> List[TicketPurchase]:
        pass
