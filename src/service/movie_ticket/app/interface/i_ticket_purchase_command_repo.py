from abc import ABC, abstractmethod
from typing import Optional

from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus


class ITicketPurchaseCommandRepo(ABC):
    """Ticket purchase command repository - handles write operations"""

    @abstractmethod
    async def create(self, *, purchase: TicketPurchase) -> TicketPurchase:
        """
        Persist a new purchase

        Raises:
            ConfirmationCodeConflictError: confirmation code already taken
        """
        pass

    @abstractmethod
    async def get_by_id_for_update(self, *, purchase_id: int) -> Optional[TicketPurchase]:
        """Read a purchase and lock its row until the transaction ends"""
        pass

    @abstractmethod
    async def update_status(self, *, purchase: TicketPurchase) -> TicketPurchase:
        pass
