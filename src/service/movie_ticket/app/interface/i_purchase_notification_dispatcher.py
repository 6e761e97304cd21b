from abc import ABC, abstractmethod

from src.service.movie_ticket.domain.domain_event.ticket_purchase_event import (
    TicketPurchaseConfirmedEvent,
)


class IPurchaseNotificationDispatcher(ABC):
    """Fire-and-forget delivery of purchase confirmations"""

    @abstractmethod
    def dispatch(self, *, event: TicketPurchaseConfirmedEvent) -> None:
        """
        Schedule delivery and return immediately

        Must never raise: delivery failures are logged and dropped.
        """
        pass
