"""Domain Events"""

from src.service.movie_ticket.domain.domain_event.ticket_purchase_event import (
    TicketPurchaseConfirmedEvent,
)

__all__ = ['TicketPurchaseConfirmedEvent']
