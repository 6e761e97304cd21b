"""Application layer DTOs"""

from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail

__all__ = ['TicketPurchaseDetail']
