"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.movie_ticket.driven_adapter.model.customer_model import CustomerModel
from src.service.movie_ticket.driven_adapter.model.movie_model import MovieModel
from src.service.movie_ticket.driven_adapter.model.ticket_purchase_model import (
    TicketPurchaseModel,
)

__all__ = [
    'CustomerModel',
    'MovieModel',
    'TicketPurchaseModel',
]
