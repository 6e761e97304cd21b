"""
Ticket Purchase Domain Events

Carries everything the confirmation email needs, so delivery never has to
go back to the database.
"""

from datetime import datetime
from decimal import Decimal

import attrs

from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.entity.movie_entity import Movie
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus


@attrs.define(frozen=True)
class TicketPurchaseConfirmedEvent:
    """Domain event fired after a purchase is committed"""

    purchase_id: int
    confirmation_code: str
    customer_email: str
    customer_name: str
    movie_title: str
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    purchase_date: datetime
    status: PurchaseStatus
    card_last_four: str
    card_holder_name: str

    @classmethod
    def from_purchase(
        cls, *, purchase: TicketPurchase, customer: CustomerEntity, movie: Movie
    ) -> 'TicketPurchaseConfirmedEvent':
        assert purchase.id is not None and purchase.purchase_date is not None
        return cls(
            purchase_id=purchase.id,
            confirmation_code=purchase.confirmation_code,
            customer_email=customer.email,
            customer_name=customer.full_name,
            movie_title=movie.title,
            quantity=purchase.quantity,
            unit_price=purchase.unit_price,
            total_amount=purchase.total_amount,
            purchase_date=purchase.purchase_date,
            status=purchase.status,
            card_last_four=purchase.card_last_four,
            card_holder_name=purchase.card_holder_name,
        )
