"""Read projection of a ticket purchase."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.entity.movie_entity import Movie
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus


@attrs.define(frozen=True)
class TicketPurchaseDetail:
    """
    Ticket purchase joined with the names of the customer and movie it references.

    customer_name and movie_title are resolved at read time and never stored
    on the purchase row.
    """

    id: int
    customer_id: int
    movie_id: int
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    status: PurchaseStatus
    card_last_four: str
    card_holder_name: str
    confirmation_code: str
    purchase_date: Optional[datetime]
    customer_name: str
    customer_email: str
    movie_title: str

    @classmethod
    def build(
        cls,
        *,
        purchase: TicketPurchase,
        customer: Optional[CustomerEntity],
        movie: Optional[Movie],
    ) -> 'TicketPurchaseDetail':
        assert purchase.id is not None
        return cls(
            id=purchase.id,
            customer_id=purchase.customer_id,
            movie_id=purchase.movie_id,
            quantity=purchase.quantity,
            unit_price=purchase.unit_price,
            total_amount=purchase.total_amount,
            status=purchase.status,
            card_last_four=purchase.card_last_four,
            card_holder_name=purchase.card_holder_name,
            confirmation_code=purchase.confirmation_code,
            purchase_date=purchase.purchase_date,
            customer_name=customer.full_name if customer else '',
            customer_email=customer.email if customer else '',
            movie_title=movie.title if movie else '',
        )
