from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import BusinessRuleViolationError, InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus
from src.service.movie_ticket.domain.pricing_domain import (
    compute_total,
    generate_confirmation_code,
    to_money,
)
from src.service.movie_ticket.domain.value_object.payment_info import PaymentInfo


MIN_TICKETS_PER_PURCHASE = 1
MAX_TICKETS_PER_PURCHASE = 10


@attrs.define
class TicketPurchase:
    customer_id: int
    movie_id: int
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    card_last_four: str
    card_holder_name: str
    confirmation_code: str
    status: PurchaseStatus = PurchaseStatus.PENDING
    purchase_date: Optional[datetime] = None
    id: Optional[int] = None

    @staticmethod
    def validate_quantity(quantity: int) -> None:
        if not isinstance(quantity, int) or not (
            MIN_TICKETS_PER_PURCHASE <= quantity <= MAX_TICKETS_PER_PURCHASE
        ):
            raise InvalidInputError(
                f'Quantity must be between {MIN_TICKETS_PER_PURCHASE} and {MAX_TICKETS_PER_PURCHASE}'
            )

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        customer_id: int,
        movie_id: int,
        quantity: int,
        unit_price: Decimal,
        payment_info: PaymentInfo,
        confirmation_code: str | None = None,
    ) -> 'TicketPurchase':
        """
        Build a confirmed purchase

        The unit price is a snapshot of the movie price at purchase time and the
        total is computed once here. Only the last 4 card digits are kept.
        """
        cls.validate_quantity(quantity)
        payment_info.validate()

        unit_price = to_money(unit_price)
        return cls(
            customer_id=customer_id,
            movie_id=movie_id,
            quantity=quantity,
            unit_price=unit_price,
            total_amount=compute_total(unit_price=unit_price, quantity=quantity),
            card_last_four=payment_info.card_last_four,
            card_holder_name=payment_info.card_holder_name.strip(),
            confirmation_code=confirmation_code or generate_confirmation_code(),
            status=PurchaseStatus.CONFIRMED,
            purchase_date=datetime.now(timezone.utc),
        )

    @Logger.io
    def cancel(self) -> 'TicketPurchase':
        """
        Cancel purchase (Domain validation)

        Raises:
            BusinessRuleViolationError: When the purchase is not CONFIRMED
        """
        if self.status != PurchaseStatus.CONFIRMED:
            raise BusinessRuleViolationError('Only confirmed purchases can be cancelled')
        return attrs.evolve(self, status=PurchaseStatus.CANCELLED)

    @Logger.io
    def refund(self) -> 'TicketPurchase':
        if self.status != PurchaseStatus.CONFIRMED:
            raise BusinessRuleViolationError('Only confirmed purchases can be refunded')
        return attrs.evolve(self, status=PurchaseStatus.REFUNDED)
