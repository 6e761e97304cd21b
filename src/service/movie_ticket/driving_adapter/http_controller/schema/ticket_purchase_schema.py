from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, SecretStr

from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus
from src.service.movie_ticket.domain.value_object.payment_info import PaymentInfo


class PaymentInfoRequest(BaseModel):
    """Write-only: card number and CVV are never echoed back"""

    card_number: SecretStr
    card_holder_name: str = Field(..., min_length=1, max_length=255)
    expiry_date: str = ''
    cvv: SecretStr = SecretStr('')

    def to_value_object(self) -> PaymentInfo:
        return PaymentInfo(
            card_number=self.card_number.get_secret_value().replace(' ', ''),
            card_holder_name=self.card_holder_name,
            expiry_date=self.expiry_date,
            cvv=self.cvv.get_secret_value(),
        )


class TicketPurchaseCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'movie_id': 1,
                'quantity': 2,
                'payment_info': {
                    'card_number': '4111111111111111',
                    'card_holder_name': 'Jane Doe',
                    'expiry_date': '12/28',
                    'cvv': '123',
                },
            }
        }
    }

    movie_id: int
    quantity: int
    payment_info: PaymentInfoRequest


class TicketPurchaseResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'customer_id': 2,
                'customer_name': 'Jane Doe',
                'movie_id': 1,
                'movie_title': 'The Matrix',
                'quantity': 2,
                'unit_price': '15000.00',
                'total_amount': '30000.00',
                'status': 'CONFIRMED',
                'card_last_four': '1111',
                'card_holder_name': 'Jane Doe',
                'confirmation_code': 'TKT-7QK2M9XA',
                'purchase_date': '2025-01-10T10:30:00',
            }
        }
    }

    id: int
    customer_id: int
    customer_name: str
    movie_id: int
    movie_title: str
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    status: PurchaseStatus
    card_last_four: str
    card_holder_name: str
    confirmation_code: str
    purchase_date: Optional[datetime] = None

    @classmethod
    def from_detail(cls, detail: TicketPurchaseDetail) -> 'TicketPurchaseResponse':
        return cls(
            id=detail.id,
            customer_id=detail.customer_id,
            customer_name=detail.customer_name,
            movie_id=detail.movie_id,
            movie_title=detail.movie_title,
            quantity=detail.quantity,
            unit_price=detail.unit_price,
            total_amount=detail.total_amount,
            status=detail.status,
            card_last_four=detail.card_last_four,
            card_holder_name=detail.card_holder_name,
            confirmation_code=detail.confirmation_code,
            purchase_date=detail.purchase_date,
        )
