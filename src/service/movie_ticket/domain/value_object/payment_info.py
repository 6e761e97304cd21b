import re

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.service.movie_ticket.domain.pricing_domain import mask_card


_EXPIRY_PATTERN = re.compile(r'^(0[1-9]|1[0-2])/\d{2}$')
_CVV_PATTERN = re.compile(r'^\d{3,4}$')


@attrs.frozen
class PaymentInfo:
    """
    Card-like payment descriptor (value object)

    Write-only: card_number and cvv never show up in repr and are dropped
    once the card is masked.
    """

    card_number: str = attrs.field(repr=False)
    card_holder_name: str
    expiry_date: str = ''
    cvv: str = attrs.field(default='', repr=False)

    def validate(self) -> None:
        if not self.card_number or not self.card_number.isdigit():
            raise InvalidInputError('Card number must contain digits only')
        # Raises when shorter than 4 characters
        mask_card(self.card_number)
        if not self.card_holder_name or not self.card_holder_name.strip():
            raise InvalidInputError('Card holder name is required')
        if self.expiry_date and not _EXPIRY_PATTERN.match(self.expiry_date):
            raise InvalidInputError('Expiry date must be in MM/YY format')
        if self.cvv and not _CVV_PATTERN.match(self.cvv):
            raise InvalidInputError('CVV must be 3 or 4 digits')

    @property
    def card_last_four(self) -> str:
        return mask_card(self.card_number)
