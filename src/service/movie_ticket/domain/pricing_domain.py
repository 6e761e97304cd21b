"""
Pricing & Confirmation Domain

Pure computation for ticket purchases: totals, card masking and confirmation codes.
No infrastructure access.
"""

from decimal import ROUND_HALF_UP, Decimal
import re
import secrets
import string

from src.platform.exception.exceptions import InvalidInputError


CURRENCY_QUANTUM = Decimal('0.01')
CONFIRMATION_CODE_PREFIX = 'TKT-'
CONFIRMATION_CODE_LENGTH = 8
CONFIRMATION_CODE_ALPHABET = string.ascii_uppercase + string.digits
CONFIRMATION_CODE_PATTERN = re.compile(r'^TKT-[A-Z0-9]{8}$')
MASKED_CARD_LENGTH = 4


def to_money(amount: Decimal | int | str) -> Decimal:
    """Normalize an amount to a two-place Decimal (floats are rejected)"""
    if isinstance(amount, float):
        raise InvalidInputError('Currency amounts must not be floats')
    return Decimal(amount).quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


def compute_total(*, unit_price: Decimal, quantity: int) -> Decimal:
    return to_money(to_money(unit_price) * quantity)


def mask_card(card_number: str) -> str:
    """Keep only the last 4 characters of a card number"""
    if card_number is None or len(card_number) < MASKED_CARD_LENGTH:
        raise InvalidInputError('Card number must have at least 4 characters')
    return card_number[-MASKED_CARD_LENGTH:]


def generate_confirmation_code() -> str:
    suffix = ''.join(
        secrets.choice(CONFIRMATION_CODE_ALPHABET) for _ in range(CONFIRMATION_CODE_LENGTH)
    )
    return f'{CONFIRMATION_CODE_PREFIX}{suffix}'


def is_valid_confirmation_code(code: str) -> bool:
    return bool(CONFIRMATION_CODE_PATTERN.match(code))
