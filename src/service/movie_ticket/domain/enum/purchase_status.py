from enum import StrEnum


class PurchaseStatus(StrEnum):
    """
    Ticket purchase lifecycle

    PENDING -> CONFIRMED -> CANCELLED | REFUNDED
    Purchases are created directly as CONFIRMED (no deferred payment step).
    """

    PENDING = 'PENDING'
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'
    REFUNDED = 'REFUNDED'
