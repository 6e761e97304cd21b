from decimal import Decimal

import pytest

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import BusinessRuleViolationError, InvalidInputError
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import (
    MAX_TICKETS_PER_PURCHASE,
    TicketPurchase,
)
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus
from src.service.movie_ticket.domain.pricing_domain import is_valid_confirmation_code
from test.service.movie_ticket.unit.helpers import build_payment_info, build_purchase


@pytest.mark.unit
class TestTicketPurchaseCreate:
    def test_create_confirmed_purchase(self) -> None:
        """
        Given: a movie priced 12.50 and a valid card
        When: buying 2 tickets
        Then: the purchase is CONFIRMED, totals 25.00 and keeps only the last 4 digits
        """
        # Act
        purchase = TicketPurchase.create(
            customer_id=1,
            movie_id=10,
            quantity=2,
            unit_price=Decimal('12.50'),
            payment_info=build_payment_info(card_number='4111111111115678'),
        )

        # Assert
        assert purchase.status == PurchaseStatus.CONFIRMED
        assert purchase.unit_price == Decimal('12.50')
        assert purchase.total_amount == Decimal('25.00')
        assert purchase.card_last_four == '5678'
        assert purchase.card_holder_name == 'Jane Doe'
        assert is_valid_confirmation_code(purchase.confirmation_code)
        assert purchase.purchase_date is not None
        assert purchase.id is None

    def test_card_number_is_not_stored(self) -> None:
        purchase = TicketPurchase.create(
            customer_id=1,
            movie_id=10,
            quantity=1,
            unit_price=Decimal('10.00'),
            payment_info=build_payment_info(card_number='4111111111115678'),
        )

        assert '4111111111115678' not in repr(purchase)
        assert not hasattr(purchase, 'card_number')

    def test_explicit_confirmation_code_is_kept(self) -> None:
        purchase = TicketPurchase.create(
            customer_id=1,
            movie_id=10,
            quantity=1,
            unit_price=Decimal('10.00'),
            payment_info=build_payment_info(),
            confirmation_code='TKT-FIXED001',
        )

        assert purchase.confirmation_code == 'TKT-FIXED001'

    @pytest.mark.parametrize('quantity', [0, -1, 11])
    def test_quantity_out_of_range(self, quantity: int) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            TicketPurchase.create(
                customer_id=1,
                movie_id=10,
                quantity=quantity,
                unit_price=Decimal('10.00'),
                payment_info=build_payment_info(),
            )

        assert exc_info.value.message == 'Quantity must be between 1 and 10'

    @pytest.mark.parametrize('quantity', [1, 10])
    def test_quantity_boundaries_are_accepted(self, quantity: int) -> None:
        TicketPurchase.validate_quantity(quantity)

    def test_invalid_payment_info_is_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            TicketPurchase.create(
                customer_id=1,
                movie_id=10,
                quantity=1,
                unit_price=Decimal('10.00'),
                payment_info=build_payment_info(card_number='12'),
            )

    def test_identical_purchases_get_distinct_codes(self) -> None:
        """
        Given: the same customer, movie, quantity and card
        When: creating two purchases one after the other
        Then: both codes match TKT-XXXXXXXX and they differ
        """
        # Act
        first, second = (
            TicketPurchase.create(
                customer_id=1,
                movie_id=10,
                quantity=2,
                unit_price=Decimal('12.50'),
                payment_info=build_payment_info(),
            )
            for _ in range(2)
        )

        # Assert
        assert is_valid_confirmation_code(first.confirmation_code)
        assert is_valid_confirmation_code(second.confirmation_code)
        assert first.confirmation_code != second.confirmation_code

    def test_quantity_limit_ignores_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        Given: MAX_TICKETS_PER_PURCHASE=20 in the environment
        When: validating 11 tickets with freshly loaded settings
        Then: the fixed limit of 10 still applies
        """
        # Arrange
        monkeypatch.setenv('MAX_TICKETS_PER_PURCHASE', '20')
        reloaded = Settings()  # type: ignore

        # Act / Assert
        assert not hasattr(reloaded, 'MAX_TICKETS_PER_PURCHASE')
        assert MAX_TICKETS_PER_PURCHASE == 10
        with pytest.raises(InvalidInputError):
            TicketPurchase.validate_quantity(11)


@pytest.mark.unit
class TestTicketPurchaseStatus:
    def test_cancel_confirmed_purchase(self) -> None:
        purchase = build_purchase()

        cancelled = purchase.cancel()

        assert cancelled.status == PurchaseStatus.CANCELLED
        assert cancelled.total_amount == purchase.total_amount
        assert purchase.status == PurchaseStatus.CONFIRMED

    @pytest.mark.parametrize(
        'status', [PurchaseStatus.PENDING, PurchaseStatus.CANCELLED, PurchaseStatus.REFUNDED]
    )
    def test_cancel_requires_confirmed(self, status: PurchaseStatus) -> None:
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            build_purchase(status=status).cancel()

        assert exc_info.value.message == 'Only confirmed purchases can be cancelled'

    def test_refund_confirmed_purchase(self) -> None:
        assert build_purchase().refund().status == PurchaseStatus.REFUNDED

    def test_refund_requires_confirmed(self) -> None:
        with pytest.raises(BusinessRuleViolationError):
            build_purchase(status=PurchaseStatus.CANCELLED).refund()
