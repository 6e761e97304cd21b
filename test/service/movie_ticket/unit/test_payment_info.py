import pytest

from src.platform.exception.exceptions import InvalidInputError
from test.service.movie_ticket.unit.helpers import build_payment_info


@pytest.mark.unit
class TestPaymentInfo:
    def test_valid_payment_info(self) -> None:
        payment_info = build_payment_info()

        payment_info.validate()

        assert payment_info.card_last_four == '1234'

    def test_repr_hides_card_number_and_cvv(self) -> None:
        payment_info = build_payment_info(card_number='4111111111119876', cvv='987')

        text = repr(payment_info)

        assert '4111111111119876' not in text
        assert '987' not in text
        assert 'Jane Doe' in text

    @pytest.mark.parametrize(
        'overrides,message',
        [
            ({'card_number': '4111-1111'}, 'Card number must contain digits only'),
            ({'card_number': ''}, 'Card number must contain digits only'),
            ({'card_number': '123'}, 'Card number must have at least 4 characters'),
            ({'card_holder_name': '   '}, 'Card holder name is required'),
            ({'expiry_date': '13/30'}, 'Expiry date must be in MM/YY format'),
            ({'cvv': '12'}, 'CVV must be 3 or 4 digits'),
        ],
    )
    def test_invalid_payment_info(self, overrides: dict, message: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            build_payment_info(**overrides).validate()

        assert exc_info.value.message == message

    def test_expiry_and_cvv_are_optional(self) -> None:
        build_payment_info(expiry_date='', cvv='').validate()
