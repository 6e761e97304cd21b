from unittest.mock import Mock

import pytest

from src.platform.exception.exceptions import AuthenticationError, BusinessRuleViolationError
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole
from src.service.movie_ticket.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from test.service.movie_ticket.unit.helpers import build_customer


@pytest.mark.unit
class TestCustomerEntity:
    def test_password_round_trip(self) -> None:
        hasher = BcryptPasswordHasher()
        customer = build_customer(hashed_password='')

        customer.set_password('Password123', hasher)

        assert customer.hashed_password.startswith('$2')
        assert customer.verify_password('Password123', hasher)
        assert not customer.verify_password('Password124', hasher)

    def test_set_password_requires_hasher_interface(self) -> None:
        with pytest.raises(TypeError):
            build_customer().set_password('Password123', Mock())

    def test_verify_without_hash(self) -> None:
        assert not build_customer(hashed_password='').verify_password(
            'Password123', BcryptPasswordHasher()
        )

    def test_repr_hides_password_hash(self) -> None:
        assert 'secret-hash' not in repr(build_customer(hashed_password='secret-hash'))

    def test_missing_customer_is_invalid_credentials(self) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            build_customer().validate_credentials_found(None)

        assert exc_info.value.status_code == 401

    def test_disabled_customer_cannot_login(self) -> None:
        with pytest.raises(BusinessRuleViolationError):
            build_customer(enabled=False).validate_can_login()

    def test_roles(self) -> None:
        assert build_customer(role=CustomerRole.ADMIN).is_admin
        assert not build_customer().is_admin
        assert build_customer().full_name == 'Jane Doe'
        assert build_customer().disable().enabled is False
