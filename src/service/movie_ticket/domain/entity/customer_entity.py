from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import (
    AuthenticationError,
    BusinessRuleViolationError,
)
from src.service.movie_ticket.app.interface.i_password_hasher import IPasswordHasher
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole


@attrs.define
class CustomerEntity:
    email: str = ''
    phone: str = ''
    first_name: str = ''
    last_name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: CustomerRole = CustomerRole.CUSTOMER
    enabled: bool = True
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'

    @property
    def is_admin(self) -> bool:
        return self.role == CustomerRole.ADMIN

    @staticmethod
    def validate_credentials_found(customer: Optional['CustomerEntity']) -> 'CustomerEntity':
        if not customer:
            raise AuthenticationError('Invalid credentials')
        return customer

    def validate_can_login(self) -> None:
        if not self.enabled:
            raise BusinessRuleViolationError('Account is disabled')

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        # Use SecretStr to protect sensitive password data
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def verify_password(self, plain_password: str, password_hasher: IPasswordHasher) -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        )

    def disable(self) -> 'CustomerEntity':
        return attrs.evolve(self, enabled=False)
