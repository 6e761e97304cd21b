"""
Customer Authentication (JWT in an HttpOnly cookie)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.app.interface.i_password_hasher import IPasswordHasher
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS

    @property
    def max_age_seconds(self) -> int:
        return self.token_expire_days * 24 * 60 * 60

    def create_jwt_token(self, customer: CustomerEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(customer.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'customer_id': customer.id,
            'email': customer.email,
            'role': customer.role.value,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    @Logger.io
    async def authenticate_customer(
        self,
        *,
        customer_query_repo: ICustomerQueryRepo,
        password_hasher: IPasswordHasher,
        email: str,
        password: str,
    ) -> CustomerEntity:
        customer = CustomerEntity.validate_credentials_found(
            await customer_query_repo.get_by_email(email=email)
        )
        if not customer.verify_password(password, password_hasher):
            raise AuthenticationError('Invalid credentials')
        customer.validate_can_login()

        return customer

    def get_current_customer_from_jwt(self, token: Optional[str]) -> CustomerEntity:
        """Rebuild the caller from the token payload (no DB query)"""
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)
        customer_id = payload.get('customer_id')
        email = payload.get('email')
        role = payload.get('role')
        if not customer_id or not email or role not in {r.value for r in CustomerRole}:
            raise AuthenticationError('Invalid token')

        return CustomerEntity(id=customer_id, email=email, role=CustomerRole(role))
