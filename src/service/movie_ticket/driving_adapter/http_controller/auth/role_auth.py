from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole
from src.service.movie_ticket.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class RoleAuthStrategy:
    @staticmethod
    def is_admin(customer: CustomerEntity) -> bool:
        return customer.role == CustomerRole.ADMIN

    @staticmethod
    def can_access_customer(customer: CustomerEntity, customer_id: int) -> bool:
        return RoleAuthStrategy.is_admin(customer) or customer.id == customer_id

    @staticmethod
    def owner_filter(customer: CustomerEntity) -> Optional[int]:
        """None for admins (no ownership check), the caller's id otherwise"""
        return None if RoleAuthStrategy.is_admin(customer) else customer.id


@inject
async def get_current_customer(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> CustomerEntity:
    return jwt_auth.get_current_customer_from_jwt(token)


async def require_admin(
    current_customer: CustomerEntity = Depends(get_current_customer),
) -> CustomerEntity:
    if not RoleAuthStrategy.is_admin(current_customer):
        raise ForbiddenError('Only admins can perform this action')
    return current_customer
