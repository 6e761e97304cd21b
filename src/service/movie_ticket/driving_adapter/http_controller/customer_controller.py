from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.command.disable_customer_use_case import DisableCustomerUseCase
from src.service.movie_ticket.app.command.register_customer_use_case import (
    RegisterCustomerUseCase,
)
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.app.interface.i_password_hasher import IPasswordHasher
from src.service.movie_ticket.app.query.customer_query_use_case import CustomerQueryUseCase
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.movie_ticket.driving_adapter.http_controller.auth.role_auth import (
    RoleAuthStrategy,
    get_current_customer,
    require_admin,
)
from src.service.movie_ticket.driving_adapter.http_controller.schema.customer_schema import (
    CustomerResponse,
    LoginRequest,
    RegisterCustomerRequest,
)


router = APIRouter()


@router.post('', response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_customer(
    request: RegisterCustomerRequest,
    use_case: RegisterCustomerUseCase = Depends(RegisterCustomerUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.register(
        email=request.email,
        password=request.password.get_secret_value(),
        phone=request.phone,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    return CustomerResponse.from_entity(customer)


@router.post('/login', response_model=CustomerResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    customer_query_repo: ICustomerQueryRepo = Depends(Provide[Container.customer_query_repo]),
    password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> CustomerResponse:
    customer = await jwt_auth.authenticate_customer(
        customer_query_repo=customer_query_repo,
        password_hasher=password_hasher,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=jwt_auth.create_jwt_token(customer),
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=settings.AUTH_COOKIE_SECURE,
    )

    return CustomerResponse.from_entity(customer)


@router.get('/me', response_model=CustomerResponse)
@Logger.io
async def get_me(
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: CustomerQueryUseCase = Depends(CustomerQueryUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.get_customer(customer_id=current_customer.id or 0)
    return CustomerResponse.from_entity(customer)


@router.get('', response_model=List[CustomerResponse])
@Logger.io
async def list_customers(
    _: CustomerEntity = Depends(require_admin),
    use_case: CustomerQueryUseCase = Depends(CustomerQueryUseCase.depends),
) -> List[CustomerResponse]:
    return [CustomerResponse.from_entity(customer) for customer in await use_case.list_customers()]


@router.get('/{customer_id}', response_model=CustomerResponse)
@Logger.io
async def get_customer(
    customer_id: int,
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: CustomerQueryUseCase = Depends(CustomerQueryUseCase.depends),
) -> CustomerResponse:
    if not RoleAuthStrategy.can_access_customer(current_customer, customer_id):
        raise ForbiddenError('You can only view your own account')

    customer = await use_case.get_customer(customer_id=customer_id)
    return CustomerResponse.from_entity(customer)


@router.delete('/{customer_id}', response_model=CustomerResponse)
@Logger.io
async def disable_customer(
    customer_id: int,
    _: CustomerEntity = Depends(require_admin),
    use_case: DisableCustomerUseCase = Depends(DisableCustomerUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.disable(customer_id=customer_id)
    return CustomerResponse.from_entity(customer)
