from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.command.cancel_ticket_purchase_use_case import (
    CancelTicketPurchaseUseCase,
)
from src.service.movie_ticket.app.command.create_ticket_purchase_use_case import (
    CreateTicketPurchaseUseCase,
)
from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail
from src.service.movie_ticket.app.query.get_ticket_purchase_use_case import (
    GetTicketPurchaseUseCase,
)
from src.service.movie_ticket.app.query.list_ticket_purchases_use_case import (
    ListTicketPurchasesUseCase,
)
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.driving_adapter.http_controller.auth.role_auth import (
    RoleAuthStrategy,
    get_current_customer,
    require_admin,
)
from src.service.movie_ticket.driving_adapter.http_controller.schema.ticket_purchase_schema import (
    TicketPurchaseCreateRequest,
    TicketPurchaseResponse,
)


router = APIRouter()


def _ensure_can_view(current_customer: CustomerEntity, detail: TicketPurchaseDetail) -> None:
    if not RoleAuthStrategy.can_access_customer(current_customer, detail.customer_id):
        raise ForbiddenError('You can only view your own purchases')


@router.post('', response_model=TicketPurchaseResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket_purchase(
    request: TicketPurchaseCreateRequest,
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: CreateTicketPurchaseUseCase = Depends(CreateTicketPurchaseUseCase.depends),
) -> TicketPurchaseResponse:
    detail = await use_case.create(
        customer_id=current_customer.id or 0,
        movie_id=request.movie_id,
        quantity=request.quantity,
        payment_info=request.payment_info.to_value_object(),
    )
    return TicketPurchaseResponse.from_detail(detail)


@router.get('/confirmation/{confirmation_code}', response_model=TicketPurchaseResponse)
@Logger.io
async def get_ticket_purchase_by_confirmation_code(
    confirmation_code: str,
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: GetTicketPurchaseUseCase = Depends(GetTicketPurchaseUseCase.depends),
) -> TicketPurchaseResponse:
    detail = await use_case.get_by_confirmation_code(confirmation_code=confirmation_code)
    _ensure_can_view(current_customer, detail)
    return TicketPurchaseResponse.from_detail(detail)


@router.get('/customer/{customer_id}', response_model=List[TicketPurchaseResponse])
@Logger.io
async def list_ticket_purchases_by_customer(
    customer_id: int,
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: ListTicketPurchasesUseCase = Depends(ListTicketPurchasesUseCase.depends),
) -> List[TicketPurchaseResponse]:
    if not RoleAuthStrategy.can_access_customer(current_customer, customer_id):
        raise ForbiddenError('You can only view your own purchases')

    details = await use_case.list_by_customer(customer_id=customer_id)
    return [TicketPurchaseResponse.from_detail(detail) for detail in details]


@router.get('/movie/{movie_id}', response_model=List[TicketPurchaseResponse])
@Logger.io
async def list_ticket_purchases_by_movie(
    movie_id: int,
    _: CustomerEntity = Depends(require_admin),
    use_case: ListTicketPurchasesUseCase = Depends(ListTicketPurchasesUseCase.depends),
) -> List[TicketPurchaseResponse]:
    details = await use_case.list_by_movie(movie_id=movie_id)
    return [TicketPurchaseResponse.from_detail(detail) for detail in details]


@router.get('/{purchase_id}', response_model=TicketPurchaseResponse)
@Logger.io
async def get_ticket_purchase(
    purchase_id: int,
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: GetTicketPurchaseUseCase = Depends(GetTicketPurchaseUseCase.depends),
) -> TicketPurchaseResponse:
    detail = await use_case.get_by_id(purchase_id=purchase_id)
    _ensure_can_view(current_customer, detail)
    return TicketPurchaseResponse.from_detail(detail)


@router.delete('/{purchase_id}', response_model=TicketPurchaseResponse)
@Logger.io
async def cancel_ticket_purchase(
    purchase_id: int,
    current_customer: CustomerEntity = Depends(get_current_customer),
    use_case: CancelTicketPurchaseUseCase = Depends(CancelTicketPurchaseUseCase.depends),
) -> TicketPurchaseResponse:
    detail = await use_case.cancel(
        purchase_id=purchase_id, customer_id=RoleAuthStrategy.owner_filter(current_customer)
    )
    return TicketPurchaseResponse.from_detail(detail)
