from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidInputError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.movie_ticket.app.interface.i_ticket_purchase_query_repo import (
    ITicketPurchaseQueryRepo,
)
from src.service.movie_ticket.app.query.ticket_purchase_detail_assembler import (
    assemble_purchase_details,
)
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.pricing_domain import is_valid_confirmation_code


class GetTicketPurchaseUseCase:
    def __init__(
        self,
        *,
        ticket_purchase_query_repo: ITicketPurchaseQueryRepo,
        customer_query_repo: ICustomerQueryRepo,
        movie_query_repo: IMovieQueryRepo,
    ) -> None:
        self.ticket_purchase_query_repo = ticket_purchase_query_repo
        self.customer_query_repo = customer_query_repo
        self.movie_query_repo = movie_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_purchase_query_repo: ITicketPurchaseQueryRepo = Depends(
            Provide[Container.ticket_purchase_query_repo]
        ),
        customer_query_repo: ICustomerQueryRepo = Depends(Provide[Container.customer_query_repo]),
        movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo]),
    ) -> Self:
        return cls(
            ticket_purchase_query_repo=ticket_purchase_query_repo,
            customer_query_repo=customer_query_repo,
            movie_query_repo=movie_query_repo,
        )

    async def _to_detail(self, purchase: TicketPurchase) -> TicketPurchaseDetail:
        details = await assemble_purchase_details(
            purchases=[purchase],
            customer_query_repo=self.customer_query_repo,
            movie_query_repo=self.movie_query_repo,
        )
        return details[0]

    @Logger.io
    async def get_by_id(self, *, purchase_id: int) -> TicketPurchaseDetail:
        purchase = await self.ticket_purchase_query_repo.get_by_id(purchase_id=purchase_id)
        if not purchase:
            raise NotFoundError(f'Purchase not found with id: {purchase_id}')
        return await self._to_detail(purchase)

    @Logger.io
    async def get_by_confirmation_code(self, *, confirmation_code: str) -> TicketPurchaseDetail:
        confirmation_code = confirmation_code.strip().upper()
        if not is_valid_confirmation_code(confirmation_code):
            raise InvalidInputError('Invalid confirmation code format')

        purchase = await self.ticket_purchase_query_repo.get_by_confirmation_code(
            confirmation_code=confirmation_code
        )
        if not purchase:
            raise NotFoundError(f'Purchase not found with confirmation code: {confirmation_code}')
        return await self._to_detail(purchase)
