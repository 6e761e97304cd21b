from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail


class CancelTicketPurchaseUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def cancel(
        self, *, purchase_id: int, customer_id: Optional[int] = None
    ) -> TicketPurchaseDetail:
        """
        Cancel a confirmed purchase.

        customer_id is the caller for non-admin requests; the purchase must be theirs.
        The row stays locked from the read until commit.

        Raises:
            NotFoundError: purchase does not exist
            ForbiddenError: purchase belongs to another customer
            BusinessRuleViolationError: purchase is not CONFIRMED
        """
        async with self.uow:
            purchase = await self.uow.ticket_purchase_command_repo.get_by_id_for_update(
                purchase_id=purchase_id
            )
            if not purchase:
                raise NotFoundError(f'Purchase not found with id: {purchase_id}')

            if customer_id is not None and purchase.customer_id != customer_id:
                raise ForbiddenError('You can only cancel your own purchases')

            cancelled = await self.uow.ticket_purchase_command_repo.update_status(
                purchase=purchase.cancel()
            )
            customer = await self.uow.customer_query_repo.get_by_id(
                customer_id=cancelled.customer_id
            )
            movie = await self.uow.movie_query_repo.get_by_id(movie_id=cancelled.movie_id)
            await self.uow.commit()

        Logger.base.info(f'🚫 [PURCHASE] {cancelled.confirmation_code} cancelled')
        return TicketPurchaseDetail.build(purchase=cancelled, customer=customer, movie=movie)
