from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
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


class ListTicketPurchasesUseCase:
    """Purchase history, newest first"""

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

    @Logger.io
    async def list_by_customer(self, *, customer_id: int) -> List[TicketPurchaseDetail]:
        purchases = await self.ticket_purchase_query_repo.list_by_customer(customer_id=customer_id)
        return await assemble_purchase_details(
            purchases=purchases,
            customer_query_repo=self.customer_query_repo,
            movie_query_repo=self.movie_query_repo,
        )

    @Logger.io
    async def list_by_movie(self, *, movie_id: int) -> List[TicketPurchaseDetail]:
        purchases = await self.ticket_purchase_query_repo.list_by_movie(movie_id=movie_id)
        return await assemble_purchase_details(
            purchases=purchases,
            customer_query_repo=self.customer_query_repo,
            movie_query_repo=self.movie_query_repo,
        )
