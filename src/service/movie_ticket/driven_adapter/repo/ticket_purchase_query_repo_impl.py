from typing import List, Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_ticket_purchase_query_repo import (
    ITicketPurchaseQueryRepo,
)
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.driven_adapter.model.ticket_purchase_model import (
    TicketPurchaseModel,
)
from src.service.movie_ticket.driven_adapter.repo.model_mapper import (
    ticket_purchase_model_to_entity,
)
from src.service.movie_ticket.driven_adapter.repo.session_aware_repo import SessionAwareRepo


_NEWEST_FIRST = (TicketPurchaseModel.purchase_date.desc(), TicketPurchaseModel.id.desc())


class TicketPurchaseQueryRepoImpl(SessionAwareRepo, ITicketPurchaseQueryRepo):
    @Logger.io
    async def get_by_id(self, *, purchase_id: int) -> Optional[TicketPurchase]:
        async with self._get_session() as session:
            purchase_model = await session.get(TicketPurchaseModel, purchase_id)
            return ticket_purchase_model_to_entity(purchase_model) if purchase_model else None

    @Logger.io
    async def get_by_confirmation_code(self, *, confirmation_code: str) -> Optional[TicketPurchase]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketPurchaseModel).where(
                    TicketPurchaseModel.confirmation_code == confirmation_code
                )
            )
            purchase_model = result.scalar_one_or_none()
            return ticket_purchase_model_to_entity(purchase_model) if purchase_model else None

    @Logger.io
    async def list_by_customer(self, *, customer_id: int) -> List[TicketPurchase]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketPurchaseModel)
                .where(TicketPurchaseModel.customer_id == customer_id)
                .order_by(*_NEWEST_FIRST)
            )
            return [ticket_purchase_model_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def list_by_movie(self, *, movie_id: int) -> List[TicketPurchase]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketPurchaseModel)
                .where(TicketPurchaseModel.movie_id == movie_id)
                .order_by(*_NEWEST_FIRST)
            )
            return [ticket_purchase_model_to_entity(model) for model in result.scalars()]
