from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import ConfirmationCodeConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_ticket_purchase_command_repo import (
    ITicketPurchaseCommandRepo,
)
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.driven_adapter.model.ticket_purchase_model import (
    TicketPurchaseModel,
)
from src.service.movie_ticket.driven_adapter.repo.model_mapper import (
    ticket_purchase_model_to_entity,
)
from src.service.movie_ticket.driven_adapter.repo.session_aware_repo import SessionAwareRepo


class TicketPurchaseCommandRepoImpl(SessionAwareRepo, ITicketPurchaseCommandRepo):
    """
    Ticket Purchase Command Repository

    Never commits: create/cancel run inside a UnitOfWork which owns the
    transaction, so a failed attempt leaves nothing behind.
    """

    @staticmethod
    def _is_confirmation_code_violation(error: IntegrityError) -> bool:
        # PostgreSQL reports the constraint name, SQLite the column
        return 'confirmation_code' in str(error.orig)

    @Logger.io
    async def create(self, *, purchase: TicketPurchase) -> TicketPurchase:
        async with self._get_session() as session:
            purchase_model = TicketPurchaseModel(
                customer_id=purchase.customer_id,
                movie_id=purchase.movie_id,
                quantity=purchase.quantity,
                unit_price=purchase.unit_price,
                total_amount=purchase.total_amount,
                status=purchase.status,
                card_last_four=purchase.card_last_four,
                card_holder_name=purchase.card_holder_name,
                confirmation_code=purchase.confirmation_code,
                purchase_date=purchase.purchase_date,
            )
            session.add(purchase_model)
            try:
                await session.flush()
            except IntegrityError as e:
                if self._is_confirmation_code_violation(e):
                    raise ConfirmationCodeConflictError(purchase.confirmation_code) from e
                raise
            await session.refresh(purchase_model)

            return ticket_purchase_model_to_entity(purchase_model)

    @Logger.io
    async def get_by_id_for_update(self, *, purchase_id: int) -> Optional[TicketPurchase]:
        async with self._get_session() as session:
            # SQLite ignores FOR UPDATE; PostgreSQL locks the row
            result = await session.execute(
                select(TicketPurchaseModel)
                .where(TicketPurchaseModel.id == purchase_id)
                .with_for_update()
            )
            purchase_model = result.scalar_one_or_none()
            return ticket_purchase_model_to_entity(purchase_model) if purchase_model else None

    @Logger.io
    async def update_status(self, *, purchase: TicketPurchase) -> TicketPurchase:
        async with self._get_session() as session:
            purchase_model = await session.get(TicketPurchaseModel, purchase.id)
            if purchase_model is None:
                raise NotFoundError(f'Purchase not found with id: {purchase.id}')

            purchase_model.status = purchase.status
            await session.flush()

            return ticket_purchase_model_to_entity(purchase_model)
