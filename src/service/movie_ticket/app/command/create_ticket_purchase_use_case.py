from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    ConfirmationCodeConflictError,
    NotFoundError,
    UnexpectedError,
)
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail
from src.service.movie_ticket.app.interface.i_purchase_notification_dispatcher import (
    IPurchaseNotificationDispatcher,
)
from src.service.movie_ticket.domain.domain_event.ticket_purchase_event import (
    TicketPurchaseConfirmedEvent,
)
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.value_object.payment_info import PaymentInfo


class CreateTicketPurchaseUseCase:
    """
    Purchase tickets for a movie.

    Flow:
    1. Validate quantity and payment info (no I/O)
    2. In one unit of work: resolve enabled customer and movie, snapshot the
       price, mask the card, mint a confirmation code, persist as CONFIRMED, commit
    3. On a confirmation code collision, retry the whole unit of work with a new code
    4. Hand the confirmation to the notification dispatcher (fire-and-forget)
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        notification_dispatcher: IPurchaseNotificationDispatcher,
        max_attempts: int = settings.CONFIRMATION_CODE_MAX_ATTEMPTS,
    ) -> None:
        self.uow = uow
        self.notification_dispatcher = notification_dispatcher
        self.max_attempts = max_attempts

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        notification_dispatcher: IPurchaseNotificationDispatcher = Depends(
            Provide[Container.purchase_notification_dispatcher]
        ),
    ) -> Self:
        return cls(uow=uow, notification_dispatcher=notification_dispatcher)

    @Logger.io
    async def create(
        self,
        *,
        customer_id: int,
        movie_id: int,
        quantity: int,
        payment_info: PaymentInfo,
    ) -> TicketPurchaseDetail:
        TicketPurchase.validate_quantity(quantity)
        payment_info.validate()

        for attempt in range(1, self.max_attempts + 1):
            try:
                async with self.uow:
                    customer = await self.uow.customer_query_repo.get_enabled_by_id(
                        customer_id=customer_id
                    )
                    if not customer:
                        raise NotFoundError(f'Customer not found with id: {customer_id}')

                    movie = await self.uow.movie_query_repo.get_enabled_by_id(movie_id=movie_id)
                    if not movie:
                        raise NotFoundError(f'Movie not found with id: {movie_id}')

                    purchase = TicketPurchase.create(
                        customer_id=customer_id,
                        movie_id=movie_id,
                        quantity=quantity,
                        unit_price=movie.price,
                        payment_info=payment_info,
                    )
                    purchase = await self.uow.ticket_purchase_command_repo.create(
                        purchase=purchase
                    )
                    await self.uow.commit()
                break
            except ConfirmationCodeConflictError as e:
                Logger.base.warning(
                    f'🔁 [PURCHASE] {e.message} (attempt {attempt}/{self.max_attempts})'
                )
        else:
            raise UnexpectedError(
                f'Could not allocate a unique confirmation code after {self.max_attempts} attempts'
            )

        Logger.base.info(
            f'🎟️ [PURCHASE] {purchase.confirmation_code} confirmed: customer={customer_id} '
            f'movie={movie_id} quantity={quantity} total={purchase.total_amount}'
        )
        self._notify(
            event=TicketPurchaseConfirmedEvent.from_purchase(
                purchase=purchase, customer=customer, movie=movie
            )
        )

        return TicketPurchaseDetail.build(purchase=purchase, customer=customer, movie=movie)

    def _notify(self, *, event: TicketPurchaseConfirmedEvent) -> None:
        # The purchase is committed; a notification problem must not fail the request
        try:
            self.notification_dispatcher.dispatch(event=event)
        except Exception as e:
            Logger.base.error(
                f'❌ [PURCHASE] Failed to schedule confirmation for {event.confirmation_code}: {e}'
            )
