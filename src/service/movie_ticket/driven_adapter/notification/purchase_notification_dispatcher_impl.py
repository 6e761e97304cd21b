"""
Purchase Notification Dispatcher

Fire-and-forget delivery of purchase confirmations on the application task
group. The purchase is already committed when dispatch() is called, so
nothing here may raise back into the request path.
"""

from typing import Callable, Optional

import anyio
from anyio.abc import TaskGroup

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_email_sender import IEmailSender
from src.service.movie_ticket.app.interface.i_purchase_notification_dispatcher import (
    IPurchaseNotificationDispatcher,
)
from src.service.movie_ticket.domain.domain_event.ticket_purchase_event import (
    TicketPurchaseConfirmedEvent,
)
from src.service.movie_ticket.driven_adapter.notification.purchase_confirmation_renderer import (
    render_purchase_confirmation,
)


class PurchaseNotificationDispatcherImpl(IPurchaseNotificationDispatcher):
    def __init__(
        self,
        *,
        email_sender: IEmailSender,
        task_group_provider: Callable[[], Optional[TaskGroup]],
        max_attempts: int = 3,
        backoff_seconds: float = 0.5,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.email_sender = email_sender
        self.task_group_provider = task_group_provider
        self.max_attempts = max(1, max_attempts)
        self.backoff_seconds = backoff_seconds
        self.timeout_seconds = timeout_seconds

    def dispatch(self, *, event: TicketPurchaseConfirmedEvent) -> None:
        task_group = self.task_group_provider()
        if task_group is None:
            Logger.base.error(
                f'❌ [NOTIFY] No task group available, dropping confirmation for {event.confirmation_code}'
            )
            return

        task_group.start_soon(self.deliver, event)

    async def deliver(self, event: TicketPurchaseConfirmedEvent) -> bool:
        """Send one confirmation with bounded retries. Returns whether it was delivered."""
        try:
            subject, body = render_purchase_confirmation(event)
        except Exception as e:
            Logger.base.error(
                f'❌ [NOTIFY] Could not render confirmation {event.confirmation_code}: '
                f'{type(e).__name__}: {e}'
            )
            return False

        for attempt in range(1, self.max_attempts + 1):
            try:
                with anyio.fail_after(self.timeout_seconds):
                    await self.email_sender.send(
                        to=event.customer_email, subject=subject, body=body
                    )
            except Exception as e:
                Logger.base.warning(
                    f'⚠️ [NOTIFY] Attempt {attempt}/{self.max_attempts} failed for '
                    f'{event.confirmation_code}: {type(e).__name__}: {e}'
                )
                if attempt < self.max_attempts:
                    await anyio.sleep(self.backoff_seconds * 2 ** (attempt - 1))
                continue

            Logger.base.info(
                f'📧 [NOTIFY] Confirmation {event.confirmation_code} sent to {event.customer_email}'
            )
            return True

        Logger.base.error(
            f'❌ [NOTIFY] Giving up on confirmation {event.confirmation_code} '
            f'after {self.max_attempts} attempts'
        )
        return False
