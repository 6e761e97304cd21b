from collections import deque
from datetime import datetime, timezone
from typing import Deque

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_email_sender import IEmailSender


DEFAULT_MAX_RECORDED_EMAILS = 100


class LoggingEmailSenderImpl(IEmailSender):
    """Writes emails to the log instead of sending them (development and tests)."""

    def __init__(self, *, max_recorded: int = DEFAULT_MAX_RECORDED_EMAILS) -> None:
        # Only the most recent emails are kept for inspection
        self.sent_emails: Deque[dict] = deque(maxlen=max(1, max_recorded))

    @Logger.io
    async def send(self, *, to: str, subject: str, body: str) -> None:
        self.sent_emails.append(
            {'to': to, 'subject': subject, 'body': body, 'sent_at': datetime.now(timezone.utc)}
        )
        Logger.base.info(f'📧 [EMAIL] To: {to} | Subject: {subject}\n{body}')
