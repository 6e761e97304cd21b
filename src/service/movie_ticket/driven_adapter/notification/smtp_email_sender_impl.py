from email.message import EmailMessage
import smtplib

import anyio
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_email_sender import IEmailSender


class SmtpEmailSenderImpl(IEmailSender):
    """
    SMTP delivery through the standard library client.

    smtplib is blocking, so each send runs in a worker thread.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str,
        password: SecretStr,
        use_tls: bool,
        mail_from: str,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.mail_from = mail_from
        self.timeout_seconds = timeout_seconds

    def _build_message(self, *, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message['From'] = self.mail_from
        message['To'] = to
        message['Subject'] = subject
        message.set_content(body)
        return message

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds) as client:
            if self.use_tls:
                client.starttls()
            if self.username:
                client.login(self.username, self.password.get_secret_value())
            client.send_message(message)

    @Logger.io
    async def send(self, *, to: str, subject: str, body: str) -> None:
        message = self._build_message(to=to, subject=subject, body=body)
        await anyio.to_thread.run_sync(self._send_blocking, message)
