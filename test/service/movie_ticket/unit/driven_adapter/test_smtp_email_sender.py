from unittest.mock import MagicMock, patch

from pydantic import SecretStr
import pytest

from src.service.movie_ticket.driven_adapter.notification.smtp_email_sender_impl import (
    SmtpEmailSenderImpl,
)


@pytest.mark.unit
class TestSmtpEmailSender:
    @pytest.mark.asyncio
    async def test_send_uses_starttls_and_login(self) -> None:
        # Arrange
        sender = SmtpEmailSenderImpl(
            host='smtp.example.com',
            port=587,
            username='mailer',
            password=SecretStr('mail-pass'),
            use_tls=True,
            mail_from='no-reply@movieticket.local',
        )
        smtp_client = MagicMock()

        # Act
        with patch(
            'src.service.movie_ticket.driven_adapter.notification.smtp_email_sender_impl.smtplib.SMTP'
        ) as mock_smtp:
            mock_smtp.return_value.__enter__.return_value = smtp_client
            await sender.send(to='jane.doe@example.com', subject='Hello', body='Body')

        # Assert
        mock_smtp.assert_called_once_with('smtp.example.com', 587, timeout=10.0)
        smtp_client.starttls.assert_called_once()
        smtp_client.login.assert_called_once_with('mailer', 'mail-pass')
        message = smtp_client.send_message.call_args.args[0]
        assert message['To'] == 'jane.doe@example.com'
        assert message['From'] == 'no-reply@movieticket.local'
        assert message['Subject'] == 'Hello'

    @pytest.mark.asyncio
    async def test_send_without_credentials(self) -> None:
        sender = SmtpEmailSenderImpl(
            host='localhost',
            port=25,
            username='',
            password=SecretStr(''),
            use_tls=False,
            mail_from='no-reply@movieticket.local',
        )
        smtp_client = MagicMock()

        with patch(
            'src.service.movie_ticket.driven_adapter.notification.smtp_email_sender_impl.smtplib.SMTP'
        ) as mock_smtp:
            mock_smtp.return_value.__enter__.return_value = smtp_client
            await sender.send(to='jane.doe@example.com', subject='Hello', body='Body')

        smtp_client.starttls.assert_not_called()
        smtp_client.login.assert_not_called()
        smtp_client.send_message.assert_called_once()
