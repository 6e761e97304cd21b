import pytest

from src.service.movie_ticket.driven_adapter.notification.logging_email_sender_impl import (
    LoggingEmailSenderImpl,
)


@pytest.mark.unit
class TestLoggingEmailSender:
    @pytest.mark.asyncio
    async def test_send_records_email(self) -> None:
        sender = LoggingEmailSenderImpl()

        await sender.send(to='jane.doe@example.com', subject='Hello', body='Body')

        assert len(sender.sent_emails) == 1
        assert sender.sent_emails[0]['to'] == 'jane.doe@example.com'
        assert sender.sent_emails[0]['subject'] == 'Hello'

    @pytest.mark.asyncio
    async def test_recorded_emails_are_bounded(self) -> None:
        """
        Given: a sender that keeps at most 3 emails
        When: sending 5 emails
        Then: only the 3 most recent are kept
        """
        # Arrange
        sender = LoggingEmailSenderImpl(max_recorded=3)

        # Act
        for i in range(5):
            await sender.send(to=f'user{i}@example.com', subject=f'Mail {i}', body='Body')

        # Assert
        assert [email['subject'] for email in sender.sent_emails] == ['Mail 2', 'Mail 3', 'Mail 4']
