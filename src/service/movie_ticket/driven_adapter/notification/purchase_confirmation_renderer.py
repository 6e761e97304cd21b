"""Plain-text confirmation email for a committed ticket purchase"""

from src.service.movie_ticket.domain.domain_event.ticket_purchase_event import (
    TicketPurchaseConfirmedEvent,
)


PURCHASE_DATE_FORMAT = '%d/%m/%Y %H:%M'


def render_purchase_confirmation(event: TicketPurchaseConfirmedEvent) -> tuple[str, str]:
    """Returns (subject, body)"""
    subject = f'Your tickets for {event.movie_title} - {event.confirmation_code}'
    body = '\n'.join(
        [
            f'Hi {event.customer_name},',
            '',
            'Thank you for your purchase. Your booking is confirmed.',
            '',
            f'Confirmation code: {event.confirmation_code}',
            f'Movie: {event.movie_title}',
            f'Tickets: {event.quantity}',
            f'Unit price: {event.unit_price:.2f}',
            f'Total: {event.total_amount:.2f}',
            f'Purchased at: {event.purchase_date.strftime(PURCHASE_DATE_FORMAT)}',
            f'Status: {event.status.value}',
            '',
            f'Card: **** **** **** {event.card_last_four}',
            f'Card holder: {event.card_holder_name}',
            '',
            'Please show the confirmation code at the box office.',
        ]
    )
    return subject, body
