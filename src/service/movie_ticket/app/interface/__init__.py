"""Application layer interfaces (Ports)"""

from src.service.movie_ticket.app.interface.i_customer_command_repo import ICustomerCommandRepo
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.app.interface.i_email_sender import IEmailSender
from src.service.movie_ticket.app.interface.i_image_storage import IImageStorage
from src.service.movie_ticket.app.interface.i_movie_command_repo import IMovieCommandRepo
from src.service.movie_ticket.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.movie_ticket.app.interface.i_password_hasher import IPasswordHasher
from src.service.movie_ticket.app.interface.i_purchase_notification_dispatcher import (
    IPurchaseNotificationDispatcher,
)
from src.service.movie_ticket.app.interface.i_ticket_purchase_command_repo import (
    ITicketPurchaseCommandRepo,
)
from src.service.movie_ticket.app.interface.i_ticket_purchase_query_repo import (
    ITicketPurchaseQueryRepo,
)

__all__ = [
    'ICustomerCommandRepo',
    'ICustomerQueryRepo',
    'IEmailSender',
    'IImageStorage',
    'IMovieCommandRepo',
    'IMovieQueryRepo',
    'IPasswordHasher',
    'IPurchaseNotificationDispatcher',
    'ITicketPurchaseCommandRepo',
    'ITicketPurchaseQueryRepo',
]
