"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.movie_ticket.app.command import (
    cancel_ticket_purchase_use_case,
    create_movie_use_case,
    create_ticket_purchase_use_case,
    disable_customer_use_case,
    disable_movie_use_case,
    movie_image_use_case,
    register_customer_use_case,
    update_movie_use_case,
)
from src.service.movie_ticket.app.query import (
    customer_query_use_case,
    get_ticket_purchase_use_case,
    list_ticket_purchases_use_case,
    movie_query_use_case,
)
from src.service.movie_ticket.driving_adapter.http_controller import customer_controller
from src.service.movie_ticket.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    register_customer_use_case,
    disable_customer_use_case,
    create_movie_use_case,
    update_movie_use_case,
    disable_movie_use_case,
    movie_image_use_case,
    create_ticket_purchase_use_case,
    cancel_ticket_purchase_use_case,
    customer_query_use_case,
    movie_query_use_case,
    get_ticket_purchase_use_case,
    list_ticket_purchases_use_case,
    customer_controller,
    role_auth,
]
