"""Row <-> entity conversion shared by the command and query repositories"""

from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.entity.movie_entity import Movie
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus
from src.service.movie_ticket.domain.pricing_domain import to_money
from src.service.movie_ticket.driven_adapter.model.customer_model import CustomerModel
from src.service.movie_ticket.driven_adapter.model.movie_model import MovieModel
from src.service.movie_ticket.driven_adapter.model.ticket_purchase_model import (
    TicketPurchaseModel,
)


def customer_model_to_entity(model: CustomerModel) -> CustomerEntity:
    return CustomerEntity(
        id=model.id,
        email=model.email,
        phone=model.phone,
        first_name=model.first_name,
        last_name=model.last_name,
        hashed_password=model.hashed_password,
        role=CustomerRole(model.role),
        enabled=model.enabled,
        created_at=model.created_at,
    )


def movie_model_to_entity(model: MovieModel) -> Movie:
    return Movie(
        id=model.id,
        title=model.title,
        description=model.description,
        image_url=model.image_url,
        duration=model.duration,
        genre=model.genre,
        price=to_money(model.price),
        enabled=model.enabled,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def ticket_purchase_model_to_entity(model: TicketPurchaseModel) -> TicketPurchase:
    return TicketPurchase(
        id=model.id,
        customer_id=model.customer_id,
        movie_id=model.movie_id,
        quantity=model.quantity,
        unit_price=to_money(model.unit_price),
        total_amount=to_money(model.total_amount),
        card_last_four=model.card_last_four,
        card_holder_name=model.card_holder_name,
        confirmation_code=model.confirmation_code,
        status=PurchaseStatus(model.status),
        purchase_date=model.purchase_date,
    )
