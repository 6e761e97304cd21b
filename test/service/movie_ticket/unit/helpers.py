from datetime import datetime, timezone
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, Mock

import attrs

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.entity.movie_entity import Movie
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus
from src.service.movie_ticket.domain.value_object.payment_info import PaymentInfo


def build_customer(**overrides: Any) -> CustomerEntity:
    fields: dict[str, Any] = {
        'id': 1,
        'email': 'jane.doe@example.com',
        'phone': '0987654321',
        'first_name': 'Jane',
        'last_name': 'Doe',
        'hashed_password': 'hashed',
    } | overrides
    return CustomerEntity(**fields)


def build_movie(**overrides: Any) -> Movie:
    fields: dict[str, Any] = {
        'id': 10,
        'title': 'The Matrix',
        'description': 'A hacker learns the truth about his reality.',
        'image_url': 'https://movie-ticket-images.s3.us-east-1.amazonaws.com/movies/matrix.jpg',
        'duration': 136,
        'genre': 'Science Fiction',
        'price': Decimal('12.50'),
    } | overrides
    return Movie(**fields)


def build_payment_info(**overrides: Any) -> PaymentInfo:
    fields: dict[str, Any] = {
        'card_number': '4111111111111234',
        'card_holder_name': 'Jane Doe',
        'expiry_date': '12/30',
        'cvv': '123',
    } | overrides
    return PaymentInfo(**fields)


def build_purchase(**overrides: Any) -> TicketPurchase:
    fields: dict[str, Any] = {
        'id': 100,
        'customer_id': 1,
        'movie_id': 10,
        'quantity': 2,
        'unit_price': Decimal('12.50'),
        'total_amount': Decimal('25.00'),
        'card_last_four': '1234',
        'card_holder_name': 'Jane Doe',
        'confirmation_code': 'TKT-ABCD1234',
        'status': PurchaseStatus.CONFIRMED,
        'purchase_date': datetime(2025, 1, 10, 10, 30, tzinfo=timezone.utc),
    } | overrides
    return TicketPurchase(**fields)


class RepositoryMocks:
    def __init__(
        self,
        *,
        customer: CustomerEntity | None = None,
        movie: Movie | None = None,
        purchase: TicketPurchase | None = None,
    ) -> None:
        """
        Initialize mock repositories with test data

        Args:
            customer: Customer returned by the customer lookups
            movie: Movie returned by the movie lookups
            purchase: Purchase returned by the purchase lookups
        """
        self.customer = customer
        self.movie = movie
        self.purchase = purchase

        # Customer repos
        self.customer_query_repo: Mock = AsyncMock()
        self.customer_query_repo.get_by_id = AsyncMock(return_value=customer)
        self.customer_query_repo.get_enabled_by_id = AsyncMock(return_value=customer)
        self.customer_query_repo.get_by_ids = AsyncMock(
            return_value={customer.id: customer} if customer else {}
        )
        self.customer_query_repo.exists_by_email = AsyncMock(return_value=False)
        self.customer_command_repo: Mock = AsyncMock()
        self.customer_command_repo.create = AsyncMock(side_effect=self._create_customer)
        self.customer_command_repo.update = AsyncMock(side_effect=self._return_customer)

        # Movie repos
        self.movie_query_repo: Mock = AsyncMock()
        self.movie_query_repo.get_by_id = AsyncMock(return_value=movie)
        self.movie_query_repo.get_enabled_by_id = AsyncMock(return_value=movie)
        self.movie_query_repo.get_by_ids = AsyncMock(return_value={movie.id: movie} if movie else {})
        self.movie_command_repo: Mock = AsyncMock()
        self.movie_command_repo.create = AsyncMock(side_effect=self._create_movie)
        self.movie_command_repo.update = AsyncMock(side_effect=self._return_movie)

        # Ticket purchase repos
        self.ticket_purchase_command_repo: Mock = AsyncMock()
        self.ticket_purchase_command_repo.create = AsyncMock(side_effect=self._create_purchase)
        self.ticket_purchase_command_repo.get_by_id_for_update = AsyncMock(return_value=purchase)
        self.ticket_purchase_command_repo.update_status = AsyncMock(
            side_effect=self._return_purchase
        )
        self.ticket_purchase_query_repo: Mock = AsyncMock()
        self.ticket_purchase_query_repo.get_by_id = AsyncMock(return_value=purchase)
        self.ticket_purchase_query_repo.get_by_confirmation_code = AsyncMock(return_value=purchase)
        self.ticket_purchase_query_repo.list_by_customer = AsyncMock(
            return_value=[purchase] if purchase else []
        )
        self.ticket_purchase_query_repo.list_by_movie = AsyncMock(
            return_value=[purchase] if purchase else []
        )

    async def _create_customer(self, *, customer: CustomerEntity) -> CustomerEntity:
        """Mock: Assign an id (simulates successful persistence)"""
        return attrs.evolve(customer, id=1)

    async def _return_customer(self, *, customer: CustomerEntity) -> CustomerEntity:
        return customer

    async def _create_movie(self, *, movie: Movie) -> Movie:
        return attrs.evolve(movie, id=10)

    async def _return_movie(self, *, movie: Movie) -> Movie:
        return movie

    async def _create_purchase(self, *, purchase: TicketPurchase) -> TicketPurchase:
        return attrs.evolve(purchase, id=100)

    async def _return_purchase(self, *, purchase: TicketPurchase) -> TicketPurchase:
        return purchase


class FakeUnitOfWork(AbstractUnitOfWork):
    """In-memory UoW exposing the RepositoryMocks; records commits and rollbacks"""

    def __init__(self, repos: RepositoryMocks) -> None:
        self.customer_command_repo = repos.customer_command_repo
        self.customer_query_repo = repos.customer_query_repo
        self.movie_command_repo = repos.movie_command_repo
        self.movie_query_repo = repos.movie_query_repo
        self.ticket_purchase_command_repo = repos.ticket_purchase_command_repo
        self.ticket_purchase_query_repo = repos.ticket_purchase_query_repo
        self.commit_count = 0
        self.rollback_count = 0
        self.entered_count = 0

    async def __aenter__(self) -> AbstractUnitOfWork:
        self.entered_count += 1
        return await super().__aenter__()

    async def _commit(self) -> None:
        self.commit_count += 1

    async def rollback(self) -> None:
        self.rollback_count += 1
