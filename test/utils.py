from typing import Any

import attrs
from fastapi.testclient import TestClient

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.constant.route_constant import (
    CUSTOMER_BASE,
    CUSTOMER_LOGIN,
    MOVIE_BASE,
    PURCHASE_BASE,
)
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole
from test.util_constant import (
    DEFAULT_LAST_NAME,
    DEFAULT_PHONE,
    TEST_CARD_HOLDER,
    TEST_CARD_NUMBER,
)


def create_customer(
    client: TestClient, email: str, password: str, first_name: str
) -> dict[str, Any]:
    response = client.post(
        CUSTOMER_BASE,
        json={
            'email': email,
            'password': password,
            'phone': DEFAULT_PHONE,
            'first_name': first_name,
            'last_name': DEFAULT_LAST_NAME,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _promote_to_admin(customer_id: int) -> None:
    uow = container.unit_of_work()
    async with uow:
        customer = await uow.customer_query_repo.get_by_id(customer_id=customer_id)
        assert customer is not None
        await uow.customer_command_repo.update(
            customer=attrs.evolve(customer, role=CustomerRole.ADMIN)
        )
        await uow.commit()


def create_admin(client: TestClient, email: str, password: str, first_name: str) -> dict[str, Any]:
    """Admins cannot self-register; promote a registered customer on the app's event loop"""
    created = create_customer(client, email, password, first_name)
    client.portal.call(_promote_to_admin, created['id'])  # type: ignore[union-attr]
    return {**created, 'role': CustomerRole.ADMIN.value}


def login(client: TestClient, email: str, password: str) -> dict[str, Any]:
    """Log in and keep exactly one auth cookie on the client"""
    client.cookies.clear()
    response = client.post(CUSTOMER_LOGIN, json={'email': email, 'password': password})
    assert response.status_code == 200, response.text

    token = response.cookies.get(settings.AUTH_COOKIE_NAME)
    assert token
    client.cookies.clear()
    client.cookies.set(settings.AUTH_COOKIE_NAME, token)
    return response.json()


def create_movie(client: TestClient, **overrides: Any) -> dict[str, Any]:
    payload = {
        'title': 'The Matrix',
        'description': 'A hacker learns the truth about his reality.',
        'image_url': 'https://movie-ticket-images.s3.us-east-1.amazonaws.com/movies/matrix.jpg',
        'duration': 136,
        'genre': 'Science Fiction',
        'price': '12.50',
    } | overrides
    response = client.post(MOVIE_BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def purchase_payload(movie_id: int, quantity: int = 2, **payment_overrides: Any) -> dict[str, Any]:
    return {
        'movie_id': movie_id,
        'quantity': quantity,
        'payment_info': {
            'card_number': TEST_CARD_NUMBER,
            'card_holder_name': TEST_CARD_HOLDER,
            'expiry_date': '12/30',
            'cvv': '123',
        }
        | payment_overrides,
    }


def create_purchase(client: TestClient, movie_id: int, quantity: int = 2) -> dict[str, Any]:
    response = client.post(PURCHASE_BASE, json=purchase_payload(movie_id, quantity))
    assert response.status_code == 201, response.text
    return response.json()
