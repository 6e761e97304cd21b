from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from src.platform.constant.route_constant import MOVIE_BASE, MOVIE_GET, MOVIE_IMAGE
from test.utils import create_movie


@pytest.mark.integration
class TestMovieCatalog:
    def test_admin_creates_movie(self, admin_client: TestClient) -> None:
        movie = create_movie(admin_client, price='15000.00')

        assert movie['id'] > 0
        assert movie['price'] == '15000.00'
        assert movie['enabled'] is True

    def test_customer_cannot_create_movie(self, customer_client: TestClient) -> None:
        response = customer_client.post(
            MOVIE_BASE,
            json={
                'title': 'Not Allowed',
                'description': 'Customers cannot add movies.',
                'image_url': 'https://example.com/x.jpg',
                'duration': 90,
                'genre': 'Drama',
                'price': '10.00',
            },
        )

        assert response.status_code == 403

    def test_anonymous_cannot_create_movie(self, client: TestClient) -> None:
        response = client.post(MOVIE_BASE, json={})

        assert response.status_code in (400, 401)

    @pytest.mark.parametrize(
        'overrides',
        [{'price': '0.00'}, {'duration': 0}, {'description': 'short'}, {'genre': 'ab'}],
    )
    def test_invalid_movie(self, admin_client: TestClient, overrides: dict) -> None:
        payload = {
            'title': 'Invalid',
            'description': 'This movie payload is invalid.',
            'image_url': 'https://example.com/x.jpg',
            'duration': 90,
            'genre': 'Drama',
            'price': '10.00',
        } | overrides

        response = admin_client.post(MOVIE_BASE, json=payload)

        assert response.status_code == 400

    def test_browse_is_public(self, admin_client: TestClient) -> None:
        movie = create_movie(admin_client)
        admin_client.cookies.clear()

        listed = admin_client.get(MOVIE_BASE)
        fetched = admin_client.get(MOVIE_GET.format(movie_id=movie['id']))

        assert listed.status_code == 200
        assert [m['id'] for m in listed.json()] == [movie['id']]
        assert fetched.json()['title'] == 'The Matrix'

    def test_search(self, admin_client: TestClient) -> None:
        create_movie(admin_client)
        create_movie(
            admin_client,
            title='Spirited Away',
            description='A girl wanders into a world ruled by spirits.',
            genre='Animation',
        )

        by_title = admin_client.get(MOVIE_BASE, params={'title': 'spirit'})
        by_genre = admin_client.get(MOVIE_BASE, params={'genre': 'science fiction'})

        assert [m['title'] for m in by_title.json()] == ['Spirited Away']
        assert [m['title'] for m in by_genre.json()] == ['The Matrix']

    def test_update_movie(self, admin_client: TestClient) -> None:
        movie = create_movie(admin_client)

        response = admin_client.put(
            MOVIE_GET.format(movie_id=movie['id']),
            json={
                'title': 'The Matrix Reloaded',
                'description': 'Neo and the rebels fight the machines.',
                'image_url': 'https://example.com/reloaded.jpg',
                'duration': 138,
                'genre': 'Science Fiction',
                'price': '14.00',
            },
        )

        assert response.status_code == 200
        assert response.json()['title'] == 'The Matrix Reloaded'
        assert response.json()['price'] == '14.00'

    def test_disabled_movie_is_hidden(self, admin_client: TestClient) -> None:
        movie = create_movie(admin_client)

        disabled = admin_client.delete(MOVIE_GET.format(movie_id=movie['id']))

        assert disabled.status_code == 200
        assert disabled.json()['enabled'] is False
        assert admin_client.get(MOVIE_GET.format(movie_id=movie['id'])).status_code == 404
        assert admin_client.get(MOVIE_BASE).json() == []

    def test_get_unknown_movie(self, client: TestClient) -> None:
        response = client.get(MOVIE_GET.format(movie_id=999))

        assert response.status_code == 404
        assert response.json()['detail'] == 'Movie not found with id: 999'


@pytest.mark.integration
class TestMovieImage:
    def test_upload_image(self, admin_client: TestClient) -> None:
        # Arrange
        storage = AsyncMock()
        storage.upload = AsyncMock(
            return_value='https://movie-ticket-images.s3.us-east-1.amazonaws.com/movies/a.png'
        )

        # Act
        with container.image_storage.override(storage):
            response = admin_client.post(
                MOVIE_IMAGE, files={'file': ('poster.png', b'\x89PNG', 'image/png')}
            )

        # Assert
        assert response.status_code == 201
        assert response.json()['url'].endswith('/movies/a.png')
        storage.upload.assert_awaited_once_with(
            filename='poster.png', content_type='image/png', content=b'\x89PNG'
        )

    def test_delete_image(self, admin_client: TestClient) -> None:
        storage = AsyncMock()
        url = 'https://movie-ticket-images.s3.us-east-1.amazonaws.com/movies/a.png'

        with container.image_storage.override(storage):
            response = admin_client.delete(MOVIE_IMAGE, params={'url': url})

        assert response.status_code == 204
        storage.delete.assert_awaited_once_with(url=url)

    def test_customer_cannot_upload(self, customer_client: TestClient) -> None:
        response = customer_client.post(
            MOVIE_IMAGE, files={'file': ('poster.png', b'\x89PNG', 'image/png')}
        )

        assert response.status_code == 403
