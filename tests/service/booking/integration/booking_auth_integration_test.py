"""
Integration tests for bearer-token authentication on /booking

Every booking route sits behind the router-level session check.
"""

import jwt
import pytest

from src.platform.constant.route_constant import BOOKING_BASE, BOOKING_UPDATE


pytestmark = pytest.mark.integration


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'method,path',
    [
        ('GET', BOOKING_BASE),
        ('POST', BOOKING_BASE),
        ('PUT', BOOKING_UPDATE.format(booking_id=1)),
    ],
)
async def test_missing_token_is_unauthorized(client, method, path):
    response = await client.request(method, path, json={'roomId': 1})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_token_is_unauthorized(client):
    response = await client.get(BOOKING_BASE, headers={'Authorization': 'Bearer not-a-jwt'})

    assert response.status_code == 401
    assert response.headers['WWW-Authenticate'] == 'Bearer'


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_unauthorized(client, seeder):
    user_id = await seeder.create_user()
    token = jwt.encode(
        {'userId': user_id}, 'another_secret_key_for_hotel_booking_tests', algorithm='HS256'
    )

    response = await client.get(BOOKING_BASE, headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_valid_token_without_session_is_unauthorized(client, seeder):
    """
    GIVEN a correctly signed token
    WHEN no session row holds that token
    THEN the request is rejected
    """
    from src.platform.config.di import container

    user_id = await seeder.create_user()
    token = container.jwt_auth().create_jwt_token(user_id)

    response = await client.get(BOOKING_BASE, headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_non_bearer_scheme_is_unauthorized(client, seeder):
    user_id = await seeder.create_user()
    token = await seeder.create_session(user_id)

    response = await client.get(BOOKING_BASE, headers={'Authorization': f'Basic {token}'})

    assert response.status_code == 401
