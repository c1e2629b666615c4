"""
Integration tests for PUT /booking/{bookingId}

Test Coverage:
1. Missing roomId, non-numeric booking id
2. Caller without a booking, or changing someone else's booking
3. Target room existence and vacancy
4. Successful room change visible through GET /booking
"""

import pytest

from src.platform.constant.route_constant import BOOKING_GET, BOOKING_UPDATE


pytestmark = pytest.mark.integration


async def _user_with_booking(seeder, *, capacity: int = 3):
    user_id, headers = await seeder.authorized_user()
    hotel_id = await seeder.create_hotel()
    room_id = await seeder.create_room(hotel_id, capacity=capacity, name='101')
    booking_id = await seeder.create_booking(user_id=user_id, room_id=room_id)
    return hotel_id, room_id, booking_id, headers


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'body',
    [None, {}, {'roomId': 'abc'}, [1], 'x', 5],
    ids=['absent', 'empty', 'text', 'array', 'string', 'number'],
)
async def test_update_booking_without_room_id_is_forbidden(client, seeder, body):
    _, _, booking_id, headers = await _user_with_booking(seeder)

    response = await client.put(
        BOOKING_UPDATE.format(booking_id=booking_id), headers=headers, json=body
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_non_numeric_booking_id_is_unauthorized(client, seeder):
    """
    GIVEN a user with a booking
    WHEN the user sends a booking id that is not a number
    THEN the id matches no booking of theirs and the request is rejected with 401
    """
    hotel_id, room_id, booking_id, headers = await _user_with_booking(seeder)
    target_room_id = await seeder.create_room(hotel_id, name='102')

    response = await client.put(
        BOOKING_UPDATE.format(booking_id='abc'), headers=headers, json={'roomId': target_room_id}
    )

    assert response.status_code == 401
    assert await seeder.booking_room_id(booking_id) == room_id


@pytest.mark.asyncio
async def test_update_non_numeric_booking_id_without_booking_is_forbidden(client, seeder):
    _, headers = await seeder.authorized_user()
    room_id = await seeder.create_room(await seeder.create_hotel())

    response = await client.put(
        BOOKING_UPDATE.format(booking_id='abc'), headers=headers, json={'roomId': room_id}
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_booking_without_existing_booking_is_forbidden(client, seeder):
    _, headers = await seeder.authorized_user()
    room_id = await seeder.create_room(await seeder.create_hotel())

    response = await client.put(
        BOOKING_UPDATE.format(booking_id=1), headers=headers, json={'roomId': room_id}
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_someone_elses_booking_is_unauthorized(client, seeder):
    """
    GIVEN a user with a booking
    WHEN the user tries to move a booking id that is not theirs
    THEN the request is rejected with 401 and neither booking moves
    """
    hotel_id, room_id, _, headers = await _user_with_booking(seeder)
    other_user_id = await seeder.create_user()
    other_booking_id = await seeder.create_booking(user_id=other_user_id, room_id=room_id)
    target_room_id = await seeder.create_room(hotel_id, name='102')

    response = await client.put(
        BOOKING_UPDATE.format(booking_id=other_booking_id),
        headers=headers,
        json={'roomId': target_room_id},
    )

    assert response.status_code == 401
    assert await seeder.booking_room_id(other_booking_id) == room_id


@pytest.mark.asyncio
async def test_update_booking_to_unknown_room_is_not_found(client, seeder):
    _, _, booking_id, headers = await _user_with_booking(seeder)

    response = await client.put(
        BOOKING_UPDATE.format(booking_id=booking_id), headers=headers, json={'roomId': 9999}
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_booking_to_full_room_is_forbidden(client, seeder):
    hotel_id, room_id, booking_id, headers = await _user_with_booking(seeder)
    full_room_id = await seeder.create_room(hotel_id, capacity=1, name='102')
    await seeder.create_booking(user_id=await seeder.create_user(), room_id=full_room_id)

    response = await client.put(
        BOOKING_UPDATE.format(booking_id=booking_id),
        headers=headers,
        json={'roomId': full_room_id},
    )

    assert response.status_code == 403
    assert await seeder.booking_room_id(booking_id) == room_id


@pytest.mark.asyncio
async def test_update_booking_moves_booking_to_new_room(client, seeder):
    hotel_id, room_id, booking_id, headers = await _user_with_booking(seeder)
    new_room_id = await seeder.create_room(hotel_id, capacity=2, name='202')

    response = await client.put(
        BOOKING_UPDATE.format(booking_id=booking_id),
        headers=headers,
        json={'roomId': new_room_id},
    )

    assert response.status_code == 200
    assert response.json() == {'bookingId': booking_id}
    assert await seeder.count_bookings(room_id) == 0
    assert await seeder.count_bookings(new_room_id) == 1

    fetched = await client.get(BOOKING_GET, headers=headers)
    assert fetched.status_code == 200
    assert fetched.json()['Room']['id'] == new_room_id
    assert fetched.json()['Room']['name'] == '202'
