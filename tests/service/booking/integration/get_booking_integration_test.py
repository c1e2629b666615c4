import pytest

from src.platform.constant.route_constant import BOOKING_GET


pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_get_booking_returns_404_when_user_has_no_booking(client, seeder):
    _, headers = await seeder.authorized_user()

    response = await client.get(BOOKING_GET, headers=headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_booking_returns_booking_with_room(client, seeder):
    """
    GIVEN a user with a booking in room 101
    WHEN the user fetches their booking
    THEN the booking id and a snapshot of the room are returned
    """
    user_id, headers = await seeder.authorized_user()
    hotel_id = await seeder.create_hotel()
    room_id = await seeder.create_room(hotel_id, capacity=3, name='101')
    booking_id = await seeder.create_booking(user_id=user_id, room_id=room_id)

    response = await client.get(BOOKING_GET, headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data['id'] == booking_id
    room = data['Room']
    assert room['id'] == room_id
    assert room['name'] == '101'
    assert room['capacity'] == 3
    assert room['hotelId'] == hotel_id
    assert room['createdAt'] is not None
    assert room['updatedAt'] is not None


@pytest.mark.asyncio
async def test_get_booking_only_returns_own_booking(client, seeder):
    other_user_id = await seeder.create_user()
    hotel_id = await seeder.create_hotel()
    room_id = await seeder.create_room(hotel_id)
    await seeder.create_booking(user_id=other_user_id, room_id=room_id)
    _, headers = await seeder.authorized_user()

    response = await client.get(BOOKING_GET, headers=headers)

    assert response.status_code == 404
