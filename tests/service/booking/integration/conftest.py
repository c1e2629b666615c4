import pytest

from tests.service.booking.integration.booking_seeder import BookingSeeder


@pytest.fixture
def seeder(database) -> BookingSeeder:
    return BookingSeeder(database)
