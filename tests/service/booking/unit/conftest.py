from unittest.mock import Mock

import pytest

from tests.service.booking.unit.booking_factories import FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def metrics() -> Mock:
    return Mock()
