from unittest.mock import patch

from granian.constants import Interfaces
import pytest

from scripts import run_server
from src.platform.config.core_setting import settings


pytestmark = pytest.mark.unit


def test_build_server_serves_app_over_asgi():
    with patch.object(run_server, 'Granian') as granian_cls:
        server = run_server.build_server()

    granian_cls.assert_called_once_with(
        'src.main:app',
        address=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        interface=Interfaces.ASGI,
        workers=settings.SERVER_WORKERS,
    )
    assert server is granian_cls.return_value


def test_main_starts_serving():
    with patch.object(run_server, 'Granian') as granian_cls:
        run_server.main()

    granian_cls.return_value.serve.assert_called_once_with()
