#!/usr/bin/env python
"""
API Server Launcher

Serves `src.main:app` with granian over ASGI.

Usage:
    python -m scripts.run_server

Host, port and worker count come from SERVER_HOST, SERVER_PORT and
SERVER_WORKERS.
"""

from granian import Granian
from granian.constants import Interfaces

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


APP_TARGET = 'src.main:app'


def build_server() -> Granian:
    return Granian(
        APP_TARGET,
        address=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        interface=Interfaces.ASGI,
        workers=settings.SERVER_WORKERS,
    )


def main() -> None:
    Logger.base.info(
        f'🚀 [SERVER] Starting {APP_TARGET} on {settings.SERVER_HOST}:{settings.SERVER_PORT} '
        f'with {settings.SERVER_WORKERS} worker(s)'
    )
    build_server().serve()


if __name__ == '__main__':
    main()
