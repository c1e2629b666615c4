"""
Service identity stamped on every log line: `SERVICE_NAME@DEPLOY_ENV:instance`.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'hotel-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers set HOSTNAME to the container id; fall back to the pid locally
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
