import asyncio
from unittest.mock import MagicMock, patch

import pytest

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import LoguruIO
from src.platform.logging.loguru_io_config import ExtraField, chain_start_time_var


pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_interleaved_calls_keep_their_own_chain_start_time():
    """
    GIVEN one decorated coroutine called from two concurrent request chains
    WHEN the calls interleave at an await
    THEN every log line is bound to the start time of its own chain
    """
    logger = MagicMock()

    @LoguruIO(logger)
    async def handler():
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        return 'ok'

    async def run_chain(start_time: float):
        chain_start_time_var.set(start_time)
        return await handler()

    with patch.object(settings, 'DEBUG', True):
        results = await asyncio.gather(run_chain(100.0), run_chain(200.0))

    assert results == ['ok', 'ok']
    bound_start_times = sorted(
        call.kwargs[ExtraField.CHAIN_START_TIME] for call in logger.bind.call_args_list
    )
    assert bound_start_times == [100.0, 100.0, 200.0, 200.0]
    assert all(
        'handler' in call.kwargs[ExtraField.CALL_TARGET] for call in logger.bind.call_args_list
    )
