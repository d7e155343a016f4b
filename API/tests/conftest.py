from unittest.mock import AsyncMock

import pytest

from fakes import fake_runtime, make_listing


@pytest.fixture
def mixed_runtime() -> AsyncMock:
    containers = [
        make_listing("idle01", name="cache-warm"),         # 3/3 -> stop, high
        make_listing("exited01", status="exited"),
        make_listing("low01", name="queue-worker"),        # 8/8 -> stop, medium
        make_listing("busy01", name="api"),                # 40/55 -> none
        make_listing("watch01", name="cron"),              # 12/12 -> monitor, low
        make_listing("broken01", name="flaky"),            # stats fail
    ]
    usage = {
        "idle01": (3, 3),
        "low01": (8, 8),
        "busy01": (40, 55),
        "watch01": (12, 12),
    }
    return fake_runtime(containers, usage)
