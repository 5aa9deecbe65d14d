import asyncio
import logging

import pytest

from src.adapter.services.reset_token_sweeper import run_reset_token_sweeper


class FlakySessionFactory:
    """Fails on every call; records how many sweeps were attempted"""

    def __init__(self, attempts_wanted: int):
        self.calls = 0
        self.attempts_wanted = attempts_wanted
        self.done = asyncio.Event()

    def __call__(self):
        self.calls += 1
        if self.calls >= self.attempts_wanted:
            self.done.set()
        raise RuntimeError("unexpected sweep failure")


@pytest.mark.asyncio
async def test_sweeper_survives_unexpected_errors(caplog):
    """Any sweep failure is logged and the loop keeps going"""
    factory = FlakySessionFactory(attempts_wanted=3)

    with caplog.at_level(logging.ERROR, logger="src.adapter.services.reset_token_sweeper"):
        task = asyncio.create_task(run_reset_token_sweeper(factory, 0))
        await asyncio.wait_for(factory.done.wait(), timeout=5)

        assert not task.done()

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    assert factory.calls >= 3
    assert "Reset token sweep failed" in caplog.text
