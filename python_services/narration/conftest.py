import asyncio
from typing import List, Optional

import pytest

from shared.models import Utterance
from shared.voice_client import SpeechInterrupted, SpeechSynthesisError, SpeechSynthesizer


class FakeSynthesizer(SpeechSynthesizer):
    """Records utterances instead of playing them.

    With ``hold=True`` each utterance lasts until ``cancel`` (or ``finish``)
    is called. ``fail_at`` makes the n-th utterance (0-based) fail.
    """

    def __init__(self, hold: bool = False, fail_at: Optional[int] = None):
        self.hold = hold
        self.fail_at = fail_at
        self.spoken: List[Utterance] = []
        self.cancel_calls = 0
        self.cleanup_calls = 0
        self._interrupt: Optional[asyncio.Event] = None
        self._done: Optional[asyncio.Event] = None

    async def speak(self, utterance: Utterance) -> None:
        index = len(self.spoken)
        self.spoken.append(utterance)
        if index == self.fail_at:
            raise SpeechSynthesisError("voice unavailable")

        interrupt = asyncio.Event()
        done = asyncio.Event()
        self._interrupt, self._done = interrupt, done
        if self.hold:
            waiters = [asyncio.ensure_future(interrupt.wait()), asyncio.ensure_future(done.wait())]
            _, pending = await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
            for w in pending:
                w.cancel()
        else:
            await asyncio.sleep(0)
        if interrupt.is_set():
            raise SpeechInterrupted("cancelled")

    def cancel(self) -> None:
        self.cancel_calls += 1
        if self._interrupt is not None:
            self._interrupt.set()

    def cleanup(self) -> None:
        self.cleanup_calls += 1

    def finish(self) -> None:
        """End a held utterance normally."""
        if self._done is not None:
            self._done.set()

    @property
    def texts(self) -> List[str]:
        return [u.text for u in self.spoken]


async def wait_until(predicate, timeout: float = 1.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.001)


@pytest.fixture
def fake_synthesizer():
    return FakeSynthesizer


@pytest.fixture
def until():
    return wait_until
