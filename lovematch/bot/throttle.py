from __future__ import annotations

import asyncio
import time
from collections import deque
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from lovematch.settings import settings


@dataclass
class ThrottleDecision:
    allowed: bool
    retry_after: int = 0
    reason: str | None = None


@dataclass
class _UserState:
    burst: deque[float] = field(default_factory=deque)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    active: int = 0


class BotThrottle:
    """Per-user flood limit plus the lock that serializes a user's updates."""

    def __init__(self, burst_max: int | None = None, burst_window: float | None = None) -> None:
        self._states: dict[str, _UserState] = {}
        self._burst_max = burst_max if burst_max is not None else settings.BOT_BURST_MAX
        self._burst_window = burst_window if burst_window is not None else settings.BOT_BURST_WINDOW_SEC
        self._last_prune = float("-inf")

    def _state(self, user_id: str) -> _UserState:
        if user_id not in self._states:
            self._states[user_id] = _UserState()
        return self._states[user_id]

    def check(self, user_id: str, now: float | None = None) -> ThrottleDecision:
        now = time.monotonic() if now is None else now
        self._prune(now)
        state = self._state(user_id)

        while state.burst and now - state.burst[0] > self._burst_window:
            state.burst.popleft()

        if len(state.burst) >= self._burst_max:
            retry = max(1, int(self._burst_window - (now - state.burst[0])))
            return ThrottleDecision(False, retry_after=retry, reason="bot.throttle.burst")

        state.burst.append(now)
        return ThrottleDecision(True)

    def _prune(self, now: float) -> None:
        # At most once per window; a user with a running or queued update stays.
        if now - self._last_prune < self._burst_window:
            return
        self._last_prune = now
        for user_id, state in list(self._states.items()):
            if state.active == 0 and (not state.burst or now - state.burst[-1] > self._burst_window):
                del self._states[user_id]

    @asynccontextmanager
    async def serialized(self, user_id: str) -> AsyncIterator[None]:
        state = self._state(user_id)
        state.active += 1
        try:
            async with state.lock:
                yield
        finally:
            state.active -= 1

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._states


_throttle = BotThrottle()


def throttle() -> BotThrottle:
    return _throttle
