"""The render interception handshake between a View and its delegate."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable


class RenderInterceptionTimeout(TimeoutError):
    """An intercepted render was not resumed within the configured timeout."""


class ResumeSignal:
    """
    One-shot signal handed to the delegate as `resume`.

    Calling it (any number of times, from the loop thread) releases the
    waiting render exactly once.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[None] = asyncio.get_running_loop().create_future()

    def __call__(self) -> None:
        if not self._future.done():
            self._future.set_result(None)

    @property
    def is_set(self) -> bool:
        return self._future.done()

    async def wait(self, timeout: float | None = None) -> None:
        if timeout is None:
            await self._future
            return
        try:
            await asyncio.wait_for(asyncio.shield(self._future), timeout)
        except asyncio.TimeoutError as exc:
            raise RenderInterceptionTimeout(
                f"Render was not resumed within {timeout}s"
            ) from exc


@dataclass
class RenderInterception:
    """Options passed to ViewDelegate.allows_immediate_render()."""

    resume: ResumeSignal
    render: Callable[[], Awaitable[None]]
    render_method: str | None = None
