"""
Periodic cache refresh.

The refresher re-runs discovery on a fixed delay measured from the end
of the previous pass, so a slow scan pushes the next one back instead
of overlapping it.
"""

from __future__ import annotations

import asyncio as _asyncio
import logging as _logging

import skillserver.constants as constants
import skillserver.skills.cache as cache_module
import skillserver.skills.discovery as discovery

_logger = _logging.getLogger(__name__)


class SkillRefresher:
    """Runs SkillDiscovery.scan_all in the background at a fixed delay."""

    def __init__(
        self,
        skill_discovery: discovery.SkillDiscovery,
        cache: cache_module.SkillCache,
        interval: float = constants.DEFAULT_REFRESH_INTERVAL_SECONDS,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")
        self._discovery = skill_discovery
        self._cache = cache
        self._interval = interval
        self._task: _asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        """Seconds between the end of one pass and the start of the next."""
        return self._interval

    @property
    def running(self) -> bool:
        """Whether the background task is active."""
        return self._task is not None and not self._task.done()

    async def refresh_once(self) -> bool:
        """
        Run one refresh pass, logging rather than raising on failure.

        Returns:
            True if the pass completed, False if it failed. On failure the
            cache keeps its previous contents.
        """
        _logger.info("Refreshing skills...")
        try:
            await self._discovery.scan_all(self._cache)
        except Exception:
            _logger.exception("Error refreshing skills")
            return False
        _logger.info("Skills refreshed successfully")
        return True

    async def run_forever(self) -> None:
        """Sleep, refresh, repeat. Only cancellation stops the loop."""
        while True:
            await _asyncio.sleep(self._interval)
            await self.refresh_once()

    def start(self) -> None:
        """Start the background refresh task on the running loop."""
        if self.running:
            return
        self._task = _asyncio.get_running_loop().create_task(
            self.run_forever(), name="skill-refresh"
        )

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except _asyncio.CancelledError:
            pass
