"""Pool de tasks do processamento em background dos webhooks.

O POST responde antes do dispatch; cada payload vira uma task asyncio.
O pool limita a concorrência, mantém referência às tasks vivas e as
aguarda no shutdown. Uma instância por aplicação, criada no lifespan
(`app.state.task_pool`).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

MAX_CONCURRENT_TASKS = 100


class ProcessingTaskPool:
    """Tasks de processamento em andamento.

    Args:
        max_concurrent: Máximo de payloads processados ao mesmo tempo;
            os demais esperam no semáforo.
    """

    def __init__(self, max_concurrent: int = MAX_CONCURRENT_TASKS) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._tasks: set[asyncio.Task[Any]] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def schedule(self, coroutine: Awaitable[Any], *, correlation_id: str) -> asyncio.Task[Any]:
        task = asyncio.create_task(self._run_limited(coroutine))
        self._tasks.add(task)
        task.add_done_callback(self._forget)
        logger.info(
            "webhook_processing_scheduled",
            extra={
                "correlation_id": correlation_id,
                "mode": "async",
                "active_tasks": len(self._tasks),
            },
        )
        return task

    async def drain(self, timeout_seconds: float) -> None:
        """Espera as tasks pendentes; cancela as que passarem do timeout."""
        if not self._tasks:
            return

        logger.info(
            "webhook_processing_shutdown_wait",
            extra={"pending_tasks": len(self._tasks), "timeout_seconds": timeout_seconds},
        )
        _, overdue = await asyncio.wait(set(self._tasks), timeout=timeout_seconds)
        if not overdue:
            return

        for task in overdue:
            task.cancel()
        await asyncio.gather(*overdue, return_exceptions=True)
        logger.warning(
            "webhook_processing_shutdown_cancelled",
            extra={"cancelled_tasks": len(overdue)},
        )

    async def _run_limited(self, coroutine: Awaitable[Any]) -> Any:
        async with self._semaphore:
            return await coroutine

    def _forget(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={"error_type": type(exc).__name__, "active_tasks": len(self._tasks)},
            )

