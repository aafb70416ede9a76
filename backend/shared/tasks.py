"""
Deferred side-effect dispatch.

Mutations hand follow-up work (notification fan-out, frequency tracking) to a
TaskDispatcher instead of running it inline. Delivery is best-effort: a task
runs after the triggering request has been answered, and nothing orders it
relative to a client's next read.
"""

import inspect
import logging
from typing import Any, Callable, Protocol, runtime_checkable

from fastapi import BackgroundTasks
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


@runtime_checkable
class TaskDispatcher(Protocol):
    """Interface for scheduling fire-and-forget work."""

    def dispatch(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """
        Schedule func(*args, **kwargs) to run later.

        The caller must not assume the task has run when this returns.
        """
        ...


class BackgroundTaskDispatcher:
    """
    Dispatcher backed by FastAPI's BackgroundTasks.

    Tasks run in-process once the response has been sent, in the
    order they were dispatched. A failing task is logged and does not
    stop the tasks queued after it.
    """

    def __init__(self, background_tasks: BackgroundTasks) -> None:
        self._background_tasks = background_tasks

    def dispatch(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        logger.debug(f"Scheduling background task {_task_name(func)}")
        self._background_tasks.add_task(run_isolated, func, *args, **kwargs)


def _task_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", repr(func))


async def run_isolated(func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Run one task, logging instead of raising when it fails."""
    try:
        if inspect.iscoroutinefunction(func):
            await func(*args, **kwargs)
        else:
            result = await run_in_threadpool(func, *args, **kwargs)
            if inspect.isawaitable(result):
                await result
    except Exception:
        logger.exception(f"Background task {_task_name(func)} failed")


class InlineTaskDispatcher:
    """
    Dispatcher that collects tasks and runs them on demand.

    Used by scripts and tests where no request lifecycle exists.
    """

    def __init__(self) -> None:
        self.pending: list[tuple[Callable[..., Any], tuple, dict]] = []

    def dispatch(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self.pending.append((func, args, kwargs))

    async def run_pending(self) -> int:
        """Run and clear all queued tasks. Returns the number of tasks run."""
        count = 0
        while self.pending:
            func, args, kwargs = self.pending.pop(0)
            result = func(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
            count += 1
        return count
