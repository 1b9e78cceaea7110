import asyncio
from typing import Awaitable, Callable, Iterable, List, TypeVar

T = TypeVar("T")


async def gather_or_cancel(aws: Iterable[Awaitable[T]]) -> List[T]:
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        # nothing from the batch may still be running once we return or raise
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


async def run_in_thread(func: Callable[[], T]) -> T:
    # a cancelled caller still waits for the thread, so it never outlives the resources it reads
    thread_task = asyncio.create_task(asyncio.to_thread(func))
    try:
        return await asyncio.shield(thread_task)
    except asyncio.CancelledError:
        await thread_task
        raise
