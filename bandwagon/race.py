"""Redundant-request race.

The upstream API drops or stalls a good share of requests. Instead of
retrying one request at a time, the same GET is sent by ``fanout``
concurrent attempts, each on its own transport. The first attempt that
reads a complete body wins, the others are cancelled, and a single
deadline bounds the whole race.

Usage:
    from bandwagon.race import race
    from bandwagon.types import RequestTemplate

    body = await race(RequestTemplate("https://example.com/v1/getServiceInfo"), fanout=20)
"""

import asyncio
from typing import List, Set

from bandwagon.errors import AllAttemptsFailed, RaceTimeout
from bandwagon.transport import ClientFactory, make_async_client
from bandwagon.types import RequestTemplate
from bandwagon.utils.logging import get_logger

logger = get_logger(__name__, prefix="Race")

DEFAULT_FANOUT = 20
DEFAULT_DEADLINE = 3.0  # seconds
CANCEL_GRACE = 0.1  # seconds

# Cancelled attempts that outlived the grace period.
_abandoned: Set[asyncio.Task] = set()


async def race(
    template: RequestTemplate,
    fanout: int = DEFAULT_FANOUT,
    *,
    deadline: float = DEFAULT_DEADLINE,
    fail_fast: bool = False,
    client_factory: ClientFactory = make_async_client,
) -> bytes:
    """
    Send ``template`` through ``fanout`` independent attempts and return the
    first body read successfully.

    The HTTP status is not inspected: any attempt that reads a full body
    wins. Attempt errors are recorded but never raised on their own.

    Args:
        template: The GET to duplicate; never mutated
        fanout: Number of concurrent attempts (>= 1)
        deadline: Race-wide wall-clock limit in seconds
        fail_fast: Raise AllAttemptsFailed as soon as every attempt has
            failed instead of waiting out the deadline
        client_factory: Zero-argument callable returning a fresh
            ``httpx.AsyncClient``; called once per attempt

    Returns:
        The winning response body

    Raises:
        RaceTimeout: No attempt succeeded before the deadline
        AllAttemptsFailed: Every attempt failed (only with fail_fast)
    """
    if fanout < 1:
        raise ValueError(f"fanout must be at least 1, got {fanout}")
    if deadline <= 0:
        raise ValueError(f"deadline must be positive, got {deadline}")

    loop = asyncio.get_running_loop()
    # Single-slot rendezvous: only the first writer fills it.
    winner: asyncio.Future = loop.create_future()
    errors: List[BaseException] = []
    started = loop.time()

    async def attempt(index: int) -> None:
        try:
            async with client_factory() as client:
                response = await client.send(template.build_request(client))
                body = response.content
        except Exception as e:
            errors.append(e)
            logger.debug(f"Attempt {index} failed: {e!r}")
            if fail_fast and len(errors) == fanout and not winner.done():
                winner.set_exception(AllAttemptsFailed(fanout, list(errors)))
            return

        if winner.done():
            logger.debug(f"Attempt {index} finished after the race resolved, discarding")
            return

        logger.debug(
            f"Attempt {index} won in {loop.time() - started:.3f}s "
            f"(status {response.status_code}, {len(body)} bytes)"
        )
        winner.set_result(body)

    tasks = [
        asyncio.create_task(attempt(i), name=f"bandwagon-race-{i}")
        for i in range(fanout)
    ]

    try:
        done, _ = await asyncio.wait({winner}, timeout=deadline)
    finally:
        for task in tasks:
            task.cancel()
        if winner.done():
            if not winner.cancelled():
                # Mark a fail-fast error as retrieved if the caller cancelled us.
                winner.exception()
        else:
            winner.cancel()
        await _release(tasks)

    if not done:
        logger.warning(
            f"No attempt succeeded within {deadline:.3f}s "
            f"({len(errors)}/{fanout} attempts failed) for {template.url}"
        )
        raise RaceTimeout(deadline, fanout, list(errors))

    return winner.result()


async def _release(tasks: List[asyncio.Task]) -> None:
    """
    Give cancelled attempts CANCEL_GRACE seconds to close their transports.

    Attempts still running after that are left to finish on their own in
    ``_abandoned``; the rendezvous is already resolved, so they cannot
    deliver anything.
    """
    for task in tasks:
        _abandoned.add(task)
        task.add_done_callback(_reap)

    _, pending = await asyncio.wait(tasks, timeout=CANCEL_GRACE)
    if pending:
        logger.debug(
            f"{len(pending)} attempt(s) still running {CANCEL_GRACE:.3f}s after cancel, "
            f"leaving them to finish"
        )


def _reap(task: asyncio.Task) -> None:
    _abandoned.discard(task)
    if not task.cancelled() and task.exception() is not None:
        logger.debug(f"{task.get_name()} ended with {task.exception()!r}")


def race_sync(
    template: RequestTemplate,
    fanout: int = DEFAULT_FANOUT,
    *,
    deadline: float = DEFAULT_DEADLINE,
    fail_fast: bool = False,
    client_factory: ClientFactory = make_async_client,
) -> bytes:
    """Run :func:`race` on a fresh event loop. Not usable inside a running loop."""
    return asyncio.run(
        race(
            template,
            fanout,
            deadline=deadline,
            fail_fast=fail_fast,
            client_factory=client_factory,
        )
    )
