"""
Request-scoped helpers.

``bound_to_request`` ties a service call to the lifetime of the HTTP request
that triggered it: if the client disconnects first, the call is cancelled
and ``ClientDisconnected`` is raised instead of a response being written.
"""
from typing import Awaitable, Optional, TypeVar

import anyio
from starlette.requests import Request

from users_api.domain.exceptions import ClientDisconnected

T = TypeVar("T")


async def bound_to_request(request: Request, awaitable: Awaitable[T]) -> T:
    """Await ``awaitable`` unless ``request``'s client goes away first."""
    disconnected = False
    error: Optional[Exception] = None
    result = None
    
    async with anyio.create_task_group() as tg:
        
        async def watch_for_disconnect() -> None:
            nonlocal disconnected
            # Body messages were already consumed or are empty; skip them
            while (await request.receive())["type"] != "http.disconnect":
                pass
            disconnected = True
            tg.cancel_scope.cancel()
        
        tg.start_soon(watch_for_disconnect)
        try:
            result = await awaitable
        except Exception as e:
            error = e
        tg.cancel_scope.cancel()
    
    if disconnected:
        raise ClientDisconnected()
    if error is not None:
        raise error
    return result
