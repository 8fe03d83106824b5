"""Handler invocation shared by dispatch.

A route handler is any ``handler(request, params)`` callable. Coroutine
functions hand back something to await; plain functions hand back the
response itself. ``invoke`` hides that difference from the router.
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Run *handler* and resolve its result to a final value.

    Both shapes land here::

        def health(request, params):
            return Response(status=204)

        async def user(request, params):
            return Response(body=await fetch_user(params["userId"]))
    """
    outcome = handler(*args, **kwargs)
    return await outcome if inspect.isawaitable(outcome) else outcome
