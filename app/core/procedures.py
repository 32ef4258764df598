"""
Authorized-procedure wrapper.

Every user-scoped service operation is declared as::

    @authorized
    def get_something(ctx: AuthedContext, ...):
        ...

and called with a plain ``RequestContext``. Anonymous callers get a
``NotAuthenticatedError`` raised from the wrapper itself, outside the
handler's own error handling, so it always reaches the caller.
"""
import functools
import logging
from typing import Callable, TypeVar

from app.core.auth_dependency import AuthedContext, RequestContext
from app.core.errors import NotAuthenticatedError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def authorized(handler: F) -> F:
    @functools.wraps(handler)
    def wrapper(ctx: RequestContext, *args, **kwargs):
        if ctx.user is None:
            logger.info(f"Rejected anonymous call to {handler.__name__}")
            raise NotAuthenticatedError()
        authed = AuthedContext(db=ctx.db, user=ctx.user, views=ctx.views)
        return handler(authed, *args, **kwargs)

    return wrapper
