"""FastAPI exception handlers rendering ddderr errors as problem details.

Usage:
    app = FastAPI()
    register_problem_handlers(app)

DDDError raised anywhere in a route becomes an ``application/problem+json``
response with the mapped HTTP status; any other exception becomes a 500
problem carrying its message.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from ddderr.config import ProblemSettings
from ddderr.config import settings as default_settings
from ddderr.errors import DDDError, get_parent_description
from ddderr.problem import Problem, build_problem

PROBLEM_MEDIA_TYPE = "application/problem+json"

ExceptionHandlerCallable = Callable[[Request, Exception], Awaitable[Response]]

logger = logging.getLogger(__name__)


class ProblemResponse(JSONResponse):
    media_type = PROBLEM_MEDIA_TYPE


def problem_response(problem: Problem) -> ProblemResponse:
    return ProblemResponse(status_code=problem.status_code, content=problem.to_dict())


def make_problem_handler(
    config: ProblemSettings | None = None,
) -> Callable[[Request, Exception], Awaitable[ProblemResponse]]:
    """Build an exception handler bound to ``config`` (module settings by default)."""
    cfg = config if config is not None else default_settings

    async def problem_handler(request: Request, exc: Exception) -> ProblemResponse:
        instance = request.url.path if cfg.INSTANCE_FROM_PATH else ""
        problem = build_problem(cfg.PROBLEM_TYPE, instance, exc)

        if problem.status_code >= 500:
            if cfg.LOG_SERVER_ERRORS:
                exc_info = None
                if not isinstance(exc, DDDError):
                    exc_info = (type(exc), exc, exc.__traceback__)
                logger.error(
                    "%s %s failed with %s: %s (parent: %s)",
                    request.method,
                    request.url.path,
                    problem.status,
                    problem.detail,
                    get_parent_description(exc) or "-",
                    exc_info=exc_info,
                )
        else:
            logger.debug(
                "%s %s rejected with %s: %s",
                request.method,
                request.url.path,
                problem.status,
                problem.detail,
            )

        return problem_response(problem)

    return problem_handler


def register_problem_handlers(app: FastAPI, config: ProblemSettings | None = None) -> None:
    """Attach problem handlers for DDDError and unexpected exceptions to ``app``."""
    handler = cast(ExceptionHandlerCallable, make_problem_handler(config))
    app.add_exception_handler(DDDError, handler)
    app.add_exception_handler(Exception, handler)
