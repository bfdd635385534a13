"""Shared error mapping for repositories."""
import logging
from typing import Awaitable, TypeVar

import httpx

from financefreedom.exceptions import FinanceFreedomError
from financefreedom.models.result import Result
from financefreedom.services.error_messages import describe_exception

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_catching(operation: str, call: Awaitable[T]) -> Result[T]:
    """
    Await a backend call and wrap its outcome in a Result.

    Every failure is scoped to this one call and reported as a message;
    nothing is raised to the caller.
    """
    try:
        return Result.success(await call)
    except httpx.HTTPStatusError as e:
        return Result.failure(describe_exception(e))
    except FinanceFreedomError as e:
        logger.warning("%s failed: %s", operation, e)
        return Result.failure(str(e))
    except httpx.HTTPError as e:
        logger.warning("%s failed: %s", operation, e)
        return Result.failure(describe_exception(e))
    except Exception as e:
        logger.exception("%s failed unexpectedly", operation)
        return Result.failure(describe_exception(e))
